"""Supabase-backed room repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from movie_match.domain.rooms import RoomRecord
from movie_match.errors import (
    CreationConflictError,
    ReadFailureError,
    WriteFailureError,
)
from movie_match.services.rooms import RoomRepository

_COLUMNS = "id, code, streaming_services, user1_id, user2_id, created_at"
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseRoomRepository(RoomRepository):
    """Supabase implementation for rooms."""

    client: Client

    def insert_room(
        self, code: str, allowed_sources: list[str], participant_id: str
    ) -> RoomRecord:
        """Insert a waiting room; the code column carries a unique constraint."""
        try:
            response = (
                self.client.table("rooms")
                .insert(
                    {
                        "code": code,
                        "streaming_services": allowed_sources,
                        "user1_id": participant_id,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise CreationConflictError(code) from exc
            raise WriteFailureError(f"Failed to create room: {exc.message}") from exc
        except httpx.HTTPError as exc:
            raise WriteFailureError("Failed to create room") from exc
        if not response.data:
            raise WriteFailureError("Failed to create room")
        return _to_room(response.data[0])

    def get_by_code(self, code: str) -> RoomRecord | None:
        """Return a room by code, if present."""
        return self._select_one("code", code)

    def get_by_id(self, room_id: UUID) -> RoomRecord | None:
        """Return a room by id, if present."""
        return self._select_one("id", str(room_id))

    def claim_second_slot(self, code: str, participant_id: str) -> RoomRecord | None:
        """Fill user2_id with a single conditional UPDATE ... WHERE user2_id IS NULL."""
        try:
            response = (
                self.client.table("rooms")
                .update({"user2_id": participant_id})
                .eq("code", code)
                .is_("user2_id", "null")
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise WriteFailureError("Failed to join room") from exc
        if not response.data:
            return None
        return _to_room(response.data[0])

    def _select_one(self, column: str, value: str) -> RoomRecord | None:
        try:
            response = (
                self.client.table("rooms")
                .select(_COLUMNS)
                .eq(column, value)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise ReadFailureError("Failed to load room") from exc
        if not response.data:
            return None
        return _to_room(response.data[0])


def _to_room(row: dict[str, object]) -> RoomRecord:
    return RoomRecord(
        id=UUID(str(row["id"])),
        code=str(row["code"]),
        allowed_sources=tuple(row.get("streaming_services") or ()),
        slot_a=row.get("user1_id"),
        slot_b=row.get("user2_id"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
