"""Supabase-backed swipe ledger."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from movie_match.domain.swipes import SwipeDirection, SwipeRecord
from movie_match.errors import ReadFailureError, WriteFailureError
from movie_match.services.swipes import SwipeRepository

_COLUMNS = "id, room_id, user_id, movie_id, direction, created_at"


@dataclass
class SupabaseSwipeRepository(SwipeRepository):
    """Supabase implementation for the append-only swipes table."""

    client: Client

    def append_swipe(
        self,
        room_id: UUID,
        participant_id: str,
        item_id: str,
        direction: SwipeDirection,
    ) -> SwipeRecord:
        """Insert a swipe row and return it."""
        try:
            response = (
                self.client.table("swipes")
                .insert(
                    {
                        "room_id": str(room_id),
                        "user_id": participant_id,
                        "movie_id": item_id,
                        "direction": direction.value,
                    }
                )
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise WriteFailureError("Failed to record swipe") from exc
        if not response.data:
            raise WriteFailureError("Failed to record swipe")
        return _to_swipe(response.data[0])

    def list_right_swipes(
        self, room_id: UUID, item_id: str | None = None
    ) -> list[SwipeRecord]:
        """Return right swipes for a room, optionally for one movie."""
        query = (
            self.client.table("swipes")
            .select(_COLUMNS)
            .eq("room_id", str(room_id))
            .eq("direction", SwipeDirection.RIGHT.value)
        )
        if item_id is not None:
            query = query.eq("movie_id", item_id)
        try:
            response = query.order("created_at").execute()
        except (APIError, httpx.HTTPError) as exc:
            raise ReadFailureError("Failed to load swipes") from exc
        return [_to_swipe(row) for row in response.data or []]


def _to_swipe(row: dict[str, object]) -> SwipeRecord:
    return SwipeRecord(
        id=UUID(str(row["id"])),
        room_id=UUID(str(row["room_id"])),
        participant_id=str(row["user_id"]),
        item_id=str(row["movie_id"]),
        direction=SwipeDirection(row["direction"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
