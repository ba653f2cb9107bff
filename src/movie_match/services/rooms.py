"""Room lifecycle and slot assignment."""

import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from movie_match.domain.rooms import CreatedRoom, JoinResult, RoomRecord
from movie_match.errors import (
    CreationConflictError,
    ExhaustedRetriesError,
    RoomNotFoundError,
)
from movie_match.services.identity import (
    generate_room_code,
    new_participant_id,
    normalize_room_code,
)
from movie_match.services.notifier import RoomNotifier, RoomStateChanged

_logger = logging.getLogger(__name__)


class RoomRepository(Protocol):
    """Persistence interface for rooms."""

    def insert_room(
        self, code: str, allowed_sources: list[str], participant_id: str
    ) -> RoomRecord:
        """Insert a waiting room; raise CreationConflictError if the code exists."""

    def get_by_code(self, code: str) -> RoomRecord | None:
        """Return a room by code, if present."""

    def get_by_id(self, room_id: UUID) -> RoomRecord | None:
        """Return a room by id, if present."""

    def claim_second_slot(self, code: str, participant_id: str) -> RoomRecord | None:
        """Atomically fill slot B if it is empty.

        Returns the updated room when this call won the slot, otherwise None.
        """


@dataclass
class RoomService:
    """Coordinates room creation, lookup and joining."""

    repository: RoomRepository
    notifier: RoomNotifier
    max_attempts: int = 5
    code_factory: Callable[[], str] = field(default=generate_room_code)
    id_factory: Callable[[], str] = field(default=new_participant_id)

    def create_room(self, allowed_sources: list[str]) -> CreatedRoom:
        """Create a waiting room with the caller in slot A."""
        sources = list(dict.fromkeys(s.strip() for s in allowed_sources if s.strip()))
        if not sources:
            raise ValueError("At least one streaming service is required")

        participant_id = self.id_factory()
        for attempt in range(1, self.max_attempts + 1):
            code = self.code_factory()
            try:
                room = self.repository.insert_room(code, sources, participant_id)
            except CreationConflictError:
                _logger.warning(
                    "Room code collision: code=%s attempt=%s/%s",
                    code,
                    attempt,
                    self.max_attempts,
                )
                continue
            _logger.info("Room created: code=%s sources=%s", room.code, sources)
            return CreatedRoom(code=room.code, participant_id=participant_id, room=room)
        raise ExhaustedRetriesError(self.max_attempts)

    def resolve_room(self, code: str) -> RoomRecord:
        """Return the room for a code or raise RoomNotFoundError."""
        normalized = normalize_room_code(code)
        room = self.repository.get_by_code(normalized)
        if room is None:
            raise RoomNotFoundError(normalized)
        return room

    def get_room(self, room_id: UUID) -> RoomRecord:
        """Return the room for an id or raise RoomNotFoundError."""
        room = self.repository.get_by_id(room_id)
        if room is None:
            raise RoomNotFoundError(str(room_id))
        return room

    def join_room(self, code: str) -> JoinResult:
        """Join a room, claiming slot B if nobody has it yet.

        Joiners that lose the race, or arrive after the room is active,
        become spectators without a participant id.
        """
        room = self.resolve_room(code)
        if room.is_active:
            return JoinResult(participant_id=None, room=room)

        participant_id = self.id_factory()
        claimed = self.repository.claim_second_slot(room.code, participant_id)
        if claimed is None:
            _logger.info("Join lost slot race: code=%s", room.code)
            return JoinResult(participant_id=None, room=self.resolve_room(room.code))

        _logger.info("Room active: code=%s", claimed.code)
        self.notifier.publish(claimed.code, RoomStateChanged(room=claimed))
        return JoinResult(participant_id=participant_id, room=claimed)

    async def watch_room(self, code: str) -> AsyncIterator[RoomRecord]:
        """Yield the current room, then each slot change as it happens."""
        normalized = normalize_room_code(code)
        with self.notifier.subscribe(normalized) as subscription:
            room = self.resolve_room(normalized)
            yield room
            last_slots = (room.slot_a, room.slot_b)
            async for event in subscription:
                if not isinstance(event, RoomStateChanged):
                    continue
                slots = (event.room.slot_a, event.room.slot_b)
                if slots == last_slots:
                    continue
                last_slots = slots
                yield event.room
