"""Append-only swipe ledger."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from movie_match.domain.swipes import SwipeDirection, SwipeRecord
from movie_match.errors import NotAParticipantError
from movie_match.services.notifier import RoomNotifier, SwipeRecorded
from movie_match.services.rooms import RoomService

_logger = logging.getLogger(__name__)


class SwipeRepository(Protocol):
    """Persistence interface for swipes."""

    def append_swipe(
        self,
        room_id: UUID,
        participant_id: str,
        item_id: str,
        direction: SwipeDirection,
    ) -> SwipeRecord:
        """Append a swipe; raise WriteFailureError if storage is unavailable."""

    def list_right_swipes(
        self, room_id: UUID, item_id: str | None = None
    ) -> list[SwipeRecord]:
        """Return right swipes for a room, oldest first."""


@dataclass
class SwipeService:
    """Records participant decisions and announces them to the room."""

    repository: SwipeRepository
    room_service: RoomService
    notifier: RoomNotifier

    def record_swipe(
        self,
        room_id: UUID,
        participant_id: str,
        item_id: str,
        direction: SwipeDirection | str,
    ) -> SwipeRecord:
        """Append a swipe to the ledger.

        Repeated swipes on the same item are stored as-is; match detection
        only asks whether a right swipe ever happened.
        """
        room = self.room_service.get_room(room_id)
        if not room.occupies(participant_id):
            raise NotAParticipantError(participant_id)

        swipe = self.repository.append_swipe(
            room_id=room.id,
            participant_id=participant_id,
            item_id=str(item_id),
            direction=SwipeDirection(direction),
        )
        delivered = self.notifier.publish(room.code, SwipeRecorded(swipe=swipe))
        _logger.info(
            "Swipe recorded: code=%s item=%s direction=%s subscribers=%s",
            room.code,
            swipe.item_id,
            swipe.direction.value,
            delivered,
        )
        return swipe
