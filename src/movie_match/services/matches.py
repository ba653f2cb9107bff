"""Match detection derived from the swipe ledger."""

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from movie_match.domain.swipes import SwipeDirection, SwipeRecord
from movie_match.services.notifier import RoomEvent, SwipeRecorded
from movie_match.services.rooms import RoomService
from movie_match.services.swipes import SwipeRepository

_logger = logging.getLogger(__name__)


def derive_matches(
    swipes: Iterable[SwipeRecord], slot_a: str | None, slot_b: str | None
) -> list[str]:
    """Return item ids right-swiped by both slots, in order of completion."""
    if not slot_a or not slot_b:
        return []
    first_right: dict[str, dict[str, datetime]] = {}
    for swipe in swipes:
        if swipe.direction != SwipeDirection.RIGHT:
            continue
        if swipe.participant_id not in (slot_a, slot_b):
            continue
        by_participant = first_right.setdefault(swipe.item_id, {})
        seen_at = by_participant.get(swipe.participant_id)
        if seen_at is None or swipe.created_at < seen_at:
            by_participant[swipe.participant_id] = swipe.created_at

    completed = [
        (max(by_participant.values()), item_id)
        for item_id, by_participant in first_right.items()
        if slot_a in by_participant and slot_b in by_participant
    ]
    return [item_id for _, item_id in sorted(completed)]


@dataclass
class MatchService:
    """Answers match questions by reading the ledger fresh each time."""

    swipe_repository: SwipeRepository
    room_service: RoomService

    def is_match(self, room_id: UUID, item_id: str) -> bool:
        """Return True if both occupied slots swiped right on the item."""
        room = self.room_service.get_room(room_id)
        if not room.is_active:
            return False
        swipes = self.swipe_repository.list_right_swipes(room.id, item_id=str(item_id))
        return bool(derive_matches(swipes, room.slot_a, room.slot_b))

    def all_matches(self, room_id: UUID) -> list[str]:
        """Return every matched item id for the room."""
        room = self.room_service.get_room(room_id)
        if not room.is_active:
            return []
        swipes = self.swipe_repository.list_right_swipes(room.id)
        return derive_matches(swipes, room.slot_a, room.slot_b)

    async def watch_matches(
        self,
        events: AsyncIterable[RoomEvent],
        already_seen: Iterable[str] = (),
    ) -> AsyncIterator[str]:
        """Yield each newly matched item id once per consumer.

        Redelivered or repeated swipe events re-run the check, which is
        harmless; the seen set keeps the consumer from raising a match twice.
        """
        seen = set(already_seen)
        async for event in events:
            item_id = self.match_for_event(event, seen)
            if item_id is not None:
                yield item_id

    def match_for_event(self, event: RoomEvent, seen: set[str]) -> str | None:
        """Return the item id if the event completed a match not yet in seen."""
        if not isinstance(event, SwipeRecorded):
            return None
        swipe = event.swipe
        if swipe.direction != SwipeDirection.RIGHT or swipe.item_id in seen:
            return None
        if not self.is_match(swipe.room_id, swipe.item_id):
            return None
        seen.add(swipe.item_id)
        _logger.info("Match found: room=%s item=%s", swipe.room_id, swipe.item_id)
        return swipe.item_id
