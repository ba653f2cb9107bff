"""Domain models for the swipe ledger."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class SwipeDirection(StrEnum):
    """Direction of a swipe decision."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class SwipeRecord:
    """Immutable swipe fact appended to a room's ledger."""

    id: UUID
    room_id: UUID
    participant_id: str
    item_id: str
    direction: SwipeDirection
    created_at: datetime
