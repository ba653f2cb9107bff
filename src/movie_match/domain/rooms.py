"""Domain models for rooms."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RoomRecord:
    """Represents a persisted room and its two participant slots."""

    id: UUID
    code: str
    allowed_sources: tuple[str, ...]
    slot_a: str | None
    slot_b: str | None
    created_at: datetime

    @property
    def is_active(self) -> bool:
        """Return True once both slots are filled."""
        return bool(self.slot_a and self.slot_b)

    @property
    def status(self) -> str:
        return "active" if self.is_active else "waiting"

    def occupies(self, participant_id: str) -> bool:
        """Return True if the participant holds one of the slots."""
        return participant_id in {self.slot_a, self.slot_b} - {None}


@dataclass(frozen=True)
class CreatedRoom:
    """Result of creating a room."""

    code: str
    participant_id: str
    room: RoomRecord


@dataclass(frozen=True)
class JoinResult:
    """Result of joining a room; spectators get no participant id."""

    participant_id: str | None
    room: RoomRecord

    @property
    def role(self) -> str:
        return "participant" if self.participant_id else "spectator"
