"""Error taxonomy for room coordination and matching."""


class MovieMatchError(Exception):
    """Base class for recoverable application errors."""


class RoomNotFoundError(MovieMatchError):
    """No room exists for the given code or id."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Room not found: {key}")
        self.key = key


class CreationConflictError(MovieMatchError):
    """The minted room code is already taken."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Room code already in use: {code}")
        self.code = code


class ExhaustedRetriesError(MovieMatchError):
    """Every minted room code collided."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Could not mint a free room code after {attempts} attempts")
        self.attempts = attempts


class WriteFailureError(MovieMatchError):
    """Storage rejected or could not complete a write."""


class ReadFailureError(MovieMatchError):
    """Storage could not be read."""


class SourceUnavailableError(MovieMatchError):
    """The movie catalog could not be reached."""


class NotAParticipantError(MovieMatchError):
    """The identity does not occupy a slot in the room."""

    def __init__(self, participant_id: str) -> None:
        super().__init__(f"Not a participant of this room: {participant_id}")
        self.participant_id = participant_id
