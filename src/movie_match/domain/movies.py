"""Domain models for catalog movies."""

from dataclasses import dataclass, field

STREAMING_SERVICES = (
    "Netflix",
    "Disney+",
    "HBO Max",
    "Prime Video",
    "Hulu",
    "Paramount+",
    "Apple TV+",
)


@dataclass(frozen=True)
class Movie:
    """A candidate item shown on a deck card."""

    id: str
    title: str
    year: int
    poster_url: str
    genres: tuple[str, ...]
    rating: float
    streaming_on: tuple[str, ...]
    synopsis: str
    backdrop_url: str | None = field(default=None)

    def available_on(self, sources: frozenset[str]) -> bool:
        """Return True if the movie streams on any of the sources."""
        if not sources:
            return True
        return any(service in sources for service in self.streaming_on)
