"""Per-client decks with background replenishment."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from movie_match.domain.movies import Movie
from movie_match.errors import SourceUnavailableError

_logger = logging.getLogger(__name__)


class MovieSource(Protocol):
    """Paginated source of candidate movies."""

    async def fetch_page(self, page: int = 1) -> list[Movie]:
        """Return one page of movies; an empty page means no more pages."""


@dataclass
class Deck:
    """Ordered, de-duplicated movies one client swipes through."""

    allowed_sources: frozenset[str]
    items: list[Movie] = field(default_factory=list)
    cursor: int = 0
    next_page: int = 1
    exhausted: bool = False
    _seen: set[str] = field(default_factory=set, repr=False)
    pending_task: "asyncio.Task[int] | None" = field(default=None, repr=False)

    @property
    def remaining(self) -> int:
        return len(self.items) - self.cursor

    @property
    def is_finished(self) -> bool:
        """No more cards now or later."""
        return self.exhausted and self.remaining == 0 and not self.is_replenishing

    @property
    def is_replenishing(self) -> bool:
        task = self.pending_task
        if task is None or task.done():
            return False
        # A task left behind on a closed loop never finishes.
        return not task.get_loop().is_closed()

    def current(self) -> Movie | None:
        if self.cursor < len(self.items):
            return self.items[self.cursor]
        return None

    def upcoming(self, limit: int = 3) -> list[Movie]:
        return self.items[self.cursor : self.cursor + limit]

    def merge(self, movies: Iterable[Movie]) -> int:
        """Append movies allowed by the filter that are not already present."""
        added = 0
        for movie in movies:
            if movie.id in self._seen or not movie.available_on(self.allowed_sources):
                continue
            self._seen.add(movie.id)
            self.items.append(movie)
            added += 1
        return added


@dataclass
class DeckAssembler:
    """Builds decks from a movie source and keeps them topped up."""

    source: MovieSource
    low_water_mark: int = 5
    max_pages_per_fill: int = 3

    async def build(self, allowed_sources: Iterable[str]) -> Deck:
        """Create a deck and load it past the low-water mark."""
        deck = Deck(allowed_sources=frozenset(allowed_sources))
        await self.fill(deck)
        return deck

    async def fill(self, deck: Deck) -> int:
        """Fetch pages until the deck is above the low-water mark.

        A catalog outage stops the fill without exhausting the deck; the
        next fill retries the same page.
        """
        added = 0
        for _ in range(self.max_pages_per_fill):
            if deck.exhausted or deck.remaining > self.low_water_mark:
                break
            try:
                added += await self.replenish(deck)
            except SourceUnavailableError as exc:
                _logger.warning(
                    "Deck not growing: page=%s error=%s", deck.next_page, exc
                )
                break
        return added

    async def replenish(self, deck: Deck) -> int:
        """Fetch the next page into the deck and return how many were added."""
        if deck.exhausted:
            return 0
        page = deck.next_page
        movies = await self.source.fetch_page(page)
        if not movies:
            deck.exhausted = True
            _logger.info("Deck exhausted: page=%s", page)
            return 0
        deck.next_page = page + 1
        return deck.merge(movies)

    def advance(self, deck: Deck) -> Movie | None:
        """Move past the current card and return it.

        Schedules a background fill when the remainder drops to the
        low-water mark; the caller never waits on it.
        """
        movie = deck.current()
        if movie is not None:
            deck.cursor += 1
        self.schedule_replenish(deck)
        return movie

    def schedule_replenish(self, deck: Deck) -> "asyncio.Task[int] | None":
        """Start a fill task unless one is running or none is needed."""
        if deck.exhausted or deck.is_replenishing:
            return None
        if deck.remaining > self.low_water_mark:
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return None
        deck.pending_task = loop.create_task(self._background_fill(deck))
        return deck.pending_task

    async def _background_fill(self, deck: Deck) -> int:
        try:
            return await self.fill(deck)
        except Exception:
            # The deck keeps serving loaded cards; the next advance retries.
            _logger.exception("Deck replenishment failed: page=%s", deck.next_page)
            return 0


@dataclass
class DeckRegistry:
    """Server-held decks, one per participant in a room."""

    assembler: DeckAssembler
    max_decks: int = 1024
    _decks: dict[tuple[str, str], Deck] = field(default_factory=dict, repr=False)

    async def deck_for(
        self, code: str, participant_id: str, allowed_sources: Iterable[str]
    ) -> Deck:
        """Return the participant's deck, building or topping it up as needed."""
        key = (code, participant_id)
        deck = self._decks.get(key)
        if deck is None:
            deck = await self.assembler.build(allowed_sources)
            deck = self._decks.setdefault(key, deck)
            while len(self._decks) > self.max_decks:
                self._decks.pop(next(iter(self._decks)))
            return deck
        if deck.is_replenishing:
            if deck.remaining == 0:
                await deck.pending_task
        elif deck.remaining <= self.assembler.low_water_mark:
            await self.assembler.fill(deck)
        return deck

    def advance_past(
        self, code: str, participant_id: str, item_id: str
    ) -> Movie | None:
        """Advance the participant's deck if item_id is its current card."""
        deck = self._decks.get((code, participant_id))
        if deck is None:
            return None
        current = deck.current()
        if current is None or current.id != item_id:
            return None
        return self.assembler.advance(deck)
