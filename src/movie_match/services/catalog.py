"""Movie catalog with TMDB lookups and a bundled fallback."""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date

import httpx

from movie_match.adapters.tmdb_client import TmdbClient
from movie_match.domain.movies import STREAMING_SERVICES, Movie
from movie_match.errors import SourceUnavailableError
from movie_match.services.cache import Cache
from movie_match.services.sample_catalog import SAMPLE_MOVIES_BY_ID, sample_page

GENRE_NAMES = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Sci-Fi",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

_logger = logging.getLogger(__name__)


@dataclass
class CatalogService:
    """Pages of candidate movies, falling back to bundled samples."""

    tmdb_client: TmdbClient | None
    cache: Cache
    image_base_url: str = "https://image.tmdb.org/t/p/w500"
    page_size: int = 20
    ttl_seconds: int = 3600

    async def fetch_page(self, page: int = 1) -> list[Movie]:
        """Return one page mixing popular and top-rated movies.

        An empty list means the catalog has no more pages. A TMDB outage is
        served from the bundled samples; past the end of the samples it
        raises SourceUnavailableError rather than returning an empty page.
        """
        return await self._cached_page(
            f"tmdb:page:{page}", page, self._fetch_remote_page
        )

    async def fetch_trending(self, page: int = 1) -> list[Movie]:
        """Return one page of this week's trending movies."""
        return await self._cached_page(
            f"tmdb:trending:{page}", page, self._fetch_trending_page
        )

    def get_movie(self, movie_id: str) -> Movie | None:
        """Resolve a movie seen in a recent page or in the samples."""
        cached = self.cache.get(f"tmdb:movie:{movie_id}")
        if isinstance(cached, Movie):
            return cached
        return SAMPLE_MOVIES_BY_ID.get(str(movie_id))

    async def _cached_page(
        self,
        cache_key: str,
        page: int,
        loader: Callable[[int], Awaitable[list[Movie]]],
    ) -> list[Movie]:
        if self.tmdb_client is None:
            return sample_page(page, self.page_size)

        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        try:
            movies = await loader(page)
        except (httpx.HTTPError, SourceUnavailableError) as exc:
            _logger.warning(
                "Catalog unavailable, serving samples: page=%s error=%s", page, exc
            )
            fallback = sample_page(page, self.page_size)
            if not fallback:
                raise SourceUnavailableError(
                    f"Catalog unavailable and no samples for page {page}"
                ) from exc
            return fallback

        self.cache.set(cache_key, movies, ttl_seconds=self.ttl_seconds)
        for movie in movies:
            self.cache.set(
                f"tmdb:movie:{movie.id}", movie, ttl_seconds=self.ttl_seconds
            )
        return movies

    async def _fetch_remote_page(self, page: int) -> list[Movie]:
        popular, top_rated = await asyncio.gather(
            self.tmdb_client.popular(page), self.tmdb_client.top_rated(page)
        )
        return self._convert_lists(popular, top_rated)

    async def _fetch_trending_page(self, page: int) -> list[Movie]:
        return self._convert_lists(await self.tmdb_client.trending(page))

    def _convert_lists(self, *payloads: object) -> list[Movie]:
        merged: dict[str, Movie] = {}
        for payload in payloads:
            if not isinstance(payload, dict) or "results" not in payload:
                raise SourceUnavailableError("Malformed TMDB list response")
            for raw in payload["results"]:
                if not raw.get("poster_path"):
                    continue
                movie = convert_tmdb_movie(raw, self.image_base_url)
                merged.setdefault(movie.id, movie)
        return list(merged.values())[: self.page_size]


def convert_tmdb_movie(raw: dict[str, object], image_base_url: str) -> Movie:
    """Map a TMDB list entry to a Movie."""
    movie_id = str(raw["id"])
    release_date = str(raw.get("release_date") or "")
    year_part = release_date.split("-")[0]
    year = int(year_part) if year_part.isdigit() else date.today().year
    poster_path = raw.get("poster_path")
    backdrop_path = raw.get("backdrop_path")
    return Movie(
        id=movie_id,
        title=str(raw.get("title", "")),
        year=year,
        poster_url=f"{image_base_url}{poster_path}" if poster_path else "",
        backdrop_url=f"{image_base_url}{backdrop_path}" if backdrop_path else None,
        genres=tuple(
            GENRE_NAMES[genre_id]
            for genre_id in raw.get("genre_ids", [])
            if genre_id in GENRE_NAMES
        ),
        rating=round(float(raw.get("vote_average") or 0.0), 1),
        streaming_on=assign_streaming_services(movie_id),
        synopsis=str(raw.get("overview") or "No synopsis available."),
    )


def assign_streaming_services(movie_id: str) -> tuple[str, ...]:
    """Pick 1-3 services for a movie.

    TMDB list endpoints carry no availability data. Seeding by the movie id
    keeps the choice identical for every client.
    """
    rng = random.Random(f"streaming:{movie_id}")
    count = rng.randint(1, 3)
    return tuple(rng.sample(STREAMING_SERVICES, count))
