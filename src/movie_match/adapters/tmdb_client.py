"""TMDB movie catalog API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class TmdbClient(Protocol):
    """Interface for TMDB list endpoints."""

    async def popular(self, page: int = 1) -> dict[str, object]:
        """Return a raw page of popular movies."""

    async def top_rated(self, page: int = 1) -> dict[str, object]:
        """Return a raw page of top-rated movies."""

    async def trending(self, page: int = 1) -> dict[str, object]:
        """Return a raw page of this week's trending movies."""


@dataclass
class HttpxTmdbClient(TmdbClient):
    """HTTPX-backed TMDB client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxTmdbClient":
        """Create a TMDB client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def popular(self, page: int = 1) -> dict[str, object]:
        return await self._get_list("/movie/popular", page)

    async def top_rated(self, page: int = 1) -> dict[str, object]:
        return await self._get_list("/movie/top_rated", page)

    async def trending(self, page: int = 1) -> dict[str, object]:
        return await self._get_list("/trending/movie/week", page)

    async def _get_list(self, endpoint: str, page: int) -> dict[str, object]:
        response = await self.http_client.get(
            f"{self.base_url}{endpoint}",
            params={"api_key": self.api_key, "page": page, "language": "en-US"},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
