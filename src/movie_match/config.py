"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    tmdb_api_key: str | None = None
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"
    room_code_attempts: int = 5
    deck_page_size: int = 20
    deck_low_water_mark: int = 5
    catalog_ttl_seconds: int = 3600
    enabled_streaming_services: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )



def parse_sources(raw: str | None) -> tuple[str, ...] | None:
    """Parse a comma-separated streaming service list from env.

    Returns None, meaning every service, when unset, empty or ``*``.
    """
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    sources: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip()
        if value and value not in sources:
            sources.append(value)
    return tuple(sources) or None
