"""Tests for container wiring."""

import asyncio

from movie_match.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.room_service.notifier is container.notifier
    assert container.catalog_service.tmdb_client is None
    assert container.decks.assembler.source is container.catalog_service
    assert container.decks.assembler.low_water_mark == settings.deck_low_water_mark
    asyncio.run(container.close_resources())


def test_build_container_with_tmdb(settings) -> None:
    container = build_container(settings.model_copy(update={"tmdb_api_key": "k"}))
    assert container.catalog_service.tmdb_client is not None
    asyncio.run(container.close_resources())
