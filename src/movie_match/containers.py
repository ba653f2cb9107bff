"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from movie_match.adapters.supabase_room_repository import SupabaseRoomRepository
from movie_match.adapters.supabase_swipe_repository import SupabaseSwipeRepository
from movie_match.adapters.tmdb_client import HttpxTmdbClient
from movie_match.config import Settings
from movie_match.services.cache import InMemoryCache
from movie_match.services.catalog import CatalogService
from movie_match.services.deck import DeckAssembler, DeckRegistry
from movie_match.services.matches import MatchService
from movie_match.services.notifier import RoomNotifier
from movie_match.services.rooms import RoomService
from movie_match.services.swipes import SwipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notifier: RoomNotifier
    room_service: RoomService
    swipe_service: SwipeService
    match_service: MatchService
    catalog_service: CatalogService
    decks: DeckRegistry
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    notifier = RoomNotifier()
    room_service = RoomService(
        repository=SupabaseRoomRepository(supabase_client),
        notifier=notifier,
        max_attempts=resolved_settings.room_code_attempts,
    )
    swipe_repository = SupabaseSwipeRepository(supabase_client)
    swipe_service = SwipeService(
        repository=swipe_repository,
        room_service=room_service,
        notifier=notifier,
    )
    match_service = MatchService(
        swipe_repository=swipe_repository,
        room_service=room_service,
    )
    tmdb_client = (
        HttpxTmdbClient.create(
            api_key=resolved_settings.tmdb_api_key,
            base_url=resolved_settings.tmdb_base_url,
        )
        if resolved_settings.tmdb_api_key
        else None
    )
    catalog_service = CatalogService(
        tmdb_client=tmdb_client,
        cache=InMemoryCache(),
        image_base_url=resolved_settings.tmdb_image_base_url,
        page_size=resolved_settings.deck_page_size,
        ttl_seconds=resolved_settings.catalog_ttl_seconds,
    )
    decks = DeckRegistry(
        assembler=DeckAssembler(
            source=catalog_service,
            low_water_mark=resolved_settings.deck_low_water_mark,
        )
    )

    async def close_resources() -> None:
        if tmdb_client is not None:
            await tmdb_client.close()

    return AppContainer(
        settings=resolved_settings,
        notifier=notifier,
        room_service=room_service,
        swipe_service=swipe_service,
        match_service=match_service,
        catalog_service=catalog_service,
        decks=decks,
        close_resources=close_resources,
    )
