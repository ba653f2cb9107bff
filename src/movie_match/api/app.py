"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import (
    FastAPI,
    HTTPException,
    Request,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from fastapi.responses import JSONResponse

from movie_match.api.schemas import (
    CreateRoomRequest,
    CreateRoomResponse,
    DeckView,
    JoinRoomResponse,
    MovieView,
    RoomView,
    SwipeRequest,
    SwipeResponse,
)
from movie_match.app_logging import configure_logging
from movie_match.config import parse_sources
from movie_match.containers import AppContainer
from movie_match.domain.movies import STREAMING_SERVICES
from movie_match.domain.rooms import RoomRecord
from movie_match.domain.swipes import SwipeDirection
from movie_match.errors import (
    CreationConflictError,
    ExhaustedRetriesError,
    MovieMatchError,
    NotAParticipantError,
    ReadFailureError,
    RoomNotFoundError,
    SourceUnavailableError,
    WriteFailureError,
)
from movie_match.services.identity import normalize_room_code
from movie_match.services.notifier import RoomStateChanged, RoomSubscription

_ERROR_STATUS = {
    RoomNotFoundError: status.HTTP_404_NOT_FOUND,
    NotAParticipantError: status.HTTP_403_FORBIDDEN,
    CreationConflictError: status.HTTP_409_CONFLICT,
    ExhaustedRetriesError: status.HTTP_503_SERVICE_UNAVAILABLE,
    WriteFailureError: status.HTTP_503_SERVICE_UNAVAILABLE,
    ReadFailureError: status.HTTP_503_SERVICE_UNAVAILABLE,
    SourceUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}

# Close code sent to websocket clients asking for an unknown room.
_WS_ROOM_NOT_FOUND = 4404


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    enabled_sources = parse_sources(container.settings.enabled_streaming_services)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(MovieMatchError)
    async def movie_match_error(
        request: Request, exc: MovieMatchError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning("Request failed: path=%s error=%s", request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog/services")
    async def streaming_services() -> dict[str, list[str]]:
        """Return the streaming services a room can be filtered to."""
        return {"services": list(enabled_sources or STREAMING_SERVICES)}

    @app.get("/catalog/trending")
    async def trending(request: Request, page: int = 1) -> dict[str, object]:
        """Return one page of this week's trending movies."""
        state_container: AppContainer = request.app.state.container
        movies = await state_container.catalog_service.fetch_trending(max(page, 1))
        return {
            "page": page,
            "movies": [MovieView.from_movie(movie).model_dump() for movie in movies],
        }

    @app.post("/rooms", status_code=status.HTTP_201_CREATED)
    async def create_room(
        body: CreateRoomRequest, request: Request
    ) -> CreateRoomResponse:
        """Create a room and return its code with the creator's identity."""
        state_container: AppContainer = request.app.state.container
        if enabled_sources is not None:
            unknown = [s for s in body.sources if s.strip() not in enabled_sources]
            if unknown:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"Unsupported streaming services: {', '.join(unknown)}",
                )
        try:
            created = state_container.room_service.create_room(body.sources)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        return CreateRoomResponse(
            code=created.code,
            participant_id=created.participant_id,
            room=RoomView.from_record(created.room),
        )

    @app.get("/rooms/{code}")
    async def get_room(code: str, request: Request) -> RoomView:
        """Return the current room state."""
        state_container: AppContainer = request.app.state.container
        return RoomView.from_record(state_container.room_service.resolve_room(code))

    @app.post("/rooms/{code}/join")
    async def join_room(code: str, request: Request) -> JoinRoomResponse:
        """Join a room as the second participant or as a spectator."""
        state_container: AppContainer = request.app.state.container
        result = state_container.room_service.join_room(code)
        return JoinRoomResponse(
            participant_id=result.participant_id,
            role=result.role,
            room=RoomView.from_record(result.room),
        )

    @app.post("/rooms/{code}/swipes")
    async def record_swipe(
        code: str, body: SwipeRequest, request: Request
    ) -> SwipeResponse:
        """Record a swipe and report whether it completed a match."""
        state_container: AppContainer = request.app.state.container
        room = state_container.room_service.resolve_room(code)
        swipe = state_container.swipe_service.record_swipe(
            room_id=room.id,
            participant_id=body.participant_id,
            item_id=body.item_id,
            direction=body.direction,
        )
        state_container.decks.advance_past(
            room.code, swipe.participant_id, swipe.item_id
        )
        matched = swipe.direction == SwipeDirection.RIGHT and (
            state_container.match_service.is_match(room.id, swipe.item_id)
        )
        return SwipeResponse(match=matched)

    @app.get("/rooms/{code}/matches")
    async def list_matches(code: str, request: Request) -> dict[str, object]:
        """Return matched movie ids, oldest match first."""
        state_container: AppContainer = request.app.state.container
        room = state_container.room_service.resolve_room(code)
        item_ids = state_container.match_service.all_matches(room.id)
        movies = [
            MovieView.from_movie(movie).model_dump()
            for item_id in item_ids
            if (movie := state_container.catalog_service.get_movie(item_id))
        ]
        return {"matches": item_ids, "movies": movies}

    @app.get("/rooms/{code}/deck")
    async def get_deck(
        code: str, participant_id: str, request: Request, limit: int = 3
    ) -> DeckView:
        """Return the next cards in the participant's deck.

        The deck advances when the participant swipes its current card.
        """
        state_container: AppContainer = request.app.state.container
        room = state_container.room_service.resolve_room(code)
        if not room.occupies(participant_id):
            raise NotAParticipantError(participant_id)
        deck = await state_container.decks.deck_for(
            room.code, participant_id, room.allowed_sources
        )
        return DeckView(
            movies=[MovieView.from_movie(m) for m in deck.upcoming(max(limit, 1))],
            remaining=deck.remaining,
            replenishing=deck.is_replenishing,
            finished=deck.is_finished,
        )

    @app.websocket("/rooms/{code}/events")
    async def room_events(websocket: WebSocket, code: str) -> None:
        """Stream room-state changes and new matches to a client."""
        state_container: AppContainer = websocket.app.state.container
        normalized = normalize_room_code(code)
        await websocket.accept()
        with state_container.notifier.subscribe(normalized) as subscription:
            try:
                room = state_container.room_service.resolve_room(normalized)
            except RoomNotFoundError:
                await websocket.close(code=_WS_ROOM_NOT_FOUND)
                return
            pump = asyncio.create_task(
                _pump_room_events(state_container, websocket, subscription, room)
            )
            receiver = asyncio.create_task(_drain_client(websocket))
            try:
                done, _ = await asyncio.wait(
                    {pump, receiver}, return_when=asyncio.FIRST_COMPLETED
                )
            finally:
                pump.cancel()
                receiver.cancel()
            error = pump.exception() if pump in done else None
            if error is not None and not isinstance(error, WebSocketDisconnect):
                logger.error(
                    "Room event stream failed: code=%s", normalized, exc_info=error
                )
                await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
                return
            logger.info("Room subscriber disconnected: code=%s", normalized)

    return app


async def _drain_client(websocket: WebSocket) -> None:
    """Read until the client disconnects; clients send nothing meaningful."""
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        return


async def _pump_room_events(
    container: AppContainer,
    websocket: WebSocket,
    subscription: RoomSubscription,
    room: RoomRecord,
) -> None:
    """Send the current state, then forward slot changes and new matches.

    Matches already sent on this connection are not sent again, so
    redelivered swipe events only re-run the check.
    """
    current_matches = container.match_service.all_matches(room.id)
    await websocket.send_json(
        {"type": "room", "room": RoomView.from_record(room).model_dump(mode="json")}
    )
    await websocket.send_json({"type": "matches", "item_ids": current_matches})
    seen = set(current_matches)
    last_slots = (room.slot_a, room.slot_b)
    async for event in subscription:
        if isinstance(event, RoomStateChanged):
            slots = (event.room.slot_a, event.room.slot_b)
            if slots == last_slots:
                continue
            last_slots = slots
            await websocket.send_json(
                {
                    "type": "room",
                    "room": RoomView.from_record(event.room).model_dump(mode="json"),
                }
            )
            continue
        item_id = container.match_service.match_for_event(event, seen)
        if item_id is not None:
            await websocket.send_json({"type": "match", "item_id": item_id})
