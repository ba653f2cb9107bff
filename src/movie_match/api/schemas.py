"""Pydantic request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from movie_match.domain.movies import Movie
from movie_match.domain.rooms import RoomRecord
from movie_match.domain.swipes import SwipeDirection


class CreateRoomRequest(BaseModel):
    """Body for creating a room."""

    sources: list[str] = Field(min_length=1)


class SwipeRequest(BaseModel):
    """Body for recording a swipe."""

    participant_id: str
    item_id: str
    direction: SwipeDirection


class RoomView(BaseModel):
    """Room state as shown to participants and spectators."""

    id: str
    code: str
    sources: list[str]
    status: str
    participants: int
    created_at: datetime

    @classmethod
    def from_record(cls, room: RoomRecord) -> "RoomView":
        return cls(
            id=str(room.id),
            code=room.code,
            sources=list(room.allowed_sources),
            status=room.status,
            participants=sum(1 for slot in (room.slot_a, room.slot_b) if slot),
            created_at=room.created_at,
        )


class CreateRoomResponse(BaseModel):
    code: str
    participant_id: str
    room: RoomView


class JoinRoomResponse(BaseModel):
    participant_id: str | None
    role: str
    room: RoomView


class SwipeResponse(BaseModel):
    status: str = "ok"
    match: bool


class MovieView(BaseModel):
    """Card payload for a movie."""

    id: str
    title: str
    year: int
    poster_url: str
    backdrop_url: str | None
    genres: list[str]
    rating: float
    streaming_on: list[str]
    synopsis: str

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieView":
        return cls(
            id=movie.id,
            title=movie.title,
            year=movie.year,
            poster_url=movie.poster_url,
            backdrop_url=movie.backdrop_url,
            genres=list(movie.genres),
            rating=movie.rating,
            streaming_on=list(movie.streaming_on),
            synopsis=movie.synopsis,
        )


class DeckView(BaseModel):
    """The next cards in a participant's deck."""

    movies: list[MovieView]
    remaining: int
    replenishing: bool
    finished: bool
