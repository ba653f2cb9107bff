"""Tests for match detection."""

import asyncio
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from movie_match.domain.swipes import SwipeDirection, SwipeRecord
from movie_match.services.matches import MatchService, derive_matches
from movie_match.services.notifier import RoomNotifier, RoomStateChanged, SwipeRecorded
from movie_match.services.rooms import RoomService
from movie_match.services.swipes import SwipeService


def _swipe(participant: str, item: str, direction: str, second: int) -> SwipeRecord:
    return SwipeRecord(
        id=uuid4(),
        room_id=uuid4(),
        participant_id=participant,
        item_id=item,
        direction=SwipeDirection(direction),
        created_at=datetime(2024, 1, 1, tzinfo=UTC) + timedelta(seconds=second),
    )


def test_scenario_from_waiting_to_matches(
    room_service: RoomService,
    swipe_service: SwipeService,
    match_service: MatchService,
) -> None:
    created = room_service.create_room(["Netflix"])
    room_id = created.room.id
    participant_a = created.participant_id

    swipe_service.record_swipe(room_id, participant_a, "7", "right")
    assert match_service.is_match(room_id, "7") is False

    participant_b = room_service.join_room(created.code).participant_id
    swipe_service.record_swipe(room_id, participant_b, "7", "right")
    assert match_service.is_match(room_id, "7") is True
    assert match_service.all_matches(room_id) == ["7"]

    swipe_service.record_swipe(room_id, participant_a, "9", "left")
    swipe_service.record_swipe(room_id, participant_b, "9", "right")
    assert match_service.is_match(room_id, "9") is False
    assert match_service.all_matches(room_id) == ["7"]


def test_waiting_room_never_matches(
    room_service: RoomService,
    swipe_service: SwipeService,
    match_service: MatchService,
) -> None:
    created = room_service.create_room(["Netflix"])
    for _ in range(2):
        swipe_service.record_swipe(
            created.room.id, created.participant_id, "7", "right"
        )

    assert match_service.is_match(created.room.id, "7") is False
    assert match_service.all_matches(created.room.id) == []


def test_duplicate_right_swipe_is_idempotent(
    room_service: RoomService,
    swipe_service: SwipeService,
    match_service: MatchService,
) -> None:
    created = room_service.create_room(["Netflix"])
    room_id = created.room.id
    participant_b = room_service.join_room(created.code).participant_id

    swipe_service.record_swipe(room_id, created.participant_id, "3", "right")
    swipe_service.record_swipe(room_id, participant_b, "3", "right")
    once = match_service.all_matches(room_id)
    swipe_service.record_swipe(room_id, participant_b, "3", "right")
    swipe_service.record_swipe(room_id, created.participant_id, "3", "right")

    assert match_service.all_matches(room_id) == once == ["3"]


def test_matches_only_grow(
    room_service: RoomService,
    swipe_service: SwipeService,
    match_service: MatchService,
) -> None:
    created = room_service.create_room(["Netflix"])
    room_id = created.room.id
    participant_a = created.participant_id
    participant_b = room_service.join_room(created.code).participant_id
    plan = [
        (participant_a, "1", "right"),
        (participant_b, "2", "right"),
        (participant_b, "1", "right"),
        (participant_a, "1", "left"),
        (participant_a, "2", "right"),
        (participant_b, "3", "left"),
        (participant_a, "3", "right"),
    ]

    previous: set[str] = set()
    for participant, item, direction in plan:
        swipe_service.record_swipe(room_id, participant, item, direction)
        current = set(match_service.all_matches(room_id))
        assert previous <= current
        previous = current

    assert match_service.all_matches(room_id) == ["1", "2"]


def test_derive_matches_requires_both_slots() -> None:
    swipes = [
        _swipe("a", "1", "right", 0),
        _swipe("a", "1", "right", 1),
        _swipe("outsider", "1", "right", 2),
    ]

    assert derive_matches(swipes, "a", "b") == []
    assert derive_matches(swipes, "a", None) == []


def test_derive_matches_orders_by_completion() -> None:
    swipes = [
        _swipe("a", "late", "right", 0),
        _swipe("a", "early", "right", 1),
        _swipe("b", "early", "right", 2),
        _swipe("b", "late", "right", 5),
        _swipe("b", "early", "right", 9),
        _swipe("a", "ignored", "left", 3),
        _swipe("b", "ignored", "right", 4),
    ]

    assert derive_matches(swipes, "a", "b") == ["early", "late"]


def test_watch_matches_yields_each_match_once(
    room_service: RoomService,
    swipe_service: SwipeService,
    match_service: MatchService,
    notifier: RoomNotifier,
) -> None:
    created = room_service.create_room(["Netflix"])
    room_id = created.room.id
    participant_a = created.participant_id

    async def scenario() -> list[str]:
        with notifier.subscribe(created.code) as subscription:
            participant_b = room_service.join_room(created.code).participant_id
            swipe_service.record_swipe(room_id, participant_a, "7", "right")
            last = swipe_service.record_swipe(room_id, participant_b, "7", "right")
            # Redelivery of the completing swipe.
            notifier.publish(created.code, SwipeRecorded(swipe=last))
            swipe_service.record_swipe(room_id, participant_a, "8", "right")
            swipe_service.record_swipe(room_id, participant_b, "8", "right")
            subscription.close()

            found: list[str] = []
            stream = match_service.watch_matches(_drain(subscription))
            async for item_id in stream:
                found.append(item_id)
            return found

    assert asyncio.run(scenario()) == ["7", "8"]


def test_watch_matches_skips_already_seen(
    room_service: RoomService,
    swipe_service: SwipeService,
    match_service: MatchService,
) -> None:
    created = room_service.create_room(["Netflix"])
    room = room_service.join_room(created.code).room
    swipe_service.record_swipe(room.id, room.slot_a, "7", "right")
    completing = swipe_service.record_swipe(room.id, room.slot_b, "7", "right")

    async def events():
        yield RoomStateChanged(room=room)
        yield SwipeRecorded(swipe=completing)

    async def scenario() -> list[str]:
        return [
            item async for item in match_service.watch_matches(events(), ["7"])
        ]

    assert asyncio.run(scenario()) == []


async def _drain(subscription):
    while not subscription.queue.empty():
        yield subscription.queue.get_nowait()
