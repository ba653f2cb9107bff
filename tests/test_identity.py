"""Tests for room code and participant minting."""

import random

from movie_match.services.identity import (
    CONSONANTS,
    DIGITS,
    ROOM_CODE_LENGTH,
    ROOM_CODE_PATTERN,
    VOWELS,
    generate_room_code,
    is_valid_room_code,
    new_participant_id,
    normalize_room_code,
)


def test_generated_codes_match_pattern() -> None:
    for _ in range(100_000):
        code = generate_room_code()
        assert len(code) == ROOM_CODE_LENGTH == 6
        assert ROOM_CODE_PATTERN.match(code)


def test_code_positions_use_expected_alphabets() -> None:
    code = generate_room_code(random.Random(7))

    assert code[0] in CONSONANTS
    assert code[1] in VOWELS
    assert code[2] in CONSONANTS
    assert code[3] in VOWELS
    assert code[4] in DIGITS
    assert code[5] in DIGITS


def test_seeded_generator_is_deterministic() -> None:
    first = [generate_room_code(random.Random(42)) for _ in range(3)]
    second = [generate_room_code(random.Random(42)) for _ in range(3)]

    assert first == second


def test_ambiguous_characters_are_excluded() -> None:
    for excluded in "AEIOU":
        assert excluded not in CONSONANTS
    assert "0" not in DIGITS
    assert "1" not in DIGITS


def test_validation_and_normalization() -> None:
    assert normalize_room_code("  mako42 ") == "MAKO42"
    assert is_valid_room_code("mako42")
    assert not is_valid_room_code("MAKO4")
    assert not is_valid_room_code("MAKO421")
    assert not is_valid_room_code("AMKO42")
    assert not is_valid_room_code("MAKO10")


def test_participant_ids_are_distinct() -> None:
    ids = {new_participant_id() for _ in range(1000)}

    assert len(ids) == 1000
