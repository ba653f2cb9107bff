"""Room code and participant identity minting."""

import random
import re
import secrets
import uuid

CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
VOWELS = "AEIOU"
DIGITS = "23456789"

# Consonant-vowel-consonant-vowel-digit-digit, e.g. MAKO42.
_CODE_ALPHABETS = (CONSONANTS, VOWELS, CONSONANTS, VOWELS, DIGITS, DIGITS)

ROOM_CODE_LENGTH = len(_CODE_ALPHABETS)
ROOM_CODE_PATTERN = re.compile(
    "".join(f"[{alphabet}]" for alphabet in _CODE_ALPHABETS) + r"\Z"
)

_system_random = secrets.SystemRandom()


def generate_room_code(rng: random.Random | None = None) -> str:
    """Mint a short, speakable room code.

    Uniqueness is not checked here; the room store enforces it on insert.
    """
    source = rng or _system_random
    return "".join(source.choice(alphabet) for alphabet in _CODE_ALPHABETS)


def normalize_room_code(code: str) -> str:
    """Strip whitespace and upper-case a user-typed room code."""
    return code.strip().upper()


def is_valid_room_code(code: str) -> bool:
    """Return True if the code has the minted shape."""
    return ROOM_CODE_PATTERN.match(normalize_room_code(code)) is not None


def new_participant_id() -> str:
    """Return an opaque identifier for a room participant."""
    return str(uuid.uuid4())
