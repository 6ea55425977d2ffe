"""Password policy constants file."""

from typing import Literal

DIGITS_SEQUENCE: str = "0123456789"
LATIN_ALPHABET_SEQUENCE: str = "abcdefghijklmnopqrstuvwxyz"

DEFAULT_SEQUENCES: tuple[str, ...] = (
    DIGITS_SEQUENCE,
    LATIN_ALPHABET_SEQUENCE,
)

DEFAULT_MIN_LENGTH: Literal[8] = 8
DEFAULT_MAX_LENGTH: Literal[72] = 72

DEFAULT_SIMILARITY_THRESHOLD: float = 0.9

DEFAULT_MAX_REPEATING_CHARS: Literal[2] = 2
DEFAULT_MAX_SEQUENTIAL_CHARS: Literal[3] = 3

DEFAULT_BREACH_TIMEOUT_SECONDS: float = 2.0

WINKLER_PREFIX_SCALE: float = 0.1
WINKLER_BOOST_THRESHOLD: float = 0.7
WINKLER_MAX_PREFIX: Literal[4] = 4

PASSWORD_FIELD: Literal["password"] = "password"

DEFAULT_DICTIONARY_RESOURCE: str = "common_passwords.txt"
