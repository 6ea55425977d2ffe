"""Common passwords dictionary.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, Self

from loguru import logger

from .constants import DEFAULT_DICTIONARY_RESOURCE
from .exceptions import PasswordDictionaryLoadError


def _parse_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        yield word.lower()


class PasswordDictionary:
    """Read-only set of disallowed common passwords.

    Membership is exact and case-insensitive.
    """

    __slots__ = ("_words",)

    _words: frozenset[str]

    def __init__(self, words: frozenset[str]) -> None:
        """Set words, expected to be lowercase already."""
        self._words = words

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Self:
        """Build dictionary from any iterable of words."""
        return cls(frozenset(_parse_lines(words)))

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """Load newline-delimited UTF-8 word list.

        :param str | Path path: path to word list
        :raises PasswordDictionaryLoadError: file is missing or not UTF-8
        :return PasswordDictionary: loaded dictionary
        """
        try:
            with open(path, encoding="utf-8") as f:
                dictionary = cls.from_words(f)
        except (OSError, UnicodeDecodeError) as err:
            raise PasswordDictionaryLoadError(
                f"Cannot load password dictionary {path}: {err}",
            ) from err

        logger.info(f"Loaded {len(dictionary)} common passwords from {path}")
        return dictionary

    @classmethod
    def default(cls) -> Self:
        """Load word list packaged with the application."""
        resource = resources.files("password_policy.data").joinpath(
            DEFAULT_DICTIONARY_RESOURCE,
        )
        try:
            text = resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise PasswordDictionaryLoadError(
                f"Cannot load packaged password dictionary: {err}",
            ) from err

        dictionary = cls.from_words(text.splitlines())
        logger.info(f"Loaded {len(dictionary)} packaged common passwords")
        return dictionary

    def contains(self, word: str) -> bool:
        """Check if word is in dictionary, ignoring case."""
        return word.lower() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)
