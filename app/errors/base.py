"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base exception, every subclass carries an error code."""

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Check that subclass declares code."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError(f"{cls.__name__}: code must be set")

    @property
    def detail(self) -> str:
        """Human readable description."""
        return str(self) or type(self).__name__
