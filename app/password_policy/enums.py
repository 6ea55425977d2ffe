"""Password policy enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum


class ViolationReason(StrEnum):
    """Reasons a password fails a rule.

    Declaration order is the order violations are reported in.
    """

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    BREACHED = "breached"
    SIMILAR_TO_CONTEXT = "similar_to_context"
    REPEATING_CHARACTERS = "repeating_characters"
    SEQUENTIAL_CHARACTERS = "sequential_characters"
    COMMON_PASSWORD = "common_password"

    @property
    def rank(self) -> int:
        """Position of the reason in the declared rule order."""
        return list(ViolationReason).index(self)


class BreachStatus(StrEnum):
    """Outcome of the breach lookup."""

    NOT_CHECKED = "not_checked"
    SKIPPED = "skipped"
    CLEAN = "clean"
    BREACHED = "breached"
    INCONCLUSIVE = "inconclusive"
