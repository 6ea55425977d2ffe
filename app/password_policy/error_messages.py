"""Error Messages for password policy checks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .enums import ViolationReason


class ErrorMessages:
    """Error messages for password policy checks."""

    LONGER = "Password must be longer"
    SHORTER = "Password should be shorter"

    BREACHED = "Password has appeared in a known data breach"
    SIMILAR_TO_CONTEXT = "Password is too similar to your account details"

    FEWER_REPEATING_CHARACTERS = "Password must contain fewer consecutive repeating characters"  # fmt: skip # noqa: E501
    FEWER_SEQUENTIAL_CHARACTERS = "Password must contain fewer sequential characters"  # fmt: skip # noqa: E501

    COMMON_PASSWORD = "Password must not be a common password"

    @classmethod
    def for_reason(cls, reason: ViolationReason) -> str:
        """Get message for violation reason."""
        return {
            ViolationReason.TOO_SHORT: cls.LONGER,
            ViolationReason.TOO_LONG: cls.SHORTER,
            ViolationReason.BREACHED: cls.BREACHED,
            ViolationReason.SIMILAR_TO_CONTEXT: cls.SIMILAR_TO_CONTEXT,
            ViolationReason.REPEATING_CHARACTERS: (
                cls.FEWER_REPEATING_CHARACTERS
            ),
            ViolationReason.SEQUENTIAL_CHARACTERS: (
                cls.FEWER_SEQUENTIAL_CHARACTERS
            ),
            ViolationReason.COMMON_PASSWORD: cls.COMMON_PASSWORD,
        }[reason]
