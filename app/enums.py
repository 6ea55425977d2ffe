"""Enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class DomainCodes(IntEnum):
    """Error code parts."""

    PASSWORD_POLICY = 10
