"""Password policy routers.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .router import password_policy_router

__all__ = [
    "password_policy_router",
]
