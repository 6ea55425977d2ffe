"""Password policy error utils.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from fastapi import status
from fastapi_error_map.rules import rule

from api.error_routing import ERROR_MAP_TYPE, DomainErrorTranslator
from password_policy.exceptions import PasswordInputError

translator = DomainErrorTranslator()


error_map: ERROR_MAP_TYPE = {
    PasswordInputError: rule(
        status=status.HTTP_400_BAD_REQUEST,
        translator=translator,
    ),
}
