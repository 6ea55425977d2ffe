"""Password Policy exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    PASSWORD_INPUT_ERROR = 1
    PASSWORD_POLICY_SETTINGS_ERROR = 2
    PASSWORD_DICTIONARY_LOAD_ERROR = 3
    BREACH_LOOKUP_UNAVAILABLE_ERROR = 4


class PasswordPolicyError(BaseDomainException):
    """Base exception class for Password Policy errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class PasswordInputError(PasswordPolicyError):
    """Password or context value is not a string."""

    code = ErrorCodes.PASSWORD_INPUT_ERROR


class PasswordPolicySettingsError(PasswordPolicyError):
    """Rule configuration is invalid."""

    code = ErrorCodes.PASSWORD_POLICY_SETTINGS_ERROR


class PasswordDictionaryLoadError(PasswordPolicyError):
    """Exception raised when a word list cannot be read."""

    code = ErrorCodes.PASSWORD_DICTIONARY_LOAD_ERROR


class BreachLookupUnavailableError(PasswordPolicyError):
    """Breach service timed out, failed or answered garbage."""

    code = ErrorCodes.BREACH_LOOKUP_UNAVAILABLE_ERROR
