"""Module with settings.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from functools import cached_property
from importlib.metadata import PackageNotFoundError, version
from typing import ClassVar, Self

from pydantic import (
    BaseModel,
    Field,
    HttpUrl,
    IPvAnyAddress,
    field_validator,
    model_validator,
)

from password_policy import EvaluationOptions, EvaluatorSettings
from password_policy.constants import (
    DEFAULT_BREACH_TIMEOUT_SECONDS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MAX_REPEATING_CHARS,
    DEFAULT_MAX_SEQUENTIAL_CHARS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_SEQUENCES,
    DEFAULT_SIMILARITY_THRESHOLD,
)


def _get_vendor_version() -> str:
    try:
        return version("passpolicy")
    except PackageNotFoundError:
        return "0.0.0"


class Settings(BaseModel):
    """Settings for password policy service."""

    DEBUG: bool = False
    AUTO_RELOAD: bool = False
    HOST: IPvAnyAddress = "0.0.0.0"  # type: ignore  # noqa
    HTTP_PORT: int = 8000

    SERVICE_NAME: str = "PassPolicy"

    PASSWORD_MIN_LENGTH: int = Field(DEFAULT_MIN_LENGTH, ge=1, le=256)
    PASSWORD_MAX_LENGTH: int = Field(DEFAULT_MAX_LENGTH, ge=1, le=4096)
    SIMILARITY_THRESHOLD: float = Field(
        DEFAULT_SIMILARITY_THRESHOLD,
        ge=0.0,
        le=1.0,
    )
    MAX_REPEATING_CHARS: int = Field(DEFAULT_MAX_REPEATING_CHARS, ge=1, le=32)
    MAX_SEQUENTIAL_CHARS: int = Field(
        DEFAULT_MAX_SEQUENTIAL_CHARS,
        ge=1,
        le=32,
    )
    SEQUENCE_WRAP_AROUND: bool = False
    SEQUENCES: tuple[str, ...] = DEFAULT_SEQUENCES

    DICTIONARY_PATH: str | None = None

    BREACH_CHECK_ENABLED: bool = True
    BREACH_API_URI: HttpUrl = "https://api.pwnedpasswords.com"  # type: ignore
    BREACH_CONNECT_TIMEOUT_SECONDS: float = Field(1.0, gt=0)
    BREACH_READ_TIMEOUT_SECONDS: float = Field(2.0, gt=0)
    BREACH_TIMEOUT_SECONDS: float = Field(
        DEFAULT_BREACH_TIMEOUT_SECONDS,
        gt=0,
    )
    BREACH_MAX_TRIES: int = Field(2, ge=1, le=10)
    BREACH_MAX_CONN: int = 50
    BREACH_MAX_KEEPALIVE: int = 15
    SKIP_BREACH_ON_VIOLATION: bool = True

    VENDOR_NAME: ClassVar[str] = "MultiFactor"
    VENDOR_VERSION: str = Field(
        default_factory=_get_vendor_version,
        alias="VERSION",
    )

    @field_validator("SEQUENCES", mode="before")
    def split_sequences(  # noqa: N805
        cls,
        value: str | tuple[str, ...],
    ) -> tuple[str, ...]:
        """Get sequences from a comma separated string."""
        if isinstance(value, str):
            return tuple(v.strip() for v in value.split(",") if v.strip())
        return value

    @field_validator("DICTIONARY_PATH", mode="before")
    def empty_path_to_none(cls, value: str | None) -> str | None:  # noqa: N805
        """Treat empty env var as unset."""
        return value or None

    @model_validator(mode="after")
    def _validate_lengths(self) -> Self:
        if self.PASSWORD_MIN_LENGTH > self.PASSWORD_MAX_LENGTH:
            raise ValueError(
                "Minimum password length must be "
                "less or equal than maximum password length",
            )
        return self

    @cached_property
    def evaluator_settings(self) -> EvaluatorSettings:
        """Build immutable rule configuration."""
        return EvaluatorSettings(
            min_length=self.PASSWORD_MIN_LENGTH,
            max_length=self.PASSWORD_MAX_LENGTH,
            similarity_threshold=self.SIMILARITY_THRESHOLD,
            max_repeating_chars=self.MAX_REPEATING_CHARS,
            max_sequential_chars=self.MAX_SEQUENTIAL_CHARS,
            sequences=self.SEQUENCES,
            sequence_wrap_around=self.SEQUENCE_WRAP_AROUND,
            breach_check_enabled=self.BREACH_CHECK_ENABLED,
            breach_timeout_seconds=self.BREACH_TIMEOUT_SECONDS,
        )

    @cached_property
    def default_options(self) -> EvaluationOptions:
        """Build options used when request passes none."""
        return EvaluationOptions(
            check_breach=self.BREACH_CHECK_ENABLED,
            skip_breach_on_violation=self.SKIP_BREACH_ON_VIOLATION,
        )

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)
