"""Password Policy data classes.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field

from .constants import (
    DEFAULT_BREACH_TIMEOUT_SECONDS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MAX_REPEATING_CHARS,
    DEFAULT_MAX_SEQUENTIAL_CHARS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_SEQUENCES,
    DEFAULT_SIMILARITY_THRESHOLD,
    PASSWORD_FIELD,
)
from .enums import BreachStatus, ViolationReason
from .error_messages import ErrorMessages
from .exceptions import PasswordPolicySettingsError


@dataclass(frozen=True)
class EvaluatorSettings:
    """Immutable rule configuration, built once at startup."""

    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH

    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD

    max_repeating_chars: int = DEFAULT_MAX_REPEATING_CHARS
    max_sequential_chars: int = DEFAULT_MAX_SEQUENTIAL_CHARS

    sequences: tuple[str, ...] = DEFAULT_SEQUENCES
    sequence_wrap_around: bool = False

    breach_check_enabled: bool = True
    breach_timeout_seconds: float = DEFAULT_BREACH_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise PasswordPolicySettingsError(
                "Minimum password length must be greater than 0",
            )
        if self.min_length > self.max_length:
            raise PasswordPolicySettingsError(
                "Minimum password length must be "
                "less or equal than maximum password length",
            )
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise PasswordPolicySettingsError(
                "Similarity threshold must be between 0 and 1",
            )
        if self.max_repeating_chars < 1:
            raise PasswordPolicySettingsError(
                "Repeating characters count must be greater than 0",
            )
        if self.max_sequential_chars < 1:
            raise PasswordPolicySettingsError(
                "Sequential characters count must be greater than 0",
            )
        if self.breach_timeout_seconds <= 0:
            raise PasswordPolicySettingsError(
                "Breach lookup timeout must be positive",
            )

        # matching is case-insensitive
        object.__setattr__(
            self,
            "sequences",
            tuple(seq.lower() for seq in self.sequences),
        )


@dataclass(frozen=True)
class EvaluationOptions:
    """Per-call rule toggles."""

    check_length: bool = True
    check_max_length: bool = True
    check_breach: bool = True
    check_context: bool = True
    check_repetition: bool = True
    check_sequence: bool = True
    check_dictionary: bool = True

    skip_breach_on_violation: bool = True
    stop_on_first_violation: bool = False


@dataclass(frozen=True)
class Violation:
    """Single failed rule."""

    reason: ViolationReason
    field: str = PASSWORD_FIELD
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(
                self,
                "message",
                ErrorMessages.for_reason(self.reason),
            )


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of a single evaluation."""

    violations: tuple[Violation, ...] = ()
    breach_status: BreachStatus = BreachStatus.NOT_CHECKED

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def reasons(self) -> list[ViolationReason]:
        return [violation.reason for violation in self.violations]

    @property
    def messages(self) -> list[str]:
        return [violation.message for violation in self.violations]

    @property
    def is_breach_inconclusive(self) -> bool:
        return self.breach_status == BreachStatus.INCONCLUSIVE


@dataclass(frozen=True)
class PasswordContext:
    """Identity and brand terms a password must not resemble."""

    service_name: str | None = None
    username: str | None = None
    email: str | None = None
    extra: tuple[str, ...] = field(default_factory=tuple)

    def terms(self) -> tuple[str, ...]:
        """Get ordered, unique, non-empty context terms.

        :return tuple[str, ...]: service name and its lowercase variant,
            username, email with its local part, then extra terms
        """
        candidates: list[str | None] = [
            self.service_name,
            self.service_name.lower() if self.service_name else None,
            self.username,
            self.email,
        ]
        if self.email and "@" in self.email:
            candidates.append(self.email.split("@", 1)[0])
        candidates.extend(self.extra)

        terms: list[str] = []
        for term in candidates:
            if term and term not in terms:
                terms.append(term)
        return tuple(terms)
