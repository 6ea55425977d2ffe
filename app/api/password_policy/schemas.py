"""Password policy evaluation schemas.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pydantic import BaseModel, Field, StrictStr

from password_policy import BreachStatus, PasswordContext, ViolationReason


class EvaluationOptionsSchema(BaseModel):
    """Rule toggles of a single evaluation, unset ones keep defaults."""

    check_length: bool | None = None
    check_max_length: bool | None = None
    check_breach: bool | None = None
    check_context: bool | None = None
    check_repetition: bool | None = None
    check_sequence: bool | None = None
    check_dictionary: bool | None = None

    skip_breach_on_violation: bool | None = None
    stop_on_first_violation: bool | None = None


class PasswordEvaluationRequest(BaseModel):
    """Password evaluation request."""

    password: StrictStr
    context: list[StrictStr | None] = Field(default_factory=list)

    service_name: StrictStr | None = None
    username: StrictStr | None = None
    email: StrictStr | None = None

    options: EvaluationOptionsSchema | None = None

    def to_context(self) -> PasswordContext:
        """Collect account details and free terms into context."""
        return PasswordContext(
            service_name=self.service_name,
            username=self.username,
            email=self.email,
            extra=tuple(term for term in self.context if term),
        )


class ViolationSchema(BaseModel):
    """Violation schema."""

    field: str
    reason: ViolationReason
    message: str


class PasswordEvaluationResponse(BaseModel):
    """Password evaluation response."""

    is_valid: bool
    breach_status: BreachStatus
    violations: list[ViolationSchema]


class EvaluatorSettingsSchema(BaseModel):
    """Active rule configuration."""

    min_length: int
    max_length: int
    similarity_threshold: float
    max_repeating_chars: int
    max_sequential_chars: int
    sequences: list[str]
    sequence_wrap_around: bool
    breach_check_enabled: bool
    breach_timeout_seconds: float
    default_options: EvaluationOptionsSchema
