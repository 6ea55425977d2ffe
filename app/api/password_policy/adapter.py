"""Password Policy adapter for FastAPI.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import asdict, replace

from adaptix.conversion import get_converter

from api.base_adapter import BaseAdapter
from api.password_policy.schemas import (
    EvaluationOptionsSchema,
    EvaluatorSettingsSchema,
    PasswordEvaluationRequest,
    PasswordEvaluationResponse,
    ViolationSchema,
)
from password_policy import EvaluationOptions, PasswordPolicyEvaluator

_convert_options_to_schema = get_converter(
    EvaluationOptions,
    EvaluationOptionsSchema,
)


class PasswordPolicyFastAPIAdapter(BaseAdapter[PasswordPolicyEvaluator]):
    """Password Policy adapter for FastAPI."""

    def __init__(self, service: PasswordPolicyEvaluator) -> None:
        """Set evaluator."""
        self._service = service

    async def evaluate(
        self,
        request: PasswordEvaluationRequest,
    ) -> PasswordEvaluationResponse:
        """Evaluate password from request body."""
        options = None
        if request.options is not None:
            options = replace(
                self._service.default_options,
                **request.options.model_dump(exclude_none=True),
            )

        result = await self._service.evaluate(
            request.password,
            request.to_context(),
            options,
        )

        return PasswordEvaluationResponse(
            is_valid=result.is_valid,
            breach_status=result.breach_status,
            violations=[
                ViolationSchema(
                    field=violation.field,
                    reason=violation.reason,
                    message=violation.message,
                )
                for violation in result.violations
            ],
        )

    async def get_settings(self) -> EvaluatorSettingsSchema:
        """Get active rule configuration."""
        settings = asdict(self._service.settings)
        settings["sequences"] = list(settings["sequences"])
        return EvaluatorSettingsSchema(
            **settings,
            default_options=_convert_options_to_schema(
                self._service.default_options,
            ),
        )
