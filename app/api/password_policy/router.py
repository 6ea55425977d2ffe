"""Password Policy router.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import FromDishka
from fastapi_error_map.routing import ErrorAwareRouter

from api.error_routing import DishkaErrorAwareRoute
from api.password_policy.adapter import PasswordPolicyFastAPIAdapter
from api.password_policy.error_utils import error_map
from api.password_policy.schemas import (
    EvaluatorSettingsSchema,
    PasswordEvaluationRequest,
    PasswordEvaluationResponse,
)

password_policy_router = ErrorAwareRouter(
    prefix="/password-policy",
    tags=["Password Policy"],
    route_class=DishkaErrorAwareRoute,
)


@password_policy_router.post("/evaluate", error_map=error_map)
async def evaluate(
    request: PasswordEvaluationRequest,
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> PasswordEvaluationResponse:
    """Evaluate password against the configured policy.

    Violations are part of a successful response, breach status
    ``inconclusive`` means the breach service could not be reached.
    """
    return await adapter.evaluate(request)


@password_policy_router.get("/settings", error_map=error_map)
async def get_settings(
    adapter: FromDishka[PasswordPolicyFastAPIAdapter],
) -> EvaluatorSettingsSchema:
    """Get active rule configuration."""
    return await adapter.get_settings()
