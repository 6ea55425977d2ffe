"""Password policy module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .breach import (
    AbstractBreachClient,
    PwnedPasswordsClient,
    StubBreachClient,
)
from .dataclasses import (
    EvaluationOptions,
    EvaluationResult,
    EvaluatorSettings,
    PasswordContext,
    Violation,
)
from .dictionary import PasswordDictionary
from .enums import BreachStatus, ViolationReason
from .evaluator import PasswordPolicyEvaluator
from .validator import PasswordPolicyValidator

__all__ = [
    "AbstractBreachClient",
    "BreachStatus",
    "EvaluationOptions",
    "EvaluationResult",
    "EvaluatorSettings",
    "PasswordContext",
    "PasswordDictionary",
    "PasswordPolicyEvaluator",
    "PasswordPolicyValidator",
    "PwnedPasswordsClient",
    "StubBreachClient",
    "Violation",
    "ViolationReason",
]
