"""Password policy evaluator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import asyncio
from typing import Iterable, TypeAlias

from loguru import logger

from .breach import AbstractBreachClient
from .dataclasses import (
    EvaluationOptions,
    EvaluationResult,
    EvaluatorSettings,
    PasswordContext,
    Violation,
)
from .dictionary import PasswordDictionary
from .enums import BreachStatus, ViolationReason
from .exceptions import BreachLookupUnavailableError, PasswordInputError
from .validator import PasswordPolicyValidator

ContextType: TypeAlias = PasswordContext | Iterable[str | None] | None


class PasswordPolicyEvaluator:
    """Run configured rules over a password and report violations.

    Stateless between calls: a fresh validator is built for every
    evaluation, shared settings and dictionary are read-only.
    """

    _settings: EvaluatorSettings
    _breach_client: AbstractBreachClient
    _dictionary: PasswordDictionary | None
    _default_options: EvaluationOptions

    def __init__(
        self,
        settings: EvaluatorSettings,
        breach_client: AbstractBreachClient,
        dictionary: PasswordDictionary | None = None,
        default_options: EvaluationOptions | None = None,
    ) -> None:
        """Set dependencies.

        :param EvaluatorSettings settings: rule configuration
        :param AbstractBreachClient breach_client: breach corpus lookup
        :param PasswordDictionary | None dictionary: common passwords,
            dictionary rule is not applied without it
        :param EvaluationOptions | None default_options: options used when
            a call passes none
        """
        self._settings = settings
        self._breach_client = breach_client
        self._dictionary = dictionary
        self._default_options = default_options or EvaluationOptions()

    @property
    def settings(self) -> EvaluatorSettings:
        return self._settings

    @property
    def default_options(self) -> EvaluationOptions:
        return self._default_options

    async def evaluate(
        self,
        password: str,
        context: ContextType = None,
        options: EvaluationOptions | None = None,
    ) -> EvaluationResult:
        """Evaluate password against the policy.

        Local rules run first. Breach lookup runs last so it can be
        skipped once the password is already rejected; violations are
        still reported in declared rule order.

        :param str password: candidate password
        :param ContextType context: terms the password must not resemble
        :param EvaluationOptions | None options: active rules
        :raises PasswordInputError: password or a context value is not str
        :return EvaluationResult: violations and breach lookup status
        """
        if not isinstance(password, str):
            raise PasswordInputError(
                f"Password must be a string, got {type(password).__name__}",
            )

        terms = self._get_context_terms(context)
        options = options or self._default_options

        validator = self._build_validator(terms, options)
        await validator.validate(password)
        violations = list(validator.violations)

        breach_status = await self._check_breach(password, options, violations)
        if breach_status == BreachStatus.BREACHED:
            violations.append(Violation(reason=ViolationReason.BREACHED))

        violations.sort(key=lambda violation: violation.reason.rank)
        return EvaluationResult(
            violations=tuple(violations),
            breach_status=breach_status,
        )

    async def check(
        self,
        password: str,
        context: ContextType = None,
        options: EvaluationOptions | None = None,
    ) -> list[str]:
        """Evaluate password and return error messages only."""
        result = await self.evaluate(password, context, options)
        return result.messages

    def _build_validator(
        self,
        context: tuple[str, ...],
        options: EvaluationOptions,
    ) -> PasswordPolicyValidator:
        validator = PasswordPolicyValidator(
            self._settings,
            stop_on_first_violation=options.stop_on_first_violation,
        )

        if options.check_length:
            validator.min_length()

        if options.check_max_length:
            validator.max_length()

        if options.check_context and context:
            validator.not_similar_to_context(context)

        if options.check_repetition:
            validator.max_repeating_symbols_in_row_count()

        if options.check_sequence:
            validator.max_sequential_symbols_count()

        if options.check_dictionary:
            if self._dictionary is not None:
                validator.not_in_dictionary(self._dictionary)
            else:
                logger.debug("No password dictionary loaded, rule skipped")

        return validator

    async def _check_breach(
        self,
        password: str,
        options: EvaluationOptions,
        violations: list[Violation],
    ) -> BreachStatus:
        if not (self._settings.breach_check_enabled and options.check_breach):
            return BreachStatus.NOT_CHECKED

        if violations and (
            options.skip_breach_on_violation
            or options.stop_on_first_violation
        ):
            logger.debug("Password already rejected, breach lookup skipped")
            return BreachStatus.SKIPPED

        try:
            is_breached = await asyncio.wait_for(
                self._breach_client.is_breached(password),
                timeout=self._settings.breach_timeout_seconds,
            )
        except TimeoutError:
            logger.warning(
                "Breach lookup exceeded "
                f"{self._settings.breach_timeout_seconds}s, inconclusive",
            )
            return BreachStatus.INCONCLUSIVE
        except BreachLookupUnavailableError as err:
            logger.warning(f"Breach lookup unavailable, inconclusive: {err}")
            return BreachStatus.INCONCLUSIVE

        if is_breached:
            return BreachStatus.BREACHED
        return BreachStatus.CLEAN

    @staticmethod
    def _get_context_terms(context: ContextType) -> tuple[str, ...]:
        """Drop empty and None terms, reject non-string ones."""
        if context is None:
            return ()

        if isinstance(context, PasswordContext):
            return context.terms()

        if isinstance(context, str):
            raise PasswordInputError(
                "Context must be a collection of strings, not a string",
            )

        try:
            values = list(context)
        except TypeError as err:
            raise PasswordInputError(
                f"Context must be iterable, got {type(context).__name__}",
            ) from err

        terms: list[str] = []
        for term in values:
            if term is None or term == "":
                continue
            if not isinstance(term, str):
                raise PasswordInputError(
                    "Context values must be strings, "
                    f"got {type(term).__name__}",
                )
            terms.append(term)

        return tuple(terms)
