"""Password Validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Self, TypeAlias

from .dataclasses import EvaluatorSettings, Violation
from .dictionary import PasswordDictionary
from .enums import ViolationReason
from .similarity import jaro_winkler

_CheckType: TypeAlias = Callable[..., Coroutine[Any, Any, bool]]


@dataclass
class _Checker:
    """Checker dataclass."""

    check: _CheckType
    args: list[Any]
    reason: ViolationReason


class PasswordPolicyValidator:
    """Builder for local password rules.

    This class accumulates checks and validates a password against them.
    Instances keep the violations of the last run, so build one per
    evaluation.
    """

    _checkers: list[_Checker]
    _settings: EvaluatorSettings
    _stop_on_first_violation: bool

    violations: list[Violation]

    def __init__(
        self,
        settings: EvaluatorSettings,
        stop_on_first_violation: bool = False,
    ) -> None:
        """Initialize a new validator instance.

        :param EvaluatorSettings settings: rule configuration
        :param bool stop_on_first_violation: stop after first failed check
        """
        self._checkers = []
        self._settings = settings
        self._stop_on_first_violation = stop_on_first_violation
        self.violations = []

    def __add_checker(
        self,
        check: _CheckType,
        reason: ViolationReason,
        args: list,
    ) -> None:
        self._checkers.append(_Checker(check=check, args=args, reason=reason))

    async def __run_checker(self, checker: _Checker, password: str) -> bool:
        result = await checker.check(password, self._settings, *checker.args)
        if result is False:
            self.violations.append(Violation(reason=checker.reason))
        return result

    async def validate(self, password: str) -> bool:
        """Validate the given password against the configured checks.

        Runs registered checks in registration order and collects
        violations.

        :param str password: Password to validate.
        :return: bool.

        :Example:
            .. code-block:: python

                assert not await (
                    PasswordPolicyValidator(EvaluatorSettings())
                    .min_length(3)
                    .validate("13")
                )
        """  # fmt: skip
        self.violations = []
        for checker in self._checkers:
            passed = await self.__run_checker(checker, password)
            if not passed and self._stop_on_first_violation:
                break

        return not self.violations

    def min_length(self, length: int | None = None) -> Self:
        """Require minimum password length.

        :param int | None length: Minimal allowed length, configured one
            if omitted.
        :return: PasswordPolicyValidator.
        """
        if length is None:
            length = self._settings.min_length
        self.__add_checker(
            check=self._validate_min_length,
            reason=ViolationReason.TOO_SHORT,
            args=[length],
        )
        return self

    def max_length(self, length: int | None = None) -> Self:
        """Require maximum password length.

        :param int | None length: Maximum allowed length, configured one
            if omitted.
        :return: PasswordPolicyValidator.
        """
        if length is None:
            length = self._settings.max_length
        self.__add_checker(
            check=self._validate_max_length,
            reason=ViolationReason.TOO_LONG,
            args=[length],
        )
        return self

    def not_similar_to_context(self, context: tuple[str, ...]) -> Self:
        """Forbid passwords resembling any of the context terms.

        :param tuple[str, ...] context: terms, empty ones are ignored
        :return: PasswordPolicyValidator.

        :Example:
            .. code-block:: python

                assert not await (
                    PasswordPolicyValidator(EvaluatorSettings())
                    .not_similar_to_context(("Acme",))
                    .validate("acme")
                )
        """  # fmt: skip
        self.__add_checker(
            check=self._validate_not_similar_to_context,
            reason=ViolationReason.SIMILAR_TO_CONTEXT,
            args=[tuple(term for term in context if term)],
        )
        return self

    def max_repeating_symbols_in_row_count(
        self,
        count: int | None = None,
    ) -> Self:
        """Limit count of identical symbols in a row.

        :param int | None count: Allowed identical symbols in a row.
        :return: PasswordPolicyValidator.
        """
        if count is None:
            count = self._settings.max_repeating_chars
        self.__add_checker(
            check=self._validate_max_repeating_symbols_in_row_count,
            reason=ViolationReason.REPEATING_CHARACTERS,
            args=[count],
        )
        return self

    def max_sequential_symbols_count(self, count: int | None = None) -> Self:
        """Limit run length of symbols taken from reference sequences.

        :param int | None count: Allowed sequential symbols in a row.
        :return: PasswordPolicyValidator.
        """
        if count is None:
            count = self._settings.max_sequential_chars
        self.__add_checker(
            check=self._validate_max_sequential_symbols_count,
            reason=ViolationReason.SEQUENTIAL_CHARACTERS,
            args=[count],
        )
        return self

    def not_in_dictionary(self, dictionary: PasswordDictionary) -> Self:
        """Require the password to not be in a common password list.

        :param PasswordDictionary dictionary: common passwords
        :return: PasswordPolicyValidator.
        """
        self.__add_checker(
            check=self._validate_not_in_dictionary,
            reason=ViolationReason.COMMON_PASSWORD,
            args=[dictionary],
        )
        return self

    @staticmethod
    async def _validate_min_length(password: str, _: Any, length: int) -> bool:
        """Validate minimum password length."""
        return len(password) >= length

    @staticmethod
    async def _validate_max_length(password: str, _: Any, length: int) -> bool:
        """Validate maximum password length."""
        return len(password) <= length

    @staticmethod
    async def _validate_not_similar_to_context(
        password: str,
        settings: EvaluatorSettings,
        context: tuple[str, ...],
    ) -> bool:
        """Compare lowered password with every context term."""
        pwd = password.lower()
        for term in context:
            term = term.lower()
            # identical term must fire even with threshold 1.0
            if pwd == term:
                return False
            if jaro_winkler(pwd, term) > settings.similarity_threshold:
                return False
        return True

    @staticmethod
    async def _validate_max_repeating_symbols_in_row_count(
        password: str,
        _: Any,
        count: int,
    ) -> bool:
        """Single pass over password counting the current run."""
        run = 0
        previous = None
        for char in password:
            run = run + 1 if char == previous else 1
            if run > count:
                return False
            previous = char
        return True

    @staticmethod
    async def _validate_max_sequential_symbols_count(
        password: str,
        settings: EvaluatorSettings,
        count: int,
    ) -> bool:
        """Validate password has no window of reference sequence.

        Slide window of ``count + 1`` symbols over every sequence and look
        each slice up in lowered password.
        """
        pwd = password.lower()
        window = count + 1
        if len(pwd) < window:
            return True

        for seq in settings.sequences:
            if settings.sequence_wrap_around:
                seq = seq + seq[: window - 1]

            for i in range(len(seq) - window + 1):
                if seq[i : i + window] in pwd:
                    return False

        return True

    @staticmethod
    async def _validate_not_in_dictionary(
        password: str,
        _: Any,
        dictionary: PasswordDictionary,
    ) -> bool:
        """Check if password is not a common one."""
        return not dictionary.contains(password)
