"""Test Password Validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from password_policy import (
    EvaluatorSettings,
    PasswordDictionary,
    PasswordPolicyValidator,
    ViolationReason,
)


@pytest.mark.asyncio
async def test_password_validator_min_length(
    password_policy_validator: PasswordPolicyValidator,
) -> None:
    """Test password validator for minimum length."""
    validator = password_policy_validator.min_length()
    assert not await validator.validate("")
    assert not await validator.validate("1234567")
    assert await validator.validate("12345678")
    assert validator.violations == []


@pytest.mark.asyncio
async def test_password_validator_max_length() -> None:
    """Test password validator for maximum length."""
    validator = PasswordPolicyValidator(
        EvaluatorSettings(min_length=1, max_length=5),
    ).max_length()
    assert await validator.validate("12345")
    assert not await validator.validate("123456")
    assert validator.violations[0].reason == ViolationReason.TOO_LONG


@pytest.mark.asyncio
async def test_password_validator_repeating(
    password_policy_validator: PasswordPolicyValidator,
) -> None:
    """Test password validator for identical symbols in a row."""
    validator = password_policy_validator.max_repeating_symbols_in_row_count()
    assert not await validator.validate("secret1222")
    assert await validator.validate("secret1223")
    assert await validator.validate("aabbcc")
    assert await validator.validate("")


@pytest.mark.asyncio
async def test_password_validator_repeating_custom_count(
    password_policy_validator: PasswordPolicyValidator,
) -> None:
    """Test password validator for explicit repeating count."""
    validator = password_policy_validator.max_repeating_symbols_in_row_count(
        3,
    )
    assert await validator.validate("33aaa!!!3")
    assert not await validator.validate("3aaaa")


@pytest.mark.asyncio
async def test_password_validator_sequential(
    password_policy_validator: PasswordPolicyValidator,
) -> None:
    """Test password validator for sequential symbols."""
    validator = password_policy_validator.max_sequential_symbols_count()
    assert not await validator.validate("secret1234")
    assert await validator.validate("secret1235")
    assert not await validator.validate("ABCD")
    assert not await validator.validate("xxbCdExx")
    assert await validator.validate("4321")
    assert await validator.validate("8901")
    assert await validator.validate("abc")


@pytest.mark.asyncio
async def test_password_validator_sequential_wrap_around() -> None:
    """Test sequences wrapping from the end to the start."""
    validator = PasswordPolicyValidator(
        EvaluatorSettings(sequence_wrap_around=True),
    ).max_sequential_symbols_count()
    assert not await validator.validate("8901")
    assert not await validator.validate("yzab")
    assert await validator.validate("yz01")


@pytest.mark.asyncio
async def test_password_validator_custom_sequences() -> None:
    """Test configured sequences replace the default ones."""
    validator = PasswordPolicyValidator(
        EvaluatorSettings(sequences=("QWERTY",)),
    ).max_sequential_symbols_count()
    assert not await validator.validate("xqwerx")
    assert await validator.validate("abcd1234")


@pytest.mark.asyncio
async def test_password_validator_context(
    password_policy_validator: PasswordPolicyValidator,
) -> None:
    """Test password validator for similarity to context."""
    validator = password_policy_validator.not_similar_to_context(
        ("Acme", ""),
    )
    assert not await validator.validate("acme")
    assert not await validator.validate("ACME")
    assert not await validator.validate("acme1")
    assert await validator.validate("Tr0ub4dor&3x")


@pytest.mark.asyncio
async def test_password_validator_context_full_threshold() -> None:
    """Test identical term is rejected even with threshold 1."""
    validator = PasswordPolicyValidator(
        EvaluatorSettings(similarity_threshold=1.0),
    ).not_similar_to_context(("acme",))
    assert not await validator.validate("Acme")
    assert await validator.validate("acme1")


@pytest.mark.asyncio
async def test_password_validator_dictionary(
    password_policy_validator: PasswordPolicyValidator,
    dictionary: PasswordDictionary,
) -> None:
    """Test password validator for common passwords."""
    validator = password_policy_validator.not_in_dictionary(dictionary)
    assert not await validator.validate("Password")
    assert not await validator.validate("QWERTY")
    assert await validator.validate("Password1")


@pytest.mark.asyncio
async def test_password_validator_collects_all(
    password_policy_validator: PasswordPolicyValidator,
) -> None:
    """Test all failed checks are reported in registration order."""
    validator = (
        password_policy_validator
        .min_length()
        .max_repeating_symbols_in_row_count()
        .max_sequential_symbols_count()
    )  # fmt: skip
    assert not await validator.validate("aaa1234")
    assert [v.reason for v in validator.violations] == [
        ViolationReason.TOO_SHORT,
        ViolationReason.REPEATING_CHARACTERS,
        ViolationReason.SEQUENTIAL_CHARACTERS,
    ]


@pytest.mark.asyncio
async def test_password_validator_stop_on_first(
    evaluator_settings: EvaluatorSettings,
) -> None:
    """Test validator stops after first failed check."""
    validator = (
        PasswordPolicyValidator(evaluator_settings, True)
        .min_length()
        .max_repeating_symbols_in_row_count()
    )  # fmt: skip
    assert not await validator.validate("aaa")
    assert [v.reason for v in validator.violations] == [
        ViolationReason.TOO_SHORT,
    ]


@pytest.mark.asyncio
async def test_password_validator_explicit_zero(
    password_policy_validator: PasswordPolicyValidator,
) -> None:
    """Test explicit zero limits are not replaced by configured ones."""
    validator = password_policy_validator.min_length(0)
    assert await validator.validate("")

    validator = PasswordPolicyValidator(
        EvaluatorSettings(),
    ).max_repeating_symbols_in_row_count(0)
    assert not await validator.validate("a")
