r"""Unit tests for the validation utilities."""

from __future__ import annotations

import pytest

from aretry import InvalidArgumentError, RetryOptions
from aretry.utils.validation import (
    validate_callable,
    validate_delay_value,
    validate_retry_options,
)

#######################################
#     Tests for validate_callable     #
#######################################


@pytest.mark.parametrize("value", [print, lambda: None, RetryOptions])
def test_validate_callable_valid(value: object) -> None:
    """Test that callables pass validation."""
    validate_callable(value, "action")


def test_validate_callable_invalid() -> None:
    """Test that a non-callable raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=r"action must be callable, got int"):
        validate_callable(42, "action")


############################################
#     Tests for validate_retry_options     #
############################################


@pytest.mark.parametrize(
    "options",
    [
        RetryOptions(),
        RetryOptions(initial_value=0, max_value=0),
        RetryOptions(attempts=1),
        RetryOptions(initial_value=100, max_value=100),
    ],
)
def test_validate_retry_options_valid(options: RetryOptions) -> None:
    """Test that valid options pass validation."""
    validate_retry_options(options)


@pytest.mark.parametrize(
    "options",
    [
        RetryOptions(attempts=0, enabled=False),
        RetryOptions(initial_value=-1, enabled=False),
        RetryOptions(max_value=-1, enabled=False),
    ],
)
def test_validate_retry_options_disabled(options: RetryOptions) -> None:
    """Test that nothing is validated when retries are disabled."""
    validate_retry_options(options)


@pytest.mark.parametrize("attempts", [0, -3])
def test_validate_retry_options_invalid_attempts(attempts: int) -> None:
    """Test that attempts <= 0 raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=rf"attempts must be > 0, got {attempts}"):
        validate_retry_options(RetryOptions(attempts=attempts))


@pytest.mark.parametrize("attempts", [2.5, "3", True])
def test_validate_retry_options_attempts_not_integer(attempts: object) -> None:
    """Test that a non-integer attempts raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=r"attempts must be an integer"):
        validate_retry_options(RetryOptions(attempts=attempts))


def test_validate_retry_options_invalid_initial_value() -> None:
    """Test that a negative initial_value raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=r"initial_value must be >= 0, got -1"):
        validate_retry_options(RetryOptions(initial_value=-1))


def test_validate_retry_options_invalid_max_value() -> None:
    """Test that max_value < initial_value raises
    InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=r"max_value must be >= initial_value"):
        validate_retry_options(RetryOptions(initial_value=300, max_value=200))


def test_validate_retry_options_invalid_delay_fn() -> None:
    """Test that a non-callable delay_fn raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=r"delay_fn must be callable"):
        validate_retry_options(RetryOptions(delay_fn=2))


@pytest.mark.parametrize("name", ["initial_value", "max_value"])
@pytest.mark.parametrize("value", ["300", None, True, [300]])
def test_validate_retry_options_delay_value_not_number(name: str, value: object) -> None:
    """Test that a non-numeric delay option raises
    InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=rf"{name} must be a number"):
        validate_retry_options(RetryOptions(**{name: value}))


@pytest.mark.parametrize("name", ["initial_value", "max_value"])
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_validate_retry_options_delay_value_not_finite(name: str, value: float) -> None:
    """Test that a NaN or infinite delay option raises
    InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=rf"{name} must be finite"):
        validate_retry_options(RetryOptions(**{name: value}))


@pytest.mark.parametrize("enabled", [None, 0, "yes"])
def test_validate_retry_options_enabled_not_bool(enabled: object) -> None:
    """Test that a non-boolean enabled raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=r"enabled must be a bool"):
        validate_retry_options(RetryOptions(enabled=enabled))


##########################################
#     Tests for validate_delay_value     #
##########################################


@pytest.mark.parametrize("value", [0, 300, 2.5])
def test_validate_delay_value_valid(value: float) -> None:
    """Test that finite numbers pass validation."""
    validate_delay_value(value, "max_value")


def test_validate_delay_value_nan() -> None:
    """Test that NaN raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match=r"max_value must be finite, got nan"):
        validate_delay_value(float("nan"), "max_value")
