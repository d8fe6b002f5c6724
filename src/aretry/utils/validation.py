r"""Parameter validation utilities for the retry controller.

This module provides validation functions for the controller callbacks
and options to ensure they meet the required constraints before the
controller is built.
"""

from __future__ import annotations

__all__ = ["validate_callable", "validate_delay_value", "validate_retry_options"]

import math
from typing import TYPE_CHECKING, Any

from aretry.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from aretry.options import RetryOptions


def validate_callable(value: Any, name: str) -> None:
    """Validate that a callback is callable.

    Args:
        value: The value to check.
        name: The name of the argument, used in the error message.

    Raises:
        InvalidArgumentError: If ``value`` is not callable.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_callable
        >>> validate_callable(print, "action")
        >>> validate_callable(42, "action")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.InvalidArgumentError: action must be callable, got int

        ```
    """
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise InvalidArgumentError(msg)


def validate_delay_value(value: Any, name: str) -> None:
    """Validate that a delay option is a finite number.

    Args:
        value: The value to check.
        name: The name of the option, used in the error message.

    Raises:
        InvalidArgumentError: If ``value`` is not an int or a float, or
            if it is NaN or infinite.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_delay_value
        >>> validate_delay_value(300, "initial_value")
        >>> validate_delay_value(float("nan"), "max_value")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.InvalidArgumentError: max_value must be finite, got nan

        ```
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise InvalidArgumentError(msg)
    if not math.isfinite(value):
        msg = f"{name} must be finite, got {value}"
        raise InvalidArgumentError(msg)


def validate_retry_options(options: RetryOptions) -> None:
    """Validate retry options.

    Nothing is validated when retries are disabled since the options
    are not used in that mode.

    Args:
        options: The options to validate. The constraints are:
            ``attempts`` is an integer > 0, ``initial_value`` and
            ``max_value`` are finite numbers, ``initial_value`` is >= 0,
            ``max_value`` is >= ``initial_value`` and ``delay_fn`` is
            callable.

    Raises:
        InvalidArgumentError: If one of the constraints is violated.

    Example:
        ```pycon
        >>> from aretry.options import RetryOptions
        >>> from aretry.utils.validation import validate_retry_options
        >>> validate_retry_options(RetryOptions())
        >>> validate_retry_options(RetryOptions(attempts=0, enabled=False))
        >>> validate_retry_options(RetryOptions(attempts=0))  # doctest: +SKIP

        ```
    """
    if not isinstance(options.enabled, bool):
        msg = f"enabled must be a bool, got {type(options.enabled).__name__}"
        raise InvalidArgumentError(msg)
    if not options.enabled:
        return
    if isinstance(options.attempts, bool) or not isinstance(options.attempts, int):
        msg = f"attempts must be an integer, got {type(options.attempts).__name__}"
        raise InvalidArgumentError(msg)
    if options.attempts <= 0:
        msg = f"attempts must be > 0, got {options.attempts}"
        raise InvalidArgumentError(msg)
    validate_delay_value(options.initial_value, "initial_value")
    validate_delay_value(options.max_value, "max_value")
    if options.initial_value < 0:
        msg = f"initial_value must be >= 0, got {options.initial_value}"
        raise InvalidArgumentError(msg)
    if options.max_value < options.initial_value:
        msg = (
            f"max_value must be >= initial_value ({options.initial_value}), "
            f"got {options.max_value}"
        )
        raise InvalidArgumentError(msg)
    validate_callable(options.delay_fn, "delay_fn")
