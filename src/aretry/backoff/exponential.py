r"""Exponential delay functions."""

from __future__ import annotations

__all__ = ["ExponentialDelay", "exponential"]

from aretry.backoff.base import BaseDelayFunction


def exponential(iteration: int, last_delay: float, initial_value: float) -> float:  # noqa: ARG001
    """Double the previous delay.

    This is the default delay function of the controller.

    Args:
        iteration: The number of attempts already scheduled (unused).
        last_delay: The previous delay in milliseconds.
        initial_value: The initial delay in milliseconds (unused).

    Returns:
        ``last_delay * 2``.

    Example:
        ```pycon
        >>> from aretry.backoff import exponential
        >>> exponential(0, 300, 300)
        600
        >>> exponential(1, 600, 300)
        1200

        ```
    """
    return last_delay * 2


class ExponentialDelay(BaseDelayFunction):
    """Exponential delay function with a configurable growth factor.

    Calculates the next delay as: last_delay * factor.

    Args:
        factor: The growth factor applied to the previous delay
            (default: 2.0). Must be >= 1 so that the delay never shrinks.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialDelay
        >>> delay_fn = ExponentialDelay(factor=3.0)
        >>> delay_fn(0, 100.0, 100.0)
        300.0
        >>> delay_fn(1, 300.0, 100.0)
        900.0

        ```
    """

    def __init__(self, factor: float = 2.0) -> None:
        if factor < 1:
            msg = f"factor must be >= 1, got {factor}"
            raise ValueError(msg)

        self.factor = factor

    def __call__(self, iteration: int, last_delay: float, initial_value: float) -> float:  # noqa: ARG002
        return last_delay * self.factor
