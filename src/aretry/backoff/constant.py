r"""Constant delay function."""

from __future__ import annotations

__all__ = ["ConstantDelay"]

from aretry.backoff.base import BaseDelayFunction


class ConstantDelay(BaseDelayFunction):
    """Constant/fixed delay function.

    Returns the same delay for every attempt, regardless of the iteration.

    This is useful in tests, or when the recovery time of the
    collaborator is known.

    Args:
        delay: The fixed delay in milliseconds. If ``None`` (default),
            the configured initial delay of the controller is used.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantDelay
        >>> delay_fn = ConstantDelay(delay=50)
        >>> delay_fn(0, 300, 300)
        50
        >>> delay_fn(7, 50, 300)
        50
        >>> ConstantDelay()(3, 1000, 300)
        300

        ```
    """

    def __init__(self, delay: float | None = None) -> None:
        if delay is not None and delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __call__(self, iteration: int, last_delay: float, initial_value: float) -> float:  # noqa: ARG002
        if self.delay is None:
            return initial_value
        return self.delay
