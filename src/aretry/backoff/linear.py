r"""Linear delay function."""

from __future__ import annotations

__all__ = ["LinearDelay"]

from aretry.backoff.base import BaseDelayFunction


class LinearDelay(BaseDelayFunction):
    """Linear delay function.

    Calculates the next delay as: last_delay + increment.

    Args:
        increment: The amount in milliseconds added to the previous
            delay. If ``None`` (default), the configured initial delay of
            the controller is used, which gives the sequence
            ``2 * initial_value``, ``3 * initial_value``, ...

    Example:
        ```pycon
        >>> from aretry.backoff import LinearDelay
        >>> delay_fn = LinearDelay(increment=100)
        >>> delay_fn(0, 300, 300)
        400
        >>> delay_fn(1, 400, 300)
        500
        >>> LinearDelay()(0, 300, 300)
        600

        ```
    """

    def __init__(self, increment: float | None = None) -> None:
        if increment is not None and increment < 0:
            msg = f"increment must be non-negative, got {increment}"
            raise ValueError(msg)

        self.increment = increment

    def __call__(self, iteration: int, last_delay: float, initial_value: float) -> float:  # noqa: ARG002
        increment = initial_value if self.increment is None else self.increment
        return last_delay + increment
