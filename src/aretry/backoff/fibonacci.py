r"""Fibonacci delay function."""

from __future__ import annotations

__all__ = ["FibonacciDelay"]

from aretry.backoff.base import BaseDelayFunction


class FibonacciDelay(BaseDelayFunction):
    """Fibonacci delay function.

    Calculates the next delay as: initial_value * fibonacci(iteration + 1).

    The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...) ramps up more
    gradually than the exponential default. The previous delay is not
    used, so the sequence only depends on the iteration.

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciDelay
        >>> delay_fn = FibonacciDelay()
        >>> [delay_fn(i, 0, 100) for i in range(6)]
        [100, 100, 200, 300, 500, 800]

        ```
    """

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed).

        Args:
            n: The position in the Fibonacci sequence (1-indexed).

        Returns:
            The nth Fibonacci number.
        """
        if n <= 0:
            return 0
        a, b = 1, 1
        for _ in range(n - 2):
            a, b = b, a + b
        return b

    def __call__(self, iteration: int, last_delay: float, initial_value: float) -> float:  # noqa: ARG002
        return initial_value * self._fibonacci(iteration + 1)
