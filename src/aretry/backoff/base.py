r"""Abstract base class for delay functions."""

from __future__ import annotations

__all__ = ["BaseDelayFunction"]

from abc import ABC, abstractmethod


class BaseDelayFunction(ABC):
    """Abstract base class for delay functions.

    A delay function computes the delay before the next attempt from the
    number of attempts already scheduled, the previous delay and the
    initial delay. Instances are plain callables, so they can be passed
    wherever a ``delay_fn`` is expected.
    """

    @abstractmethod
    def __call__(self, iteration: int, last_delay: float, initial_value: float) -> float:
        """Compute the delay before the next attempt.

        Args:
            iteration: The number of attempts already scheduled in the
                current cycle (0-indexed). For example, iteration=0 when
                the first attempt is being scheduled.
            last_delay: The previously computed delay in milliseconds.
                It is equal to ``initial_value`` for the first attempt.
            initial_value: The configured initial delay in milliseconds.

        Returns:
            The delay in milliseconds before the next attempt. The
                controller caps it to ``[0, max_value]``.
        """

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{self.__class__.__name__}({args})"
