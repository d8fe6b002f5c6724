r"""Delay capping and conversion utilities."""

from __future__ import annotations

__all__ = ["clamp_delay", "to_seconds"]

import logging

logger: logging.Logger = logging.getLogger(__name__)


def clamp_delay(delay: float, max_value: float) -> float:
    """Clamp a delay computed by a delay function to ``[0, max_value]``.

    Args:
        delay: The delay in milliseconds returned by the delay function.
        max_value: The upper bound in milliseconds.

    Returns:
        The clamped delay in milliseconds.

    Example:
        ```pycon
        >>> from aretry.utils.delay import clamp_delay
        >>> clamp_delay(600, max_value=3000)
        600
        >>> clamp_delay(60000, max_value=10)
        10
        >>> clamp_delay(-5, max_value=10)
        0
        >>> clamp_delay(float("nan"), max_value=10)
        10

        ```
    """
    # NaN fails every comparison and is capped like an oversized delay
    if not delay <= max_value:
        logger.debug(f"Capping delay from {delay}ms to {max_value}ms (max_value={max_value}ms)")
        return max_value
    if delay < 0:
        logger.debug(f"Raising negative delay {delay}ms to 0ms")
        return 0
    return delay


def to_seconds(delay: float) -> float:
    """Convert a delay in milliseconds to seconds.

    Args:
        delay: The delay in milliseconds.

    Returns:
        The delay in seconds, as expected by the ``asyncio`` scheduler.

    Example:
        ```pycon
        >>> from aretry.utils.delay import to_seconds
        >>> to_seconds(300)
        0.3

        ```
    """
    return delay / 1000
