r"""Delay functions used to compute the backoff between attempts.

Every delay function follows the same signature:
``delay_fn(iteration, last_delay, initial_value) -> next_delay`` where
all the delays are expressed in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "BaseDelayFunction",
    "ConstantDelay",
    "ExponentialDelay",
    "FibonacciDelay",
    "LinearDelay",
    "exponential",
]

from aretry.backoff.base import BaseDelayFunction
from aretry.backoff.constant import ConstantDelay
from aretry.backoff.exponential import ExponentialDelay, exponential
from aretry.backoff.fibonacci import FibonacciDelay
from aretry.backoff.linear import LinearDelay
