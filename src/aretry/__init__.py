r"""aretry - Retry controller with backoff for asyncio applications.

This package provides a small controller that repeatedly schedules a
caller-supplied action with an increasing delay, until the caller
reports success or the attempt budget is exhausted. It performs no I/O
itself, which makes it suitable to drive reconnection loops of any
client (databases, message brokers, HTTP APIs, ...).

Key Features:
    - Exponential backoff by default, with pluggable delay functions
    - Delay capped by a configurable maximum
    - Duplicate ``retry()`` calls are ignored while an attempt is pending
    - ``success()``, ``restart()`` and ``start()`` operations
    - Pass-through mode when retries are disabled
    - Plain functions and coroutine functions as callbacks

Example:
    ```pycon
    >>> from aretry import RetryController
    >>> from aretry.backoff import LinearDelay
    >>> def connect(iteration, delay):
    ...     pass  # try to connect, call controller.retry() on failure
    ...
    >>> def give_up(iteration):
    ...     print(f"giving up after {iteration} attempts")
    ...
    >>> controller = RetryController(
    ...     connect, give_up, {"attempts": 5, "delay_fn": LinearDelay()}
    ... )
    >>> controller()  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ATTEMPTS",
    "DEFAULT_INITIAL_VALUE",
    "DEFAULT_MAX_VALUE",
    "InvalidArgumentError",
    "RetryController",
    "RetryControllerError",
    "RetryOptions",
    "RetryPhase",
    "RetryState",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.controller import RetryController, RetryPhase, RetryState
from aretry.exceptions import InvalidArgumentError, RetryControllerError
from aretry.options import (
    DEFAULT_ATTEMPTS,
    DEFAULT_INITIAL_VALUE,
    DEFAULT_MAX_VALUE,
    RetryOptions,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
