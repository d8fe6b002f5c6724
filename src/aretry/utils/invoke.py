r"""Callback invocation utilities.

The controller callbacks can be plain functions or coroutine functions.
The result of a coroutine function is scheduled as a task on the event
loop so the controller never awaits anything itself.
"""

from __future__ import annotations

__all__ = ["invoke_callback"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def invoke_callback(
    callback: Callable[..., Any],
    *args: Any,
    loop: asyncio.AbstractEventLoop | None = None,
    tasks: set[asyncio.Future] | None = None,
) -> Any:
    """Invoke a callback and schedule its result if it is awaitable.

    Exceptions raised by the callback itself are propagated to the
    caller. Exceptions raised by the scheduled task are left to the
    event loop.

    Args:
        callback: The callback to invoke.
        *args: The positional arguments passed to the callback.
        loop: The event loop used to schedule an awaitable result. If
            ``None``, the running loop is used.
        tasks: Optional set where the scheduled task is stored until it
            is done, so it is not garbage collected while running.

    Returns:
        The callback result, or the scheduled task if the result is
            awaitable.

    Raises:
        RuntimeError: If the result is awaitable, ``loop`` is ``None``
            and no event loop is running.

    Example:
        ```pycon
        >>> from aretry.utils.invoke import invoke_callback
        >>> invoke_callback(max, 1, 2)
        2

        ```
    """
    result = callback(*args)
    if not inspect.isawaitable(result):
        return result

    if loop is None:
        loop = asyncio.get_running_loop()
    task = asyncio.ensure_future(result, loop=loop)
    logger.debug(f"Scheduled awaitable result of {callback!r} as {task!r}")
    if tasks is not None:
        tasks.add(task)
        task.add_done_callback(tasks.discard)
    return task
