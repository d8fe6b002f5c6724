r"""Retry controller scheduling an action with an increasing delay.

The controller repeatedly schedules a caller-supplied action on an
``asyncio`` event loop until the caller reports success or the attempt
budget is exhausted. It has three states:

- IDLE: No attempt is pending, the budget is not exhausted
- SCHEDULED: An attempt is scheduled and will fire after its delay
- EXHAUSTED: The budget is consumed, only a reset leaves this state

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import RetryController
    >>> async def main():
    ...     done = asyncio.get_running_loop().create_future()
    ...     def connect(iteration, delay):
    ...         print(f"attempt {iteration} after {delay}ms")
    ...         controller.retry()  # the connection failed
    ...     controller = RetryController(
    ...         connect, done.set_result, {"initial_value": 5, "attempts": 2}
    ...     )
    ...     controller()
    ...     return await done
    ...
    >>> asyncio.run(main())
    attempt 1 after 10ms
    attempt 2 after 20ms
    2

    ```
"""

from __future__ import annotations

__all__ = ["RetryController", "RetryPhase", "RetryState"]

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from aretry.options import resolve_options
from aretry.utils.delay import clamp_delay, to_seconds
from aretry.utils.invoke import invoke_callback
from aretry.utils.validation import validate_callable, validate_retry_options

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from aretry.options import RetryOptions

logger: logging.Logger = logging.getLogger(__name__)


class RetryPhase(Enum):
    """Phase of the controller entry point.

    Attributes:
        NOT_STARTED: Calling the controller behaves like ``start()``.
        STARTED: Calling the controller behaves like ``retry()``.
    """

    NOT_STARTED = "not_started"
    STARTED = "started"


class RetryState(Enum):
    """Retry controller states.

    Attributes:
        IDLE: No attempt is pending and the budget is not exhausted.
        SCHEDULED: An attempt is scheduled on the event loop.
        EXHAUSTED: The attempt budget is consumed, terminal until a reset.
    """

    IDLE = "idle"
    SCHEDULED = "scheduled"
    EXHAUSTED = "exhausted"


class RetryController:
    r"""Controller retrying an action with backoff.

    The action is invoked as ``action(iteration, delay)`` after ``delay``
    milliseconds, where ``iteration`` is the 1-indexed attempt number.
    The action is expected to call ``retry()`` when the underlying work
    failed, and ``success()`` when it succeeded: the controller has no
    way to detect success on its own. Once ``attempts`` attempts were
    made, the next ``retry()`` invokes ``on_exhausted(iteration)`` once
    and the controller stays exhausted until it is reset.

    Timers are scheduled with ``loop.call_later``, so the controller must
    be driven from the event loop thread. Both callbacks can be coroutine
    functions, in which case their result is scheduled as a task.

    Args:
        action: The callback invoked for each attempt.
        on_exhausted: The callback invoked when the attempt budget is
            exhausted.
        options: A ``RetryOptions``, a mapping of option names, ``None``
            for the defaults, or a boolean shorthand for ``enabled``.
            With ``False``, ``start()`` invokes ``action()`` immediately
            without arguments and ``retry()`` gives up immediately.
        loop: Optional event loop used to schedule the attempts. If
            ``None``, the running loop is used.
        on_state_change: Optional callback called when the controller
            state changes. Receives (old_state: RetryState,
            new_state: RetryState).

    Raises:
        InvalidArgumentError: If a callback is not callable or if the
            options are invalid.

    Example:
        ```pycon
        >>> from aretry import RetryController, RetryState
        >>> controller = RetryController(print, print, {"attempts": 5})
        >>> controller.state
        <RetryState.IDLE: 'idle'>
        >>> controller.iteration
        0
        >>> controller.options.attempts
        5

        ```
    """

    def __init__(
        self,
        action: Callable[..., Any],
        on_exhausted: Callable[[int], Any],
        options: RetryOptions | Mapping[str, Any] | bool | None = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
        on_state_change: Callable[[RetryState, RetryState], None] | None = None,
    ) -> None:
        validate_callable(action, "action")
        validate_callable(on_exhausted, "on_exhausted")
        if on_state_change is not None:
            validate_callable(on_state_change, "on_state_change")
        self._options = resolve_options(options)
        validate_retry_options(self._options)

        self._action = action
        self._on_exhausted = on_exhausted
        self._loop = loop
        self._on_state_change = on_state_change
        self._tasks: set[asyncio.Future] = set()

        self._state = RetryState.IDLE
        self._timer: asyncio.TimerHandle | None = None
        self._epoch = 0
        self._reset()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(state={self._state.value}, "
            f"iteration={self._iteration}, attempts={self._options.attempts}, "
            f"enabled={self._options.enabled})"
        )

    def __call__(self) -> None:
        """Start the controller on the first call, retry afterwards."""
        if self._phase is RetryPhase.NOT_STARTED:
            self.start()
        else:
            self.retry()

    @property
    def options(self) -> RetryOptions:
        """The resolved options of the controller."""
        return self._options

    @property
    def enabled(self) -> bool:
        """Whether the retry behavior is enabled."""
        return self._options.enabled

    @property
    def iteration(self) -> int:
        """The number of attempts scheduled since the last reset."""
        return self._iteration

    @property
    def last_delay(self) -> float:
        """The last value returned by the delay function, before
        capping."""
        return self._last_delay

    @property
    def phase(self) -> RetryPhase:
        """The phase of the entry point."""
        return self._phase

    @property
    def state(self) -> RetryState:
        """The current controller state."""
        return self._state

    @property
    def pending(self) -> bool:
        """Whether an attempt is scheduled."""
        return self._timer is not None

    def retry(self) -> None:
        """Schedule the next attempt or give up.

        Calling it while an attempt is already scheduled, or after
        ``on_exhausted`` was invoked, does nothing. It is therefore safe
        to call it several times from the same action.

        Raises:
            RuntimeError: If an attempt must be scheduled while no event
                loop is running and no loop was given to the controller.
        """
        if self._timer is not None:
            logger.debug("Attempt already scheduled, ignoring retry")
            return
        if self._state is RetryState.EXHAUSTED:
            logger.debug(f"Retries already exhausted after {self._iteration} attempt(s)")
            return
        if not self._options.enabled or self._iteration >= self._options.attempts:
            self._give_up()
            return

        loop = self._get_loop()
        self._last_delay = self._options.delay_fn(
            self._iteration, self._last_delay, self._options.initial_value
        )
        self._iteration += 1
        delay = clamp_delay(self._last_delay, self._options.max_value)
        logger.debug(
            f"Scheduling attempt {self._iteration}/{self._options.attempts} in {delay}ms"
        )
        self._timer = loop.call_later(
            to_seconds(delay), self._fire, self._epoch, self._iteration, delay
        )
        self._change_state(RetryState.SCHEDULED)

    def success(self) -> None:
        """Reset the controller to its initial state.

        The pending attempt, if any, is cancelled. It must be called once
        the work done by the action succeeded.
        """
        logger.debug(f"Resetting retry controller after {self._iteration} attempt(s)")
        self._reset()

    reset = success

    def restart(self) -> None:
        """Reset the controller and immediately schedule a first
        attempt."""
        self.success()
        self.retry()

    def start(self) -> None:
        """Perform the first attempt.

        With retries disabled, the action is invoked immediately without
        arguments. Otherwise it behaves like ``retry()``. Once started,
        it behaves like ``retry()`` until the next reset.
        """
        if self._phase is RetryPhase.STARTED:
            self.retry()
            return

        self._phase = RetryPhase.STARTED
        if not self._options.enabled:
            logger.debug("Retries are disabled, invoking action immediately")
            invoke_callback(self._action, loop=self._loop, tasks=self._tasks)
            return
        self.retry()

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def _fire(self, epoch: int, iteration: int, delay: float) -> None:
        """Run a scheduled attempt.

        Args:
            epoch: The epoch captured when the attempt was scheduled.
            iteration: The attempt number passed to the action.
            delay: The delay in milliseconds passed to the action.
        """
        if epoch != self._epoch:
            # The controller was reset after this attempt was scheduled
            logger.debug(f"Dropping stale attempt {iteration} (epoch {epoch} != {self._epoch})")
            return
        self._timer = None
        self._change_state(RetryState.IDLE)
        invoke_callback(self._action, iteration, delay, loop=self._loop, tasks=self._tasks)

    def _give_up(self) -> None:
        logger.info(f"Giving up after {self._iteration} attempt(s)")
        self._change_state(RetryState.EXHAUSTED)
        invoke_callback(self._on_exhausted, self._iteration, loop=self._loop, tasks=self._tasks)

    def _reset(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._epoch += 1
        self._iteration = 0
        self._last_delay = self._options.initial_value
        self._phase = RetryPhase.NOT_STARTED
        self._change_state(RetryState.IDLE)

    def _change_state(self, new_state: RetryState) -> None:
        """Change the controller state and invoke the observer.

        Args:
            new_state: The new state to transition to.
        """
        old_state = self._state
        if old_state == new_state:
            return
        self._state = new_state
        logger.debug(f"Retry controller state changed: {old_state.value} -> {new_state.value}")
        if self._on_state_change is not None:
            try:
                self._on_state_change(old_state, new_state)
            except Exception as e:  # noqa: BLE001
                logger.warning(f"Error in retry controller state change callback: {e}")
