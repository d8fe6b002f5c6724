r"""Configuration dataclass and defaults for the retry controller.

All the delays are expressed in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ATTEMPTS",
    "DEFAULT_INITIAL_VALUE",
    "DEFAULT_MAX_VALUE",
    "RetryOptions",
    "resolve_options",
]

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from aretry.backoff.exponential import exponential
from aretry.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

# Default delay before the first attempt, in milliseconds
DEFAULT_INITIAL_VALUE = 300

# Upper bound on any scheduled delay, in milliseconds
DEFAULT_MAX_VALUE = 3000

# Default number of attempts before giving up
DEFAULT_ATTEMPTS = 3


@dataclass(frozen=True)
class RetryOptions:
    """Configuration of a ``RetryController``.

    The options are immutable. Validation happens when the controller is
    built because the constraints depend on ``enabled``.

    Args:
        initial_value: The delay in milliseconds used to seed
            ``delay_fn``. Must be >= 0.
        max_value: Upper bound in milliseconds on any scheduled delay.
            Must be >= ``initial_value``.
        attempts: Maximum number of attempts before ``on_exhausted`` is
            invoked. Must be > 0 when retries are enabled.
        delay_fn: Function ``(iteration, last_delay, initial_value)``
            returning the next delay in milliseconds. Defaults to
            doubling the previous delay.
        enabled: If ``False``, the controller performs the action once
            without any backoff semantics.

    Example:
        ```pycon
        >>> from aretry.options import RetryOptions
        >>> options = RetryOptions()
        >>> options.attempts
        3
        >>> options = options.merge(attempts=5, max_value=None)
        >>> options.attempts, options.max_value
        (5, 3000)

        ```
    """

    initial_value: float = DEFAULT_INITIAL_VALUE
    max_value: float = DEFAULT_MAX_VALUE
    attempts: int = DEFAULT_ATTEMPTS
    delay_fn: Callable[[int, float, float], float] = field(default=exponential)
    enabled: bool = True

    def merge(self, **overrides: Any) -> RetryOptions:
        """Create new options with the specified fields overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for the fields to override.

        Returns:
            A new ``RetryOptions`` instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the options to a dictionary.

        Returns:
            Dictionary with one entry per field.

        Example:
            ```pycon
            >>> from aretry.options import RetryOptions
            >>> RetryOptions(attempts=5).to_dict()["attempts"]
            5

            ```
        """
        return asdict(self)


def resolve_options(options: RetryOptions | Mapping[str, Any] | bool | None) -> RetryOptions:
    """Build a ``RetryOptions`` from the value given to the controller.

    Args:
        options: Either a ``RetryOptions`` returned as is, a mapping of
            field names where missing keys fall back to the defaults,
            ``None`` for all the defaults, or a boolean shorthand for
            ``enabled``. Values given in a mapping are kept as is, ``None``
            included, and checked when the controller is built.

    Returns:
        The resolved options.

    Raises:
        InvalidArgumentError: If the mapping has unknown keys or if
            ``options`` has an unsupported type.

    Example:
        ```pycon
        >>> from aretry.options import resolve_options
        >>> resolve_options(False).enabled
        False
        >>> resolve_options({"attempts": 5}).attempts
        5

        ```
    """
    if options is None:
        return RetryOptions()
    if isinstance(options, RetryOptions):
        return options
    # bool is checked before Mapping since it is the shorthand for enabled
    if isinstance(options, bool):
        return RetryOptions(enabled=options)
    if isinstance(options, Mapping):
        names = {f.name for f in fields(RetryOptions)}
        unknown = sorted(set(options) - names)
        if unknown:
            msg = f"unknown option(s) {unknown}, expected a subset of {sorted(names)}"
            raise InvalidArgumentError(msg)
        return replace(RetryOptions(), **options)
    msg = (
        "options must be a RetryOptions, a mapping, a bool or None, "
        f"got {type(options).__name__}"
    )
    raise InvalidArgumentError(msg)
