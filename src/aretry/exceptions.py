r"""Exceptions raised by the retry controller.

Exhaustion of the attempt budget is not an exception: it is signaled by
invoking the ``on_exhausted`` callback of the controller.
"""

from __future__ import annotations

__all__ = ["InvalidArgumentError", "RetryControllerError"]


class RetryControllerError(Exception):
    """Base class for all errors raised by ``aretry``."""


class InvalidArgumentError(RetryControllerError, ValueError):
    """Exception raised when a controller is built with invalid
    arguments.

    It is raised synchronously at construction, so no controller is
    produced.

    Args:
        message: A descriptive error message.

    Example:
        ```pycon
        >>> from aretry.exceptions import InvalidArgumentError
        >>> raise InvalidArgumentError("attempts must be > 0, got 0")
        Traceback (most recent call last):
            ...
        aretry.exceptions.InvalidArgumentError: attempts must be > 0, got 0

        ```
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
