r"""Utility functions for the retry controller."""

from __future__ import annotations

__all__ = [
    "clamp_delay",
    "invoke_callback",
    "to_seconds",
    "validate_callable",
    "validate_delay_value",
    "validate_retry_options",
]

from aretry.utils.delay import clamp_delay, to_seconds
from aretry.utils.invoke import invoke_callback
from aretry.utils.validation import (
    validate_callable,
    validate_delay_value,
    validate_retry_options,
)
