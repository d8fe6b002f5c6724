r"""Unit tests for the exceptions."""

from __future__ import annotations

import pytest

from aretry import InvalidArgumentError, RetryControllerError


def test_invalid_argument_error_message() -> None:
    """Test that the message is kept."""
    error = InvalidArgumentError("attempts must be > 0, got 0")
    assert str(error) == "attempts must be > 0, got 0"


@pytest.mark.parametrize("cls", [RetryControllerError, ValueError, Exception])
def test_invalid_argument_error_hierarchy(cls: type[Exception]) -> None:
    """Test that InvalidArgumentError can be caught by its bases."""
    with pytest.raises(cls):
        raise InvalidArgumentError("invalid")
