from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def mock_loop() -> Mock:
    """Create a mock event loop recording the scheduled attempts."""
    return Mock(spec=asyncio.AbstractEventLoop)


@pytest.fixture
def fire_scheduled(mock_loop: Mock) -> Callable[[], None]:
    """Create a function running the last attempt scheduled on
    ``mock_loop``, as the event loop would once the delay elapsed."""

    def fire() -> None:
        _, callback, *args = mock_loop.call_later.call_args.args
        callback(*args)

    return fire


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()


@pytest.fixture
def fast_delay_fn() -> Callable[[int, float, float], float]:
    """Create a delay function returning 1ms to make tests run faster."""
    return lambda iteration, last_delay, initial_value: 1  # noqa: ARG005
