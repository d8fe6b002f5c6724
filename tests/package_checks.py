from __future__ import annotations

import asyncio
import logging
import sys

import httpx

import aretry
from aretry.backoff import ConstantDelay

logger: logging.Logger = logging.getLogger(__name__)

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


async def check_controller() -> None:
    logger.info("Checking controller...")
    result = asyncio.get_running_loop().create_future()
    statuses = iter([503, 200])

    async def connect(iteration: int, delay: float) -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{HTTPBIN_URL}/status/{next(statuses)}")
        if response.status_code == 200:
            controller.success()
            result.set_result(iteration)
        else:
            controller.retry()

    controller = aretry.RetryController(
        connect, result.set_result, {"delay_fn": ConstantDelay(delay=100)}
    )
    controller()
    assert await asyncio.wait_for(result, timeout=30) == 2


async def check_disabled() -> None:
    logger.info("Checking disabled controller...")
    calls = []
    controller = aretry.RetryController(lambda: calls.append(1), calls.append, False)
    controller()
    controller()
    assert calls == [1, 0]


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        asyncio.run(check_controller())
        asyncio.run(check_disabled())

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
