"""Fixed-interval polling with a deadline."""

from __future__ import annotations

import time
from collections.abc import Callable

from compose_harness.types.readiness import ReadinessResult

from .logging import logger


def poll_until(
    check: Callable[[], ReadinessResult],
    *,
    timeout: float,
    interval: float,
) -> ReadinessResult:
    """Evaluate `check` until it reports ready or `timeout` elapses.

    Sleeps `interval` seconds between attempts (never past the deadline). The
    check is always evaluated at least once, even with a zero timeout.
    Intermediate failures are only logged at DEBUG.

    Args:
        check: Readiness check returning a ReadinessResult.
        timeout: Maximum time to wait in seconds.
        interval: Time between attempts in seconds.

    Returns:
        The successful result, or a failure whose reason starts with
        "Timed out after" and carries the last observed reason.
    """
    deadline = time.monotonic() + timeout
    attempt = 0
    while True:
        attempt += 1
        result = check()
        if result.ready:
            return result

        logger.debug(f"Attempt {attempt} not ready: {result.reason}")
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return ReadinessResult.failure(f"Timed out after {timeout}s ({attempt} attempts): {result.reason}")
        time.sleep(min(interval, remaining))


__all__ = ["poll_until"]
