"""Periodic execution and retry helpers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import timedelta
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def timer_func(fun: Callable[[], object], interval: float | timedelta) -> Callable[[], None]:
    """Call ``fun`` every ``interval`` seconds in a background thread.

    Returns a function that stops the timer.
    """
    seconds = interval.total_seconds() if isinstance(interval, timedelta) else float(interval)
    if seconds <= 0:
        raise ValueError("interval must be positive")
    stopped = threading.Event()

    def run() -> None:
        logger.info("start timer func, interval: %ss", seconds)
        while not stopped.wait(seconds):
            fun()

    threading.Thread(target=run, daemon=True).start()

    def stop() -> None:
        stopped.set()
        logger.info("stop timer func")

    return stop


def retry(fn: Callable[[], bool], retries: int) -> bool:
    """Call ``fn`` up to ``retries + 1`` times until it returns true."""
    return any(fn() for _ in range(retries + 1))


def retry_func(fn: Callable[[], bool], try_count: int) -> bool:
    """Call ``fn`` up to ``try_count`` times until it returns true."""
    return any(fn() for _ in range(try_count))


def must(fn: Callable[[], T]) -> T:
    """Return ``fn()``; a failure is logged and raised again."""
    try:
        return fn()
    except Exception:
        logger.exception("required call failed")
        raise