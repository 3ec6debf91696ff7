"""Log how long a block of work took when it exceeds a threshold."""

from __future__ import annotations

import inspect
import logging
import time
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _format_duration(seconds: float) -> str:
    nanos = int(seconds * 1e9)
    if nanos < 1_000:
        return f"{nanos}ns"
    if nanos < 1_000_000:
        return f"{nanos / 1e3:g}µs"
    if nanos < 1_000_000_000:
        return f"{nanos / 1e6:g}ms"
    return f"{nanos / 1e9:g}s"


def _caller_name() -> str:
    frame = inspect.currentframe()
    try:
        target = frame.f_back.f_back if frame and frame.f_back else None
        if target is None:
            return ""
        code = target.f_code
        module = inspect.getmodulename(code.co_filename) or ""
        return f"{module}.{code.co_name}"
    finally:
        del frame


class CostLog:
    """Measures from creation; logs when finished if the threshold is reached.

    Finish it by calling it or by leaving it as a context manager.
    """

    def __init__(
        self,
        threshold_ms: int,
        extra: tuple[Any, ...],
        caller: str,
        level: int = logging.INFO,
        job_count: Optional[int] = None,
    ) -> None:
        self._threshold_ms = threshold_ms
        self._extra = extra
        self._caller = caller
        self._level = level
        self._job_count = job_count
        self._start = time.perf_counter()

    def __call__(self) -> None:
        elapsed = time.perf_counter() - self._start
        if int(elapsed * 1000) < self._threshold_ms:
            return
        extra = "[" + " ".join(str(e() if callable(e) else e) for e in self._extra) + "]"
        cost = _format_duration(elapsed)
        if self._job_count is None:
            logger.log(self._level, "[cost: %s][%s] %s", cost, self._caller, extra)
        else:
            per_job = _format_duration(elapsed / self._job_count)
            logger.log(
                self._level, "[cost: %s][per job cost: %s][%s] %s", cost, per_job, self._caller, extra
            )

    def __enter__(self) -> CostLog:
        return self

    def __exit__(self, *exc_info: object) -> bool:
        self()
        return False


def log_time_cost(threshold_ms: int, *args: Any) -> CostLog:
    """Log at INFO when the work takes at least ``threshold_ms``; callables in args are evaluated then."""
    return CostLog(threshold_ms, args, _caller_name())


def log_time_cost_per_job(threshold_ms: int, job_count: int, *args: Any) -> CostLog:
    """Like :func:`log_time_cost`, also logging the time per job."""
    if job_count == 0:
        raise ValueError("job_count must not be zero")
    return CostLog(threshold_ms, args, _caller_name(), job_count=job_count)


def warn_time_cost(threshold_ms: int, *args: Any) -> CostLog:
    """Like :func:`log_time_cost`, logging at WARNING."""
    return CostLog(threshold_ms, args, _caller_name(), level=logging.WARNING)