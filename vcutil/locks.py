"""Run callables under a mutual-exclusion or reader/writer lock."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import TypeVar

R = TypeVar("R")


class Locker:
    """Runs callables one at a time."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def do(self, f: Callable[[], R]) -> R:
        """Call ``f`` while holding the lock and return its result."""
        with self._lock:
            return f()


class RWLocker:
    """Many concurrent readers or one writer; waiting writers go first. Not reentrant."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writing = False
        self._waiting_writers = 0

    def read(self, f: Callable[[], R]) -> R:
        """Call ``f`` holding a shared lock."""
        with self._cond:
            while self._writing or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            return f()
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    def write(self, f: Callable[[], R]) -> R:
        """Call ``f`` holding the lock exclusively."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writing = True
        try:
            return f()
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()