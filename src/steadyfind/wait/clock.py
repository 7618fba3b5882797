"""Time sources for the poll loop.

All timestamps are milliseconds as floats. Only differences between
timestamps are meaningful.
"""

import time
from typing import Protocol

from .cancellation import CancellationToken


class Clock(Protocol):
    """Time source used by the poll loop."""

    def now(self) -> float:
        """Return the current time in milliseconds."""
        ...

    def sleep(self, duration_ms: float, cancel: CancellationToken | None = None) -> None:
        """Block for ``duration_ms``, returning early if ``cancel`` fires."""
        ...


class SystemClock:
    """Monotonic wall clock backed by :func:`time.monotonic`."""

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def sleep(self, duration_ms: float, cancel: CancellationToken | None = None) -> None:
        if duration_ms <= 0:
            return
        if cancel is not None:
            cancel.wait(duration_ms / 1000.0)
        else:
            time.sleep(duration_ms / 1000.0)

    def __repr__(self) -> str:
        return "SystemClock()"


class ManualClock:
    """Virtual clock whose time only moves when slept on or advanced.

    Sleeping advances the clock instantly, so stability timing can be
    exercised deterministically.

    Attributes:
        current_ms: Current virtual time
        sleeps: Durations passed to :meth:`sleep`, in call order
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self.current_ms = start_ms
        self.sleeps: list[float] = []

    def now(self) -> float:
        return self.current_ms

    def sleep(self, duration_ms: float, cancel: CancellationToken | None = None) -> None:
        self.sleeps.append(duration_ms)
        if duration_ms > 0:
            self.current_ms += duration_ms

    def advance(self, duration_ms: float) -> None:
        """Move the clock forward without recording a sleep."""
        self.current_ms += duration_ms

    def __repr__(self) -> str:
        return f"ManualClock(current_ms={self.current_ms})"
