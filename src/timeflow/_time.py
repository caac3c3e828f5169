"""Process-wide provider of the current time.

Production code reads the time through this module and nothing else::

    import timeflow

    created_at = timeflow.now()

The provider holds exactly one active :class:`~timeflow._clock.Clock`.
It starts with :class:`~timeflow._clock.SystemClock` and is only ever
re-pointed by :class:`timeflow.testing.TimeController`, which shares
the same provider instance.

Reads take no lock.  The active clock lives in a single attribute and
installing a new one is one reference assignment of an immutable
object, so every reader sees either the old clock or the new one.
"""

from __future__ import annotations

from datetime import datetime

from timeflow._clock import Clock, SystemClock


class TimeProvider:
    """Read-only view of the active clock.

    Args:
        clock: Initial clock.  Defaults to :class:`SystemClock`.
    """

    __slots__ = ("_clock",)

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()

    def now(self) -> datetime:
        """Return the instant produced by the active clock."""
        return self._clock.instant()

    def clock(self) -> Clock:
        """Return the active clock itself."""
        return self._clock

    def _install(self, clock: Clock) -> None:
        # Writer side; reserved for TimeController, which serialises calls.
        self._clock = clock

    def __repr__(self) -> str:
        return f"TimeProvider(clock={self._clock!r})"


_PROVIDER = TimeProvider()


def time_provider() -> TimeProvider:
    """Return the process-wide :class:`TimeProvider`."""
    return _PROVIDER


def now() -> datetime:
    """Return the current instant from the process-wide provider."""
    return _PROVIDER.now()


def clock() -> Clock:
    """Return the process-wide active clock."""
    return _PROVIDER.clock()
