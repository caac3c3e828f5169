"""Clock port and the built-in clock implementations.

A clock is anything with an ``instant()`` method returning the current
instant as a timezone-aware :class:`~datetime.datetime` in UTC.

Three implementations are provided:

- :class:`SystemClock` — real wall-clock time (``datetime.now(UTC)``).
- :class:`FixedClock` — always returns the same instant.
- :class:`OffsetClock` — another clock shifted by a fixed duration.

All of them are frozen dataclasses.  Replacing the active clock is a
single reference swap, so readers can never observe a half-built clock.

See Also:
    :mod:`timeflow._time` for the process-wide provider that holds the
    active clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable

from timeflow._errors import check_argument

_ZERO = timedelta(0)


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant.

    Implementations must be safe to call from any thread.  The
    returned datetime is timezone-aware and expressed in UTC.
    """

    def instant(self) -> datetime:
        """Return the current instant."""
        ...


def ensure_aware(value: datetime, name: str = "instant") -> datetime:
    """Return *value* converted to UTC, rejecting naive datetimes.

    Raises:
        ValueError: If *value* has no timezone information.
    """
    check_argument(
        value.tzinfo is not None and value.utcoffset() is not None,
        f"{name} must be timezone-aware",
    )
    return value.astimezone(UTC)


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Production clock reading real UTC wall-clock time."""

    def instant(self) -> datetime:
        return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock pinned to a single instant.

    Usage::

        clock = FixedClock(datetime(1983, 10, 23, 8, 15, tzinfo=UTC))
        assert clock.instant() == clock.instant()
    """

    fixed: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "fixed", ensure_aware(self.fixed, "fixed"))

    def instant(self) -> datetime:
        return self.fixed


@dataclass(frozen=True, slots=True)
class OffsetClock:
    """Clock that adds a constant *offset* to a *base* clock."""

    base: Clock
    offset: timedelta

    def instant(self) -> datetime:
        return self.base.instant() + self.offset


def offset(clock: Clock, duration: timedelta) -> Clock:
    """Return a clock that reads *duration* ahead of *clock*.

    Negative durations shift the clock backwards.  Offsets are folded
    where possible so that repeated jumps never build a chain of
    wrappers:

    - a zero duration returns *clock* unchanged;
    - a :class:`FixedClock` becomes a new :class:`FixedClock`;
    - an :class:`OffsetClock` becomes a single :class:`OffsetClock`
      over the same base;
    - any other clock is wrapped in an :class:`OffsetClock`.
    """
    if duration == _ZERO:
        return clock
    if isinstance(clock, FixedClock):
        return FixedClock(clock.fixed + duration)
    if isinstance(clock, OffsetClock):
        combined = clock.offset + duration
        if combined == _ZERO:
            return clock.base
        return OffsetClock(clock.base, combined)
    return OffsetClock(clock, duration)
