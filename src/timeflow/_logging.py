"""Log output that shows real and simulated time side by side.

When tests or ``timeflow simulate`` move the process clock, a log line
stamped only with the record's creation time says nothing about the
instant the code under test believed it was.  This module stamps both:

- :class:`ClockTimeFilter` copies the provider's current instant onto
  each record as ``clock_time`` together with ``clock_drift``, the
  simulated minus the real time in seconds.
- :class:`JsonFormatter` renders records as NDJSON and includes those
  attributes when present.
- :func:`configure_logging` wires the root logger from
  :class:`~timeflow._settings.LoggingSettings` for either format.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from timeflow._settings import LoggingSettings
from timeflow._time import time_provider

_ONE_MB = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_TEXT_FORMAT_WITH_CLOCK = (
    "%(asctime)s [%(levelname)s] %(name)s (clock %(clock_time)s): %(message)s"
)


def _created_at(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=UTC)


class ClockTimeFilter(logging.Filter):
    """Attach the active clock's instant to every record passing through.

    Sets ``record.clock_time`` (ISO 8601) and ``record.clock_drift``
    (float seconds, simulated minus real).  Never rejects a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        instant = time_provider().now()
        record.clock_time = instant.isoformat()
        record.clock_drift = round((instant - _created_at(record)).total_seconds(), 3)
        return True


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON objects (NDJSON).

    Keys in order: ``timestamp`` (real creation time, UTC), ``level``,
    ``logger``, ``message``, ``service``, then ``version`` when set,
    ``clock_time``/``clock_drift`` when the record carries them, and
    ``exception``/``stack_info`` when logged.

    Args:
        service: Application name included in every log line.
        version: Application version; omitted when empty.
        include_clock_time: Stamp records that did not pass through a
            :class:`ClockTimeFilter` with the active clock as well.
    """

    def __init__(
        self,
        *,
        service: str = "",
        version: str = "",
        include_clock_time: bool = False,
    ) -> None:
        super().__init__()
        self._constant: dict[str, str] = {"service": service}
        if version:
            self._constant["version"] = version
        self._stamp = ClockTimeFilter() if include_clock_time else None

    def format(self, record: logging.LogRecord) -> str:
        if self._stamp is not None and not hasattr(record, "clock_time"):
            self._stamp.filter(record)

        entry: dict[str, Any] = {
            "timestamp": _created_at(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self._constant,
        }
        for key in ("clock_time", "clock_drift"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)
        return json.dumps(entry, default=str)


def _build_formatter(
    settings: LoggingSettings,
    *,
    service: str,
    version: str,
    include_clock_time: bool,
) -> logging.Formatter:
    if settings.format == "json":
        return JsonFormatter(service=service, version=version)
    return logging.Formatter(
        _TEXT_FORMAT_WITH_CLOCK if include_clock_time else _TEXT_FORMAT
    )


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file is not None:
        handlers.append(
            RotatingFileHandler(
                settings.file,
                maxBytes=settings.max_file_size_mb * _ONE_MB,
                backupCount=settings.backup_count,
            )
        )
    return handlers


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str,
    version: str = "",
    include_clock_time: bool = False,
) -> None:
    """Replace the root logger's handlers according to *settings*.

    Previously installed root handlers are detached and closed, so
    calling this again does not leak open log files.  A stderr handler
    is always installed; ``settings.file`` adds a rotating file handler
    sized by ``max_file_size_mb`` and keeping ``backup_count`` files.

    With *include_clock_time* every handler carries a
    :class:`ClockTimeFilter`, and both formats show the simulated
    instant next to the real one.
    """
    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()

    formatter = _build_formatter(
        settings,
        service=service,
        version=version,
        include_clock_time=include_clock_time,
    )
    for handler in _build_handlers(settings):
        handler.setFormatter(formatter)
        if include_clock_time:
            handler.addFilter(ClockTimeFilter())
        root.addHandler(handler)

    root.setLevel(settings.level)
