"""timeflow.

A process-wide clock that production code reads directly and tests can
freeze, shift or animate through :mod:`timeflow.testing`.
"""

from importlib.metadata import PackageNotFoundError, version

from timeflow._clock import Clock, FixedClock, OffsetClock, SystemClock, offset
from timeflow._errors import TimeFlowInterruptedError
from timeflow._logging import ClockTimeFilter, JsonFormatter, configure_logging
from timeflow._settings import FlowSettings, LoggingSettings, Settings
from timeflow._time import TimeProvider, clock, now, time_provider

try:
    # Prefer the generated version file (setuptools_scm at build time)
    from timeflow._version import __version__
except ImportError:
    try:
        # Fallback to installed package metadata
        __version__ = version("timeflow")
    except PackageNotFoundError:
        # Last resort fallback for editable installs without metadata
        __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Time
    "TimeProvider",
    "clock",
    "now",
    "time_provider",
    # Clocks
    "Clock",
    "FixedClock",
    "OffsetClock",
    "SystemClock",
    "offset",
    # Errors
    "TimeFlowInterruptedError",
    # Logging
    "ClockTimeFilter",
    "JsonFormatter",
    "configure_logging",
    # Settings
    "FlowSettings",
    "LoggingSettings",
    "Settings",
]
