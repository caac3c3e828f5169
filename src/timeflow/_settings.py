"""Configuration via pydantic-settings.

Configuration is loaded from ``TIMEFLOW_``-prefixed environment
variables and/or a ``.env`` file.  Nested models use ``__`` as the
delimiter, e.g. ``TIMEFLOW_LOGGING__LEVEL=DEBUG``.

The library itself needs no configuration: the clock provider and
controller work out of the box.  Settings cover the ambient concerns
of the ``timeflow`` command-line tool:

* **Logging** — level, format, optional file sink, rotation.
* **Flow** — default step, pace and length of ``timeflow simulate``.

All durations are in **seconds** except ``speed_millis``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings — nested via composition)
# -------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"json"`` (default) — one JSON object per line.
    - ``"text"`` — human-readable timestamped lines.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="json",
        description=(
            "Log output format. "
            "'json' emits structured JSON lines; "
            "'text' emits human-readable timestamped lines."
        ),
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class FlowSettings(BaseModel):
    """Defaults for simulated time flow.

    Environment variables (with ``__`` nesting)::

        TIMEFLOW_FLOW__STEP_SECONDS=60
        TIMEFLOW_FLOW__SPEED_MILLIS=100
        TIMEFLOW_FLOW__DURATION_SECONDS=600
    """

    step_seconds: Annotated[float, Field(gt=0)] = Field(
        default=60.0,
        description="Simulated seconds added per flow step.",
    )
    speed_millis: Annotated[int, Field(gt=0)] = Field(
        default=100,
        description="Real milliseconds to wait between flow steps.",
    )
    duration_seconds: Annotated[float, Field(gt=0)] = Field(
        default=600.0,
        description="Simulated seconds covered by one flow.",
    )


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for timeflow.

    Example ``.env``::

        TIMEFLOW_LOGGING__LEVEL=DEBUG
        TIMEFLOW_LOGGING__FORMAT=text
        TIMEFLOW_FLOW__SPEED_MILLIS=10
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMEFLOW_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    """``extra="ignore"`` lets a shared ``.env`` carry variables meant
    for other tools without failing validation."""

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
    flow: FlowSettings = Field(
        default_factory=FlowSettings,
        description="Default time flow parameters.",
    )
