"""Command-line tool for inspecting and simulating the clock (Typer-based).

Provides :func:`build_cli` and the ``timeflow`` console script:

- ``timeflow now`` prints the current instant.
- ``timeflow simulate`` freezes the clock, lets simulated time flow in
  fixed steps and prints every tick.  The clock active before the
  run is restored afterwards.

Global options (``--version``, ``--log-level``, ``--log-format``,
``--env-file``) are parsed by the callback and applied on top of
:class:`~timeflow._settings.Settings`.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from datetime import UTC, datetime, timedelta
from typing import Annotated, get_args

import click
import typer
from pydantic import ValidationError

from timeflow._clock import Clock
from timeflow._logging import configure_logging
from timeflow._settings import LoggingSettings, Settings
from timeflow._time import time_provider
from timeflow.testing._controller import time_controller

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_RUNTIME_ERROR = 3

# ---------------------------------------------------------------------------
# Allowed values (extracted from LoggingSettings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)

_SERVICE = "timeflow"


def _version() -> str:
    from timeflow import __version__

    return __version__


def _parse_start(raw: str | None) -> datetime:
    if raw is None:
        return time_provider().now()
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise typer.BadParameter(
            f"Invalid ISO 8601 instant '{raw}'.",
            param_hint="'--start'",
        ) from exc
    # Naive input is read as UTC.
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def build_cli() -> typer.Typer:
    """Construct the ``timeflow`` Typer application.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    cli = typer.Typer(
        help="timeflow — inspect the process-wide clock and simulate time flow.",
    )

    # -- global options -----------------------------------------------------

    @cli.callback(invoke_without_command=True)
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option(
                "--version",
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
    ) -> None:
        if version_flag:
            typer.echo(f"{_SERVICE} v{_version()}")
            raise typer.Exit()

        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        try:
            settings = Settings(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )

        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        configure_logging(
            settings.logging,
            service=_SERVICE,
            version=_version(),
            include_clock_time=True,
        )
        ctx.obj = settings

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    # -- commands -----------------------------------------------------------

    @cli.command()
    def now() -> None:
        """Print the current instant (ISO 8601, UTC)."""
        typer.echo(time_provider().now().isoformat())

    @cli.command()
    def simulate(
        ctx: typer.Context,
        start: Annotated[
            str | None,
            typer.Option("--start", help="ISO 8601 start instant (default: now)."),
        ] = None,
        duration: Annotated[
            float | None,
            typer.Option(
                "--duration",
                click_type=click.FloatRange(min=0, min_open=True),
                help="Simulated seconds to cover.",
            ),
        ] = None,
        step: Annotated[
            float | None,
            typer.Option(
                "--step",
                click_type=click.FloatRange(min=0, min_open=True),
                help="Simulated seconds per tick.",
            ),
        ] = None,
        speed: Annotated[
            int | None,
            typer.Option(
                "--speed",
                min=1,
                help="Real milliseconds between ticks.",
            ),
        ] = None,
    ) -> None:
        """Freeze the clock and let simulated time flow, printing each tick."""
        settings: Settings = ctx.obj
        start_at = _parse_start(start)
        span = timedelta(
            seconds=duration if duration is not None else settings.flow.duration_seconds
        )
        tick = timedelta(
            seconds=step if step is not None else settings.flow.step_seconds
        )
        pace = speed if speed is not None else settings.flow.speed_millis

        def _echo_tick(clock: Clock) -> None:
            typer.echo(clock.instant().isoformat())

        controller = time_controller()
        try:
            with contextlib.suppress(KeyboardInterrupt), controller.frozen_at(start_at):
                controller.register_observer(_echo_tick)
                try:
                    controller.time_flow(tick, start_at + span, pace)
                finally:
                    controller.clear_observers()
        except Exception as exc:
            logger.error("Runtime error: %s", exc)
            sys.exit(EXIT_RUNTIME_ERROR)

    return cli


def main() -> None:
    """Console-script entry point."""
    build_cli()()
