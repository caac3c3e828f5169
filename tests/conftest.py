"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

# The timeflow plugin is registered via a ``pytest11`` entry point
# (pyproject.toml) for external consumers.  In our own test suite we
# disable it (``-p no:timeflow``) and load it explicitly here instead,
# so the timeflow import chain is measured by pytest-cov.
pytest_plugins = ["timeflow.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture(autouse=True)
def _reset_process_clock() -> Iterator[None]:
    """Restore the process-wide clock after every test."""
    yield
    from timeflow.testing import time_controller

    time_controller().reset()
