"""Unit tests for timeflow.testing — public test-support utilities.

Test Techniques Used:
    - Specification-based Testing: Public API surface, ``__all__``
      completeness.
    - Identity Testing: Re-exported symbols are the *same* objects
      as the originals in their private modules.
    - Fixture Injection: Plugin-registered fixtures are automatically
      available without local definitions.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import timeflow
import timeflow.testing as testing_mod
from timeflow._clock import FixedClock, SystemClock
from timeflow.testing import TimeController, make_settings, time_controller
from timeflow.testing import _controller, _settings

# ---------------------------------------------------------------------------
# TestPublicAPI — __all__ and importability
# ---------------------------------------------------------------------------


class TestPublicAPI:
    """All expected symbols are importable and listed in ``__all__``."""

    EXPECTED_NAMES = {
        "Observer",
        "TimeController",
        "make_settings",
        "time_controller",
    }

    def test_all_contains_expected_symbols(self) -> None:
        """``__all__`` matches the documented public API.

        Technique: Specification-based — verifying module contract.
        """
        assert set(testing_mod.__all__) == self.EXPECTED_NAMES

    def test_all_symbols_importable(self) -> None:
        """Every name in ``__all__`` resolves to an attribute.

        Technique: Specification-based — importability check.
        """
        for name in testing_mod.__all__:
            assert hasattr(testing_mod, name), f"{name} not found on module"

    def test_reexports_are_identical(self) -> None:
        """Re-exported names are the private-module objects.

        Technique: Identity Testing.
        """
        assert TimeController is _controller.TimeController
        assert time_controller is _controller.time_controller
        assert make_settings is _settings.make_settings


# ---------------------------------------------------------------------------
# TestPluginFixtures
# ---------------------------------------------------------------------------


class TestPluginFixtures:
    """Fixtures registered by ``timeflow.testing._plugin``.

    Technique: Fixture Injection.
    """

    def test_fixed_instant_value(self, fixed_instant: datetime) -> None:
        """``fixed_instant`` is 1983-10-23 08:15 UTC."""
        assert fixed_instant == datetime(1983, 10, 23, 8, 15, tzinfo=UTC)

    def test_frozen_time_installs_fixed_clock(
        self, frozen_time: TimeController, fixed_instant: datetime
    ) -> None:
        """Production reads see the frozen instant."""
        assert timeflow.now() == fixed_instant
        assert timeflow.clock() == FixedClock(fixed_instant)

    def test_frozen_time_supports_jumps(
        self, frozen_time: TimeController, fixed_instant: datetime
    ) -> None:
        """Jumps on the fixture move the process clock."""
        frozen_time.fast_forward(timedelta(hours=1))
        assert timeflow.now() == fixed_instant + timedelta(hours=1)

    def test_time_control_registers_observer(self, time_control: TimeController) -> None:
        """Observers registered through the fixture are live."""
        time_control.register_observer(print)
        assert time_control.observers == (print,)

    def test_previous_test_was_cleaned_up(self) -> None:
        """State from earlier fixture use does not leak.

        Runs after the tests above in file order.
        """
        controller = time_controller()
        assert isinstance(timeflow.clock(), SystemClock)
        assert controller.original_clock is None
        assert controller.observers == ()
