"""Public test-support utilities for timeflow.

Everything here may mutate the process-wide clock and is meant for
test code only.  Production modules read time through
:func:`timeflow.now` and never import this package.

Provided symbols:

- :class:`TimeController` — set, reset, jump and animate the clock.
- :func:`time_controller` — the process-wide controller.
- :data:`Observer` — callback type notified after each clock jump.
- :func:`make_settings` — factory for ``Settings`` without ``.env`` files.

Pytest fixtures (``time_control``, ``fixed_instant``, ``frozen_time``)
are registered by :mod:`timeflow.testing._plugin`.
"""

from timeflow.testing._controller import Observer, TimeController, time_controller
from timeflow.testing._settings import make_settings

__all__ = [
    "Observer",
    "TimeController",
    "make_settings",
    "time_controller",
]
