"""Exceptions and argument checks shared by timeflow modules.

Two failure kinds exist:

- **Invalid arguments** raise :class:`ValueError` through
  :func:`check_argument`, always before any state is touched.
- **Interrupted flow simulation** raises
  :class:`TimeFlowInterruptedError`.  It is fatal for the operation in
  progress and is never retried.
"""

from __future__ import annotations


class TimeFlowInterruptedError(RuntimeError):
    """A running time flow was cancelled while waiting between steps."""


def check_argument(expression: bool, message: str) -> None:
    """Raise :class:`ValueError` with *message* when *expression* is false."""
    if not expression:
        raise ValueError(message)
