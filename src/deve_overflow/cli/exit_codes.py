"""Process exit codes returned by ``deve-overflow``.

Every return path in :mod:`deve_overflow.cli.app` uses one of these
names.  argparse usage errors exit with 2 on their own, which shares a
value with :data:`UNEXPECTED_ERROR`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command printed its result."""

GENERAL_ERROR: int = 1
"""A DeveOverflowError was rendered (bad argument, bad setting, bad record)."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""
