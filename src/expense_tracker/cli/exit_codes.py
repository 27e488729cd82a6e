"""Exit-code constants used by the CLI layer.

Validation failures and not-found outcomes are reported to the user but
still exit with :data:`SUCCESS`; only store failures are fatal.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed, including reported input and not-found errors."""

GENERAL_ERROR: int = 1
"""A known ExpenseTrackerError (store failure) was caught and displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
