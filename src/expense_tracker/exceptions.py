"""Custom exception hierarchy for expense-tracker.

Only *unrecoverable* conditions are exceptions.  Malformed user input is
reported through :class:`~expense_tracker.core.validation.ValidationFailure`
values and never raised.

Raw third-party exceptions (e.g. from SQLAlchemy) must NEVER propagate
beyond the infrastructure layer — they are caught and re-raised as a
typed subclass defined here.

Hierarchy
---------
ExpenseTrackerError
└── StoreError
    ├── StoreConnectionError
    └── StoreOperationError
"""

from __future__ import annotations


class ExpenseTrackerError(Exception):
    """Base exception for all expense-tracker errors.

    The CLI error boundary renders any subclass as a clean one-line
    message and terminates the process with a non-zero exit code.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Persistence -----------------------------------------------------------

class StoreError(ExpenseTrackerError):
    """Raised when the expense store cannot fulfil a request."""


class StoreConnectionError(StoreError):
    """Raised when a connection to the backing database cannot be made."""


class StoreOperationError(StoreError):
    """Raised when a query or statement against the store fails."""
