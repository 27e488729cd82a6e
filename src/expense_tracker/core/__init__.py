"""Core / service layer — validation, formatting and store orchestration.

Rules
-----
* No ``print()`` calls.
* No database driver imports.
* No imports from ``cli`` or ``infra``.
"""

from expense_tracker.core.expense_service import ExpenseService
from expense_tracker.core.formatting import format_expense, format_expenses
from expense_tracker.core.models import Expense
from expense_tracker.core.protocols import ExpenseStore
from expense_tracker.core.validation import ValidationFailure

__all__: list[str] = [
    "Expense",
    "ExpenseService",
    "ExpenseStore",
    "ValidationFailure",
    "format_expense",
    "format_expenses",
]
