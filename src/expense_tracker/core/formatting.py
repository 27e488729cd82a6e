"""Plain-text rendering of expense rows for terminal display.

Pure transforms only — callers decide where the lines are written.
"""

from __future__ import annotations

from collections.abc import Iterable

from expense_tracker.core.models import Expense

COLUMN_SEPARATOR: str = " | "


def format_amount(expense: Expense) -> str:
    """Render the amount with exactly two fraction digits."""
    return f"{expense.amount:.2f}"


def format_expense(expense: Expense) -> str:
    """Render one expense as ``" id |       date |       amount | memo"``.

    The id, date and amount columns are right-aligned to widths 3, 10
    and 12; the memo is left unpadded.
    """
    columns = (
        f"{expense.id:>3}",
        f"{expense.created_on.isoformat():>10}",
        f"{format_amount(expense):>12}",
        expense.memo,
    )
    return COLUMN_SEPARATOR.join(columns)


def format_expenses(expenses: Iterable[Expense]) -> list[str]:
    """Render each expense on its own line, preserving order."""
    return [format_expense(expense) for expense in expenses]
