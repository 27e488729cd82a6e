"""In-memory implementation of :class:`~expense_tracker.core.protocols.ExpenseStore`.

Used by the test suite in place of a database.  Ids come from a
monotonically increasing counter, so deleted ids are never reused —
the same behaviour as a database sequence.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from expense_tracker.core.models import Expense


class InMemoryExpenseStore:
    """Dictionary-backed expense store with sequential ids."""

    def __init__(self) -> None:
        self._rows: dict[int, Expense] = {}
        self._next_id: int = 1
        self.closed: bool = False

    def add(self, amount: Decimal, memo: str, created_on: date) -> Expense:
        expense = Expense(
            id=self._next_id,
            amount=amount,
            memo=memo,
            created_on=created_on,
        )
        self._rows[expense.id] = expense
        self._next_id += 1
        return expense

    def list_all(self) -> list[Expense]:
        return [self._rows[key] for key in sorted(self._rows)]

    def search(self, memo: str) -> list[Expense]:
        needle = memo.casefold()
        return [
            expense for expense in self.list_all()
            if needle in expense.memo.casefold()
        ]

    def get(self, expense_id: int) -> Expense | None:
        return self._rows.get(expense_id)

    def delete(self, expense_id: int) -> bool:
        return self._rows.pop(expense_id, None) is not None

    def delete_all(self) -> int:
        removed = len(self._rows)
        self._rows.clear()
        return removed

    def close(self) -> None:
        self.closed = True
