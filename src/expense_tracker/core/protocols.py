"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete store
implementations.  The SQL-backed store and the in-memory fake both
satisfy :class:`ExpenseStore` structurally.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol

from expense_tracker.core.models import Expense


class ExpenseStore(Protocol):
    """Contract for expense persistence backends.

    Implementations must map all backend-specific exceptions to
    :class:`~expense_tracker.exceptions.StoreError` subclasses.
    """

    def add(self, amount: Decimal, memo: str, created_on: date) -> Expense:
        """Persist a new expense and return it with its assigned ``id``."""
        ...  # pragma: no cover

    def list_all(self) -> list[Expense]:
        """Return every expense ordered by ascending ``id``."""
        ...  # pragma: no cover

    def search(self, memo: str) -> list[Expense]:
        """Return expenses whose memo contains *memo*, ignoring case.

        Results are ordered by ascending ``id``.
        """
        ...  # pragma: no cover

    def get(self, expense_id: int) -> Expense | None:
        """Return the expense with *expense_id*, or ``None``."""
        ...  # pragma: no cover

    def delete(self, expense_id: int) -> bool:
        """Delete the expense with *expense_id*; ``True`` if a row was removed."""
        ...  # pragma: no cover

    def delete_all(self) -> int:
        """Delete every expense and return how many rows were removed."""
        ...  # pragma: no cover

    def close(self) -> None:
        """Release any resources held by the store."""
        ...  # pragma: no cover
