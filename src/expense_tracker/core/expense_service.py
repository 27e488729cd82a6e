"""Core expense service — orchestrates store access for the CLI.

The service depends on an :class:`~expense_tracker.core.protocols.ExpenseStore`
injected at construction time, keeping the core free of any database
imports.  Callers are expected to have validated raw input already.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct I/O.
* Only :class:`~expense_tracker.exceptions.StoreError` subclasses escape
  from store calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import TypeVar

from expense_tracker.core.models import Expense
from expense_tracker.core.protocols import ExpenseStore
from expense_tracker.exceptions import StoreError, StoreOperationError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class ExpenseService:
    """Stateless service translating validated input into store calls.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`ExpenseStore` protocol.
    today:
        Callable returning the current date; injectable for tests.
    """

    def __init__(
        self,
        store: ExpenseStore,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store: ExpenseStore = store
        self._today: Callable[[], date] = today

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_expense(self, amount: str, memo: str) -> Expense:
        """Record a new expense dated today from a validated *amount* string."""
        created_on = self._today()
        expense = self._call(
            "add", lambda: self._store.add(Decimal(amount), memo, created_on),
        )
        logger.debug("Added expense %d (%s, %r)", expense.id, amount, memo)
        return expense

    def list_expenses(self) -> list[Expense]:
        """Return all expenses in insertion order."""
        return self._call("list", self._store.list_all)

    def search_expenses(self, memo: str) -> list[Expense]:
        """Return expenses whose memo contains *memo*, ignoring case."""
        return self._call("search", lambda: self._store.search(memo))

    def delete_expense(self, expense_id: int) -> Expense | None:
        """Delete the expense with *expense_id*.

        Returns the deleted expense, or ``None`` when no such id exists —
        in which case nothing is modified.
        """
        expense = self._call("lookup", lambda: self._store.get(expense_id))
        if expense is None:
            logger.debug("Expense %d not found; nothing deleted", expense_id)
            return None
        self._call("delete", lambda: self._store.delete(expense_id))
        logger.debug("Deleted expense %d", expense_id)
        return expense

    def clear_expenses(self) -> int:
        """Irreversibly delete every expense; returns the number removed."""
        removed = self._call("clear", self._store.delete_all)
        logger.debug("Cleared %d expense(s)", removed)
        return removed

    # ------------------------------------------------------------------
    # Store delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(operation: str, func: Callable[[], _T]) -> _T:
        """Run a store call and ensure only our exceptions escape."""
        try:
            return func()
        except StoreError:
            raise
        except Exception as exc:
            logger.error("Unexpected store error during %s: %s", operation, exc)
            raise StoreOperationError(
                f"Unexpected store error during {operation}: {exc}",
            ) from exc
