"""Infrastructure layer — persistence backends.

Every raw third-party exception must be caught here and re-raised as a
:class:`~expense_tracker.exceptions.StoreError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Stores satisfy :class:`~expense_tracker.core.protocols.ExpenseStore`.
"""

from expense_tracker.infra.memory_store import InMemoryExpenseStore
from expense_tracker.infra.sql_store import SqlExpenseStore, expenses_table

__all__: list[str] = [
    "InMemoryExpenseStore",
    "SqlExpenseStore",
    "expenses_table",
]
