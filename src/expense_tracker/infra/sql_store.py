"""SQLAlchemy-backed implementation of :class:`~expense_tracker.core.protocols.ExpenseStore`.

This module is the **only** place in the codebase that imports
``sqlalchemy``.  All SQLAlchemy exceptions are caught here and re-raised
as typed :class:`~expense_tracker.exceptions.StoreError` subclasses.

The target database is chosen solely by the URL handed to the
constructor — the store never consults the process environment.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy import (
    Column,
    Date,
    Integer,
    MetaData,
    Numeric,
    Table,
    Text,
    create_engine,
    delete,
    insert,
    select,
)
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, DisconnectionError, SQLAlchemyError

from expense_tracker.core.models import Expense
from expense_tracker.exceptions import StoreConnectionError, StoreOperationError

logger = logging.getLogger(__name__)

metadata = MetaData()

expenses_table = Table(
    "expenses",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("amount", Numeric(6, 2), nullable=False),
    Column("memo", Text, nullable=False),
    Column("created_on", Date, nullable=False),
    sqlite_autoincrement=True,
)

_LIKE_ESCAPE = "\\"


def _like_pattern(text: str) -> str:
    """Build a ``%text%`` pattern with LIKE wildcards in *text* escaped."""
    escaped = (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _row_to_expense(row: Any) -> Expense:
    return Expense(
        id=int(row.id),
        amount=Decimal(row.amount),
        memo=row.memo,
        created_on=row.created_on,
    )


class SqlExpenseStore:
    """Concrete :class:`ExpenseStore` over a SQLAlchemy engine.

    Usage::

        store = SqlExpenseStore("postgresql:///expense")
        store.add(Decimal("12.50"), "lunch", date.today())
        store.close()

    The ``expenses`` table is created on construction when missing.
    Constructing the store opens a connection, so an unreachable
    database fails immediately with :class:`StoreConnectionError`.
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        try:
            self._engine: Engine = create_engine(database_url, echo=echo)
            with self._engine.begin() as conn:
                metadata.create_all(conn)
        except SQLAlchemyError as exc:
            logger.error("Could not connect to %s: %s", database_url, exc)
            raise StoreConnectionError(
                f"Could not connect to the expense database: {exc}",
                hint="Check EXPENSES_DATABASE_URL or pass --database-url.",
            ) from exc
        logger.debug("Connected to %s", self._engine.url)

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[Connection]:
        """Yield a connection inside a transaction, mapping failures."""
        try:
            with self._engine.begin() as conn:
                yield conn
        except (DisconnectionError, DBAPIError) as exc:
            if isinstance(exc, DisconnectionError) or exc.connection_invalidated:
                logger.error("Lost connection during %s: %s", operation, exc)
                raise StoreConnectionError(
                    f"Lost connection to the expense database: {exc}",
                ) from exc
            logger.error("Failed to %s expenses: %s", operation, exc)
            raise StoreOperationError(
                f"Error during {operation}: {exc}",
            ) from exc
        except SQLAlchemyError as exc:
            logger.error("Failed to %s expenses: %s", operation, exc)
            raise StoreOperationError(
                f"Error during {operation}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def add(self, amount: Decimal, memo: str, created_on: date) -> Expense:
        stmt = insert(expenses_table).values(
            amount=amount,
            memo=memo,
            created_on=created_on,
        )
        with self._transaction("add") as conn:
            result = conn.execute(stmt)
            new_id = int(result.inserted_primary_key[0])
        return Expense(id=new_id, amount=amount, memo=memo, created_on=created_on)

    def list_all(self) -> list[Expense]:
        stmt = select(expenses_table).order_by(expenses_table.c.id)
        with self._transaction("list") as conn:
            rows = conn.execute(stmt).all()
        return [_row_to_expense(row) for row in rows]

    def search(self, memo: str) -> list[Expense]:
        stmt = (
            select(expenses_table)
            .where(expenses_table.c.memo.ilike(_like_pattern(memo), escape=_LIKE_ESCAPE))
            .order_by(expenses_table.c.id)
        )
        with self._transaction("search") as conn:
            rows = conn.execute(stmt).all()
        return [_row_to_expense(row) for row in rows]

    def get(self, expense_id: int) -> Expense | None:
        stmt = select(expenses_table).where(expenses_table.c.id == expense_id)
        with self._transaction("look up") as conn:
            row = conn.execute(stmt).first()
        return _row_to_expense(row) if row is not None else None

    def delete(self, expense_id: int) -> bool:
        stmt = delete(expenses_table).where(expenses_table.c.id == expense_id)
        with self._transaction("delete") as conn:
            result = conn.execute(stmt)
        return result.rowcount == 1

    def delete_all(self) -> int:
        with self._transaction("clear") as conn:
            result = conn.execute(delete(expenses_table))
        return int(result.rowcount)

    def close(self) -> None:
        self._engine.dispose()
