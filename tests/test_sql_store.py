"""Tests specific to the SQLAlchemy-backed store.

Covers table bootstrap and the mapping of SQLAlchemy failures onto
:class:`~expense_tracker.exceptions.StoreError` subclasses.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import inspect

from expense_tracker.exceptions import (
    StoreConnectionError,
    StoreError,
    StoreOperationError,
)
from expense_tracker.infra.sql_store import SqlExpenseStore, _like_pattern, expenses_table


class TestBootstrap:
    def test_creates_expenses_table(self, sql_store: SqlExpenseStore) -> None:
        inspector = inspect(sql_store._engine)
        columns = {col["name"] for col in inspector.get_columns("expenses")}
        assert columns == {"id", "amount", "memo", "created_on"}

    def test_reopening_file_database_keeps_rows(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'expenses.db'}"
        first = SqlExpenseStore(url)
        first.add(Decimal("12.50"), "lunch", date(2024, 1, 2))
        first.close()

        second = SqlExpenseStore(url)
        try:
            [expense] = second.list_all()
        finally:
            second.close()
        assert expense.memo == "lunch"
        assert expense.amount == Decimal("12.50")


class TestErrorMapping:
    def test_unreachable_database(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'missing' / 'nested' / 'expenses.db'}"
        with pytest.raises(StoreConnectionError) as exc_info:
            SqlExpenseStore(url)
        assert exc_info.value.hint is not None

    def test_malformed_url(self) -> None:
        with pytest.raises(StoreConnectionError):
            SqlExpenseStore("not a database url")

    def test_query_failure_is_operation_error(
        self, sql_store: SqlExpenseStore,
    ) -> None:
        expenses_table.drop(sql_store._engine)
        with pytest.raises(StoreOperationError, match="list"):
            sql_store.list_all()

    def test_errors_share_base(self) -> None:
        assert issubclass(StoreConnectionError, StoreError)
        assert issubclass(StoreOperationError, StoreError)


class TestLikePattern:
    def test_wraps_in_wildcards(self) -> None:
        assert _like_pattern("car") == "%car%"

    def test_escapes_wildcards(self) -> None:
        assert _like_pattern("50%_off") == "%50\\%\\_off%"
