"""Shared pytest fixtures and configuration for the expense-tracker suite.

Guidelines
----------
* No PostgreSQL server is required — SQL tests run on in-memory SQLite.
* CLI tests inject an :class:`InMemoryExpenseStore` through ``main``.
* Tests must not depend on ``EXPENSES_*`` variables from the host.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from expense_tracker.config import get_settings
from expense_tracker.infra.memory_store import InMemoryExpenseStore
from expense_tracker.infra.sql_store import SqlExpenseStore


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("EXPENSES_ENV", "EXPENSES_DATABASE_URL", "EXPENSES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def memory_store() -> InMemoryExpenseStore:
    return InMemoryExpenseStore()


@pytest.fixture
def sql_store() -> Iterator[SqlExpenseStore]:
    store = SqlExpenseStore("sqlite://")
    yield store
    store.close()


@pytest.fixture(params=["memory", "sql"])
def store(request: pytest.FixtureRequest) -> Iterator[object]:
    """Each store implementation in turn, for contract tests."""
    if request.param == "memory":
        yield InMemoryExpenseStore()
        return
    sql = SqlExpenseStore("sqlite://")
    yield sql
    sql.close()
