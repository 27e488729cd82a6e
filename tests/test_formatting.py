"""Tests for expense row formatting."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from expense_tracker.core.formatting import format_expense, format_expenses
from expense_tracker.core.models import Expense


def _expense(**overrides: Any) -> Expense:
    defaults: dict[str, Any] = {
        "id": 1,
        "amount": Decimal("100.00"),
        "memo": "car rental",
        "created_on": date(2024, 3, 9),
    }
    defaults.update(overrides)
    return Expense(**defaults)


class TestFormatExpense:
    def test_exact_layout(self) -> None:
        assert (
            format_expense(_expense())
            == "  1 | 2024-03-09 |       100.00 | car rental"
        )

    def test_amount_always_has_two_decimals(self) -> None:
        line = format_expense(_expense(amount=Decimal("5.5")))
        assert line.endswith("|         5.50 | car rental")

    def test_wide_id_is_not_truncated(self) -> None:
        line = format_expense(_expense(id=12345))
        assert line.startswith("12345 | ")

    def test_memo_is_unpadded(self) -> None:
        assert format_expense(_expense(memo="x")).endswith(" | x")

    def test_contains_amount_and_memo_pair(self) -> None:
        assert "100.00 | car rental" in format_expense(_expense())


class TestFormatExpenses:
    def test_preserves_order(self) -> None:
        lines = format_expenses([_expense(id=2), _expense(id=1)])
        assert [line[:3] for line in lines] == ["  2", "  1"]

    def test_empty(self) -> None:
        assert format_expenses([]) == []
