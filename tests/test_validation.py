"""Tests for amount, memo and id validation.

All checks are pure — no store, no I/O.
"""

from __future__ import annotations

import pytest

from expense_tracker.core.validation import (
    ValidationFailure,
    validate_amount,
    validate_id,
    validate_memo,
    validate_new_expense,
    validate_search,
)


# ---------------------------------------------------------------------------
# Amount
# ---------------------------------------------------------------------------

class TestValidateAmount:
    @pytest.mark.parametrize(
        "amount", ["2341.23", "0.5", "9999.99", "1.00", "100.00", "0.0"],
    )
    def test_valid_amounts(self, amount: str) -> None:
        assert validate_amount(amount) is None

    @pytest.mark.parametrize("amount", ["", None])
    def test_empty_amount(self, amount: str | None) -> None:
        assert validate_amount(amount) is ValidationFailure.EMPTY_AMOUNT

    @pytest.mark.parametrize(
        "amount",
        [
            "23412341243.123",  # too many integer and fraction digits
            "12345.00",
            "12.345",
            "100",
            "100.",
            ".50",
            "abc",
            "-1.00",
            "1,00",
            "1.00\n",
            "１２.３４",  # full-width digits
        ],
    )
    def test_invalid_amounts(self, amount: str) -> None:
        assert validate_amount(amount) is ValidationFailure.INVALID_AMOUNT_FORMAT


# ---------------------------------------------------------------------------
# Memo
# ---------------------------------------------------------------------------

class TestValidateMemo:
    @pytest.mark.parametrize(
        "memo", ["car", "cheap car", "France trip", "a b", "x" * 20, f"{'y' * 20} z"],
    )
    def test_valid_memos(self, memo: str) -> None:
        assert validate_memo(memo) is None

    @pytest.mark.parametrize("memo", ["", None])
    def test_empty_memo(self, memo: str | None) -> None:
        assert validate_memo(memo) is ValidationFailure.EMPTY_MEMO

    @pytest.mark.parametrize(
        "memo",
        [
            "hello hello world",
            "x" * 21,
            "cheap  car",
            " car",
            "car ",
            "oil-filter",
            "car2",
            "Karen's car",
            "café",
        ],
    )
    def test_invalid_memos(self, memo: str) -> None:
        assert validate_memo(memo) is ValidationFailure.INVALID_MEMO_FORMAT


# ---------------------------------------------------------------------------
# Id
# ---------------------------------------------------------------------------

class TestValidateId:
    @pytest.mark.parametrize("expense_id", ["1", "42", "1000", "90"])
    def test_valid_ids(self, expense_id: str) -> None:
        assert validate_id(expense_id) is None

    @pytest.mark.parametrize("expense_id", ["", None])
    def test_empty_id(self, expense_id: str | None) -> None:
        assert validate_id(expense_id) is ValidationFailure.EMPTY_ID

    @pytest.mark.parametrize("expense_id", ["abc", "007", "0", "-1", "1.5", "1a"])
    def test_invalid_ids(self, expense_id: str) -> None:
        assert validate_id(expense_id) is ValidationFailure.INVALID_ID_FORMAT


# ---------------------------------------------------------------------------
# Composites and messages
# ---------------------------------------------------------------------------

class TestComposites:
    def test_new_expense_valid(self) -> None:
        assert validate_new_expense("1000.00", "cheap car") is None

    def test_amount_checked_before_memo(self) -> None:
        assert (
            validate_new_expense("abc", "")
            is ValidationFailure.INVALID_AMOUNT_FORMAT
        )

    def test_empty_amount_reported_first(self) -> None:
        assert validate_new_expense("", "") is ValidationFailure.EMPTY_AMOUNT

    def test_memo_checked_when_amount_valid(self) -> None:
        assert validate_new_expense("234.21", "") is ValidationFailure.EMPTY_MEMO

    def test_search_uses_memo_rules(self) -> None:
        assert validate_search("hello world hello") is ValidationFailure.INVALID_MEMO_FORMAT
        assert validate_search("cheap car") is None


class TestMessages:
    @pytest.mark.parametrize(
        ("failure", "message"),
        [
            (ValidationFailure.EMPTY_AMOUNT, "Amount cannot be empty."),
            (
                ValidationFailure.INVALID_AMOUNT_FORMAT,
                "Invalid amount format. Use format like 2341.23",
            ),
            (ValidationFailure.EMPTY_MEMO, "Memo cannot be empty."),
            (ValidationFailure.INVALID_MEMO_FORMAT, "Invalid memo format."),
            (ValidationFailure.EMPTY_ID, "The id cannot be empty."),
            (ValidationFailure.INVALID_ID_FORMAT, "Invalid id format."),
        ],
    )
    def test_message_text(self, failure: ValidationFailure, message: str) -> None:
        assert failure.message == message
