"""Input validation for the ``amount``, ``memo`` and ``id`` arguments.

Every check is a pure function over a raw string (or ``None`` when the
argument was not supplied).  A check returns ``None`` when the value is
acceptable, otherwise the :class:`ValidationFailure` describing why it
is not.  Failures are ordinary values — the dispatcher prints them and
aborts the command; nothing here raises.
"""

from __future__ import annotations

import re
from enum import Enum

# ASCII-only character classes: ``\d`` and ``str.isalpha`` would accept
# non-ASCII digits and letters.
_AMOUNT_RE = re.compile(r"[0-9]{1,4}\.[0-9]{1,2}")
_MEMO_RE = re.compile(r"[A-Za-z]{1,20}(?: [A-Za-z]{1,20})?")
_ID_RE = re.compile(r"[1-9][0-9]*")


class ValidationFailure(Enum):
    """Why a raw argument was rejected.  The value is the user message."""

    EMPTY_AMOUNT = "Amount cannot be empty."
    INVALID_AMOUNT_FORMAT = "Invalid amount format. Use format like 2341.23"
    EMPTY_MEMO = "Memo cannot be empty."
    INVALID_MEMO_FORMAT = "Invalid memo format."
    EMPTY_ID = "The id cannot be empty."
    INVALID_ID_FORMAT = "Invalid id format."

    @property
    def message(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Single-field checks
# ---------------------------------------------------------------------------

def validate_amount(amount: str | None) -> ValidationFailure | None:
    """Check an amount such as ``2341.23``.

    Up to four integer digits, a decimal point, then one or two
    fraction digits.
    """
    if not amount:
        return ValidationFailure.EMPTY_AMOUNT
    if _AMOUNT_RE.fullmatch(amount) is None:
        return ValidationFailure.INVALID_AMOUNT_FORMAT
    return None


def validate_memo(memo: str | None) -> ValidationFailure | None:
    """Check a memo: one or two space-separated words of 1–20 letters."""
    if not memo:
        return ValidationFailure.EMPTY_MEMO
    if _MEMO_RE.fullmatch(memo) is None:
        return ValidationFailure.INVALID_MEMO_FORMAT
    return None


def validate_id(expense_id: str | None) -> ValidationFailure | None:
    """Check an expense id: digits only, no leading zero."""
    if not expense_id:
        return ValidationFailure.EMPTY_ID
    if _ID_RE.fullmatch(expense_id) is None:
        return ValidationFailure.INVALID_ID_FORMAT
    return None


# ---------------------------------------------------------------------------
# Per-command composites
# ---------------------------------------------------------------------------

def validate_new_expense(
    amount: str | None,
    memo: str | None,
) -> ValidationFailure | None:
    """Validate ``add`` input, reporting the amount before the memo."""
    return validate_amount(amount) or validate_memo(memo)


def validate_search(memo: str | None) -> ValidationFailure | None:
    """Validate a ``search`` query with the memo rules."""
    return validate_memo(memo)
