"""Domain models for expense-tracker.

Models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Expense:
    """A single recorded outlay."""

    id: int
    """Positive identifier assigned by the store on creation."""

    amount: Decimal
    """Amount spent, at most ``9999.99``."""

    memo: str
    """One or two alphabetic words describing the expense."""

    created_on: date
    """Calendar date the expense was recorded."""
