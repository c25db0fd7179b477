#!/usr/bin/env python3
"""
Core Data Models for the Expense Ledger

Typed records returned by the ledger store and consumed by the CLI renderer.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from .money import Money


@dataclass(frozen=True)
class Expense:
    """
    A single recorded expenditure.

    Rows are never updated in place, so the record is immutable.
    """

    id: int
    amount: Money
    memo: str
    created_on: date

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Expense":
        """Build an Expense from a database row mapping."""
        created_on = row["created_on"]
        if isinstance(created_on, datetime):
            created_on = created_on.date()
        elif isinstance(created_on, str):
            created_on = date.fromisoformat(created_on)

        amount = row["amount"]
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        return cls(
            id=int(row["id"]),
            amount=Money.from_decimal(amount),
            memo=row["memo"],
            created_on=created_on,
        )

    @property
    def amount_decimal(self) -> Decimal:
        """Get amount as a Decimal with scale 2."""
        return self.amount.to_decimal()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging and debugging output."""
        return {
            "id": self.id,
            "amount": str(self.amount),
            "memo": self.memo,
            "created_on": self.created_on.isoformat(),
        }


@dataclass(frozen=True)
class ExpenseListing:
    """Ordered expenses returned by a read, with the exact total of their amounts."""

    expenses: tuple[Expense, ...] = field(default_factory=tuple)
    total: Money = field(default_factory=Money.zero)

    @classmethod
    def from_expenses(cls, expenses: list[Expense] | tuple[Expense, ...]) -> "ExpenseListing":
        items = tuple(expenses)
        return cls(expenses=items, total=Money.total(e.amount for e in items))

    @property
    def count(self) -> int:
        return len(self.expenses)

    def __iter__(self):
        return iter(self.expenses)

    def __len__(self) -> int:
        return len(self.expenses)
