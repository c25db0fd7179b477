#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point drift when totalling many ledger rows.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    cents_to_decimal,
    cents_to_dollars_str,
    decimal_to_cents,
    parse_decimal_amount,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Examples:
        >>> coffee = Money.from_amount("5.00")
        >>> books = Money.from_decimal(Decimal("10.50"))
        >>> str(coffee + books)
        '15.50'
        >>> Money.total([coffee, books]).to_decimal()
        Decimal('15.50')
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_decimal(cls, amount: Decimal) -> "Money":
        """Create Money from a Decimal, rounding half-up to whole cents."""
        return cls(cents=decimal_to_cents(amount))

    @classmethod
    def from_amount(cls, raw: str | int | Decimal) -> "Money":
        """
        Parse from an amount string like '12.34' or '$1,234.56'.

        Raises:
            InvalidInput: If the string is not a finite decimal number
        """
        return cls.from_decimal(parse_decimal_amount(raw))

    @classmethod
    def zero(cls) -> "Money":
        """Return a zero amount."""
        return cls(cents=0)

    @classmethod
    def total(cls, amounts: Iterable["Money"]) -> "Money":
        """Sum amounts exactly; an empty iterable totals to zero."""
        return cls(cents=sum(amount.cents for amount in amounts))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value as a Decimal with scale 2."""
        return cents_to_decimal(self.cents)

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __str__(self) -> str:
        """Format with exactly two fractional digits."""
        return cents_to_dollars_str(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
