#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All ledger amounts are handled as integer cents internally.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse user input with Decimal, then convert to integer cents
- Round to two fractional digits half-up, matching NUMERIC(p, 2) storage
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .exceptions import InvalidInput

CENT = Decimal("0.01")

# Stored as NUMERIC(AMOUNT_PRECISION, AMOUNT_SCALE)
AMOUNT_PRECISION = 12
AMOUNT_SCALE = 2
AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_PRECISION - AMOUNT_SCALE)


def parse_decimal_amount(raw: Union[str, int, Decimal]) -> Decimal:
    """
    Parse a user-supplied amount into a Decimal with exactly two places.

    Accepts plain decimals as well as the "$1,234.56" form.

    Args:
        raw: Amount as typed on the command line, or a number

    Returns:
        Decimal quantized to 0.01

    Raises:
        InvalidInput: If the value is not a finite decimal number, or has more
            integer digits than the amount column holds

    Examples:
        parse_decimal_amount("10.5") -> Decimal("10.50")
        parse_decimal_amount("$1,234.567") -> Decimal("1234.57")
    """
    if isinstance(raw, bool):
        raise InvalidInput(f"Invalid amount: {raw!r}")

    clean = str(raw).replace("$", "").replace(",", "").strip()
    if not clean:
        raise InvalidInput("Amount cannot be empty")

    try:
        amount = Decimal(clean)
    except InvalidOperation as e:
        raise InvalidInput(f"Invalid amount: '{raw}' is not a decimal number") from e

    if not amount.is_finite():
        raise InvalidInput(f"Invalid amount: '{raw}' is not a finite number")

    # Checked before and after rounding: 9999999999.995 rounds up past the limit
    if abs(amount) >= AMOUNT_LIMIT:
        raise _out_of_range(raw)

    amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if abs(amount) >= AMOUNT_LIMIT:
        raise _out_of_range(raw)

    return amount


def _out_of_range(raw: object) -> InvalidInput:
    return InvalidInput(
        f"Invalid amount: '{raw}' exceeds {AMOUNT_PRECISION - AMOUNT_SCALE} integer digits"
    )


def decimal_to_cents(amount: Decimal) -> int:
    """
    Convert a Decimal amount to integer cents, rounding half-up.

    Example:
        decimal_to_cents(Decimal("45.99")) -> 4599
    """
    return int(amount.quantize(CENT, rounding=ROUND_HALF_UP) * 100)


def cents_to_decimal(cents: int) -> Decimal:
    """
    Convert integer cents to a Decimal with scale 2.

    Example:
        cents_to_decimal(4599) -> Decimal("45.99")
    """
    return (Decimal(cents) / 100).quantize(CENT)


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    # Handle negative amounts properly
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"

