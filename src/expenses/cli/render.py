#!/usr/bin/env python3
"""
Listing Renderer

Fixed-width text rendering for expense rows and listings.
"""

from ..core.models import Expense, ExpenseListing

SEPARATOR = " | "
ID_WIDTH = 3
DATE_WIDTH = 10
AMOUNT_WIDTH = 12
RULE_WIDTH = 48


def format_expense(expense: Expense) -> str:
    """Render one expense as a single aligned line."""
    return SEPARATOR.join(
        [
            str(expense.id).rjust(ID_WIDTH),
            expense.created_on.isoformat().rjust(DATE_WIDTH),
            str(expense.amount).rjust(AMOUNT_WIDTH),
            expense.memo,
        ]
    )


def format_total(listing: ExpenseListing) -> str:
    """Render the Total line with the amount under the amount column."""
    label_width = ID_WIDTH + len(SEPARATOR) + DATE_WIDTH
    return f"{'Total':>{label_width}}{SEPARATOR}{str(listing.total):>{AMOUNT_WIDTH}}"


def render_listing(listing: ExpenseListing) -> str:
    """
    Render a listing: count header, one line per expense, rule, Total.

    Example:
        Found 2 expenses:
          1 | 2026-10-19 |         5.00 | coffee
          2 | 2026-10-19 |        10.50 | books
        ------------------------------------------------
                   Total |        15.50
    """
    noun = "expense" if listing.count == 1 else "expenses"
    lines = [f"Found {listing.count} {noun}:"]
    lines.extend(format_expense(expense) for expense in listing)
    lines.append("-" * RULE_WIDTH)
    lines.append(format_total(listing))
    return "\n".join(lines)
