"""
Expense Ledger - Command-Line Expense Tracking

Records expenditures (amount, memo, date) in a relational table and supports
listing, searching, deleting and clearing them with exact running totals.

Domain Packages:
- core: Money handling, data models, configuration, errors
- ledger: Expense table persistence (SQLAlchemy)
- cli: Command parsing, dispatch and rendering

Example Usage:
    from expenses.ledger import LedgerStore

    with LedgerStore("sqlite:///expenses.db") as store:
        store.ensure_schema()
        store.add_expense("5.00", "coffee")
        print(store.list_all().total)
"""

__version__ = "0.1.0"

from .core.models import Expense, ExpenseListing
from .core.money import Money

__all__ = [
    "Expense",
    "ExpenseListing",
    "Money",
]
