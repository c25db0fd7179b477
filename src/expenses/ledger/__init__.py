"""
Ledger Store Package

Persistence for the expense table: schema bootstrap and parameterized
insert, delete, list and search operations.
"""

from .schema import MAX_EXPENSE_ID, build_expense_table
from .store import LedgerStore

__all__ = [
    "LedgerStore",
    "MAX_EXPENSE_ID",
    "build_expense_table",
]
