#!/usr/bin/env python3
"""
Expense Table Definition

The single relational table behind the ledger. The table name and schema
are supplied by configuration; column set and constraints are fixed.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Date,
    Integer,
    MetaData,
    Numeric,
    Table,
    Text,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement

from ..core.currency import AMOUNT_PRECISION, AMOUNT_SCALE

# SQLite only auto-assigns rowids for columns declared exactly INTEGER PRIMARY KEY
ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")

MAX_EXPENSE_ID = 2**63 - 1


class current_local_date(FunctionElement):
    """Today's date in the database server's local time zone."""

    type = Date()
    inherit_cache = True


@compiles(current_local_date)
def _compile_current_local_date(element, compiler, **kw):
    return "CURRENT_DATE"


@compiles(current_local_date, "sqlite")
def _compile_current_local_date_sqlite(element, compiler, **kw):
    # SQLite's CURRENT_DATE is the UTC date
    return "date('now', 'localtime')"


def build_expense_table(metadata: MetaData, table_name: str, schema: str | None = None) -> Table:
    """
    Declare the expense table on the given metadata.

    Columns:
        id: auto-incrementing integer primary key
        amount: NUMERIC(12, 2), CHECK amount > 0
        memo: TEXT NOT NULL
        created_on: DATE NOT NULL, defaulting to the local current date
    """
    return Table(
        table_name,
        metadata,
        Column("id", ID_TYPE, primary_key=True, autoincrement=True),
        Column("amount", Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True), nullable=False),
        Column("memo", Text, nullable=False),
        Column("created_on", Date, nullable=False, server_default=current_local_date()),
        CheckConstraint("amount > 0", name=f"ck_{table_name}_amount_positive"),
        schema=schema,
        # Without AUTOINCREMENT SQLite may hand out the id of a deleted last row again
        sqlite_autoincrement=True,
    )
