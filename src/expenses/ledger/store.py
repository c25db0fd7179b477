#!/usr/bin/env python3
"""
Ledger Store - Expense Table Persistence

Sole owner of the expense table: bootstraps the schema and translates ledger
operations into parameterized SQLAlchemy statements. User data never reaches
SQL text directly.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal

from sqlalchemy import MetaData, create_engine, delete, inspect, insert, select
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import (
    ArgumentError,
    DataError,
    DBAPIError,
    IntegrityError,
    InterfaceError,
    NoSuchModuleError,
    OperationalError,
)

from ..core.config import DEFAULT_TABLE_NAME, Config
from ..core.currency import parse_decimal_amount
from ..core.exceptions import ConnectionFailure, ConstraintViolation
from ..core.models import Expense, ExpenseListing
from .schema import MAX_EXPENSE_ID, build_expense_table

logger = logging.getLogger(__name__)


class LedgerStore:
    """
    Expense persistence backed by a single relational table.

    One engine per store; a store lives for one CLI invocation and is closed
    on exit. Operations are individually atomic; nothing is retried.
    """

    def __init__(
        self,
        database: str | Engine,
        table_name: str = DEFAULT_TABLE_NAME,
        schema: str | None = None,
        echo: bool = False,
    ):
        """
        Initialize the ledger store.

        Args:
            database: SQLAlchemy database URL or an existing Engine
            table_name: Name of the expense table
            schema: Database schema holding the table (None for the default)
            echo: Log every SQL statement through the sqlalchemy.engine logger

        Raises:
            ConnectionFailure: If the URL is invalid or its driver is unavailable
        """
        if isinstance(database, Engine):
            self.engine = database
            self._owns_engine = False
        else:
            try:
                self.engine = create_engine(database, echo=echo)
            except (ArgumentError, NoSuchModuleError, ImportError) as e:
                raise ConnectionFailure(f"Cannot open database: {e}") from e
            self._owns_engine = True

        self.metadata = MetaData()
        self.table = build_expense_table(self.metadata, table_name, schema)

    @classmethod
    def from_config(cls, config: Config, database_url: str | None = None) -> "LedgerStore":
        """Create a store from application configuration, optionally overriding the URL."""
        return cls(
            database_url or config.database.url,
            table_name=config.database.table_name,
            schema=config.database.schema,
            echo=config.database.echo_sql,
        )

    def close(self) -> None:
        """Release the connection pool if this store created it."""
        if self._owns_engine:
            self.engine.dispose()

    def __enter__(self) -> "LedgerStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Connection]:
        """Run a block in one transaction, translating database errors to ledger errors."""
        try:
            with self.engine.begin() as conn:
                yield conn
        except (IntegrityError, DataError) as e:
            logger.error("Constraint violation while trying to %s: %s", action, e.orig)
            raise ConstraintViolation(str(e.orig)) from e
        except (OperationalError, InterfaceError) as e:
            logger.error("Database failure while trying to %s: %s", action, e.orig)
            raise ConnectionFailure(f"Unable to {action}: {e.orig}") from e

    def ensure_schema(self) -> bool:
        """
        Create the expense table if it does not already exist.

        Looks the table up in the catalog for the configured schema, so
        calling this on every startup is safe.

        Returns:
            True if the table was created, False if it already existed

        Raises:
            ConnectionFailure: If the database cannot be reached or the DDL fails
        """
        try:
            with self.engine.begin() as conn:
                if inspect(conn).has_table(self.table.name, schema=self.table.schema):
                    logger.debug("Expense table %s already exists", self.table.fullname)
                    return False
                self.table.create(conn)
        except DBAPIError as e:
            raise ConnectionFailure(f"Unable to initialize expense table: {e.orig}") from e

        logger.info("Created expense table %s", self.table.fullname)
        return True

    def add_expense(self, amount: str | Decimal, memo: str) -> Expense:
        """
        Insert a new expense dated by the database's current date.

        Args:
            amount: Fixed-point amount; rounded half-up to two places
            memo: Description text (content is not validated here)

        Returns:
            The stored expense

        Raises:
            InvalidInput: If amount is not a finite decimal number
            ConstraintViolation: If the database rejects the row (amount <= 0)
        """
        value = parse_decimal_amount(amount)

        with self._transaction("add expense") as conn:
            result = conn.execute(insert(self.table).values(amount=value, memo=memo))
            expense_id = result.inserted_primary_key[0]
            row = conn.execute(self._select().where(self.table.c.id == expense_id)).mappings().one()

        expense = Expense.from_row(row)
        logger.debug("Added expense %s", expense.to_dict())
        return expense

    def delete_all(self) -> int:
        """
        Delete every expense.

        Returns:
            Number of rows removed
        """
        with self._transaction("clear expenses") as conn:
            removed = conn.execute(delete(self.table)).rowcount

        logger.info("Deleted all expenses (%d rows)", removed)
        return removed

    def delete_by_id(self, expense_id: int) -> Expense | None:
        """
        Delete one expense by id.

        The lookup and the delete share a transaction, and the record is only
        reported when the delete actually removed a row.

        Returns:
            The deleted expense, or None if no expense has that id
        """
        if expense_id < 1 or expense_id > MAX_EXPENSE_ID:
            return None

        with self._transaction("delete expense") as conn:
            row = conn.execute(self._select().where(self.table.c.id == expense_id)).mappings().first()
            if row is None:
                logger.debug("No expense with id %d", expense_id)
                return None

            result = conn.execute(delete(self.table).where(self.table.c.id == expense_id))
            if result.rowcount == 0:
                logger.debug("Expense %d was removed concurrently", expense_id)
                return None

        expense = Expense.from_row(row)
        logger.debug("Deleted expense %s", expense.to_dict())
        return expense

    def list_all(self) -> ExpenseListing:
        """Return every expense ordered by date, with the total amount."""
        with self._transaction("list expenses") as conn:
            rows = conn.execute(self._select()).mappings().all()

        return ExpenseListing.from_expenses([Expense.from_row(row) for row in rows])

    def search(self, term: str) -> ExpenseListing:
        """
        Return expenses whose memo contains term, ignoring case.

        LIKE wildcards inside term are escaped, so '%' and '_' match literally.
        """
        query = self._select().where(self.table.c.memo.icontains(term, autoescape=True))

        with self._transaction("search expenses") as conn:
            rows = conn.execute(query).mappings().all()

        listing = ExpenseListing.from_expenses([Expense.from_row(row) for row in rows])
        logger.debug("Search for %r matched %d expenses", term, listing.count)
        return listing

    def _select(self):
        return select(self.table).order_by(self.table.c.created_on, self.table.c.id)
