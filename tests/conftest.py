"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import insert

from expenses.core import config as config_module
from expenses.ledger import LedgerStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def db_url(temp_dir) -> str:
    """SQLite database URL inside a fresh temporary directory."""
    return f"sqlite:///{temp_dir / 'ledger.db'}"


@pytest.fixture
def store(db_url):
    """A ledger store with the expense table already created."""
    ledger = LedgerStore(db_url)
    ledger.ensure_schema()
    yield ledger
    ledger.close()


@pytest.fixture
def insert_dated(store):
    """Insert an expense with an explicit created_on date, bypassing the default."""

    def _insert(amount: str, memo: str, created_on: date) -> int:
        with store.engine.begin() as conn:
            result = conn.execute(
                insert(store.table).values(amount=Decimal(amount), memo=memo, created_on=created_on)
            )
            return result.inserted_primary_key[0]

    return _insert


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, temp_dir):
    """Set up test environment variables."""
    # Ensure tests never touch a real ledger
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_DATA_DIR", str(temp_dir / "data"))
    monkeypatch.delenv("EXPENSES_DB_URL", raising=False)
    monkeypatch.delenv("EXPENSES_TABLE", raising=False)
    monkeypatch.delenv("EXPENSES_DB_SCHEMA", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    # Force configuration to be re-read for every test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "ledger: Tests for the expense table store")
    config.addinivalue_line("markers", "cli: Tests for command parsing and rendering")
