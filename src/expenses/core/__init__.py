"""
Core Utilities Package

Shared configuration, money handling, data models and errors used by the
ledger store and the command-line interface.

This package provides:
- Currency handling with integer cents for exact totals
- Typed expense records and listings
- Configuration management for environment-specific settings
- The ledger error taxonomy
"""

from .config import (
    Config,
    DatabaseConfig,
    Environment,
    get_config,
    mask_db_url,
    reload_config,
)
from .currency import (
    cents_to_decimal,
    cents_to_dollars_str,
    decimal_to_cents,
    parse_decimal_amount,
)
from .exceptions import (
    ConnectionFailure,
    ConstraintViolation,
    InvalidInput,
    LedgerError,
    UsageError,
)
from .models import Expense, ExpenseListing
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "DatabaseConfig",
    "Environment",
    "get_config",
    "mask_db_url",
    "reload_config",
    # Currency utilities
    "cents_to_decimal",
    "cents_to_dollars_str",
    "decimal_to_cents",
    "parse_decimal_amount",
    # Errors
    "ConnectionFailure",
    "ConstraintViolation",
    "InvalidInput",
    "LedgerError",
    "UsageError",
    # Data models
    "Expense",
    "ExpenseListing",
    "Money",
]
