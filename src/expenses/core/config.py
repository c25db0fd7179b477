#!/usr/bin/env python3
"""
Configuration Management for the Expense Ledger

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production); database
connection parameters are resolved from the environment or a .env file.
"""

import logging
import os
import re
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

# Load environment variables from .env file
load_dotenv()

DEFAULT_TABLE_NAME = "expenses"
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    url: str
    table_name: str = DEFAULT_TABLE_NAME
    schema: str | None = None
    echo_sql: bool = False


@dataclass
class Config:
    """
    Main configuration class for the expense ledger.

    Loads configuration from environment variables with secure defaults
    and validation for each environment type.
    """

    environment: Environment
    data_dir: Path
    database: DatabaseConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"
    db_url_explicit: bool = False

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPENSES_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_expenses"
            data_dir = Path(os.getenv("EXPENSES_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("EXPENSES_DATA_DIR", "./data")).expanduser().resolve()

        explicit_url = os.getenv("EXPENSES_DB_URL")
        if explicit_url:
            url = explicit_url
        else:
            # Only the default SQLite file needs a local directory
            data_dir.mkdir(parents=True, exist_ok=True)
            url = f"sqlite:///{data_dir / 'expenses.db'}"

        database = DatabaseConfig(
            url=url,
            table_name=os.getenv("EXPENSES_TABLE", DEFAULT_TABLE_NAME),
            schema=os.getenv("EXPENSES_DB_SCHEMA") or None,
            echo_sql=os.getenv("EXPENSES_ECHO_SQL", "false").lower() == "true",
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            database=database,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            db_url_explicit=explicit_url is not None,
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not IDENTIFIER_PATTERN.fullmatch(self.database.table_name):
            errors.append(f"EXPENSES_TABLE must be a plain identifier: {self.database.table_name!r}")

        if self.database.schema and not IDENTIFIER_PATTERN.fullmatch(self.database.schema):
            errors.append(f"EXPENSES_DB_SCHEMA must be a plain identifier: {self.database.schema!r}")

        try:
            make_url(self.database.url)
        except ArgumentError as e:
            errors.append(f"EXPENSES_DB_URL is not a valid database URL: {e}")

        # Production must never fall back to the local SQLite file
        if self.environment == Environment.PRODUCTION and not self.db_url_explicit:
            errors.append("EXPENSES_DB_URL is required in production")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"LOG_LEVEL is not a logging level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # SQL statement logging is opt-in
        if not self.database.echo_sql:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    def safe_db_url(self) -> str:
        """Database URL with any password masked, for display."""
        return mask_db_url(self.database.url)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary with the database password redacted."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "database": {
                "url": self.safe_db_url(),
                "table_name": self.database.table_name,
                "schema": self.database.schema,
                "echo_sql": self.database.echo_sql,
            },
            "debug": self.debug,
            "log_level": self.log_level,
        }


def mask_db_url(url: str) -> str:
    """Render a database URL with its password hidden."""
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<invalid database url>"


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        # Validate configuration before caching it
        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
