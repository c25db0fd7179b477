#!/usr/bin/env python3
"""
Ledger Exceptions

Error taxonomy shared by the ledger store and the command-line dispatcher.
A missing expense on delete is not an error and has no exception here.
"""


class LedgerError(Exception):
    """Base class for all expense ledger errors."""


class UsageError(LedgerError):
    """Raised when a command is given the wrong number or shape of arguments."""

    def __init__(self, message: str, command: str | None = None):
        super().__init__(message)
        self.command = command


class InvalidInput(LedgerError, ValueError):
    """Raised when an amount is not a valid fixed-point number."""


class ConstraintViolation(LedgerError):
    """Raised when the database rejects a row (for example amount <= 0)."""


class ConnectionFailure(LedgerError):
    """Raised when the database cannot be reached or initialized."""
