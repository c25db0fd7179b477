#!/usr/bin/env python3
"""
Ledger Commands

Typed commands produced from raw command-line arguments. Parsing and
argument-shape validation happen here, once; the dispatcher only ever sees
a valid command.
"""

import re
from dataclasses import dataclass

from ..core.exceptions import UsageError

ID_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ListCommand:
    """Print every expense with the total."""


@dataclass(frozen=True)
class AddCommand:
    """Record one expense."""

    amount: str
    memo: str


@dataclass(frozen=True)
class ClearCommand:
    """Delete every expense after confirmation."""


@dataclass(frozen=True)
class DeleteCommand:
    """Delete one expense by id."""

    expense_id: int


@dataclass(frozen=True)
class SearchCommand:
    """Print expenses whose memo contains the term."""

    term: str


@dataclass(frozen=True)
class HelpCommand:
    """Print usage for all commands."""


Command = ListCommand | AddCommand | ClearCommand | DeleteCommand | SearchCommand | HelpCommand

USAGE = {
    "list": "list",
    "add": "add AMOUNT MEMO",
    "clear": "clear",
    "delete": "delete ID",
    "search": "search TERM",
}

DESCRIPTIONS = {
    "list": "Show all expenses and their total",
    "add": "Record an expense, e.g. add 5.00 \"coffee\"",
    "clear": "Delete all expenses (asks for confirmation)",
    "delete": "Delete the expense with the given id",
    "search": "Show expenses whose memo contains TERM (case-insensitive)",
}


def _expect_count(name: str, args: list[str], count: int) -> None:
    if len(args) != count:
        expected = "no arguments" if count == 0 else f"exactly {count} argument{'s' if count > 1 else ''}"
        raise UsageError(
            f"'{name}' takes {expected}, got {len(args)}. Usage: {USAGE[name]}",
            command=name,
        )


def parse_command(argv: list[str] | tuple[str, ...]) -> Command:
    """
    Turn raw arguments into a typed command.

    An absent or unrecognized first token yields HelpCommand.

    Raises:
        UsageError: If a recognized command has the wrong argument count or shape
    """
    if not argv:
        return HelpCommand()

    name, args = argv[0], list(argv[1:])

    if name == "list":
        _expect_count(name, args, 0)
        return ListCommand()

    if name == "add":
        _expect_count(name, args, 2)
        amount, memo = args
        return AddCommand(amount=amount, memo=memo)

    if name == "clear":
        _expect_count(name, args, 0)
        return ClearCommand()

    if name == "delete":
        _expect_count(name, args, 1)
        if not ID_PATTERN.fullmatch(args[0]):
            raise UsageError(
                f"'delete' expects a numeric id, got '{args[0]}'. Usage: {USAGE[name]}",
                command=name,
            )
        return DeleteCommand(expense_id=int(args[0]))

    if name == "search":
        _expect_count(name, args, 1)
        return SearchCommand(term=args[0])

    return HelpCommand()


def command_summary() -> str:
    """Aligned list of every command, used by --help and the help command."""
    width = max(len(usage) for usage in USAGE.values())
    lines = ["Commands:"]
    for name, usage in USAGE.items():
        lines.append(f"  {usage:<{width}}  {DESCRIPTIONS[name]}")
    return "\n".join(lines)
