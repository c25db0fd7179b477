#!/usr/bin/env python3
"""
Command Dispatcher

Runs a validated command against the ledger store and prints the result.
Destructive commands ask an injected confirmer before touching the store.
"""

import logging
from collections.abc import Callable

import click

from ..core.exceptions import LedgerError
from ..ledger.store import LedgerStore
from .commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    SearchCommand,
    command_summary,
)
from .render import format_expense, render_listing

logger = logging.getLogger(__name__)

Confirmer = Callable[[str], bool]

CLEAR_PROMPT = "Delete ALL expenses? [y/N]"


def confirm_keypress(prompt: str) -> bool:
    """Show prompt, read a single keypress, accept only 'y' or 'Y'."""
    click.echo(f"{prompt} ", nl=False)
    key = click.getchar()
    click.echo(key)
    return key in ("y", "Y")


def dispatch(command: Command, store: LedgerStore, confirm: Confirmer = confirm_keypress) -> None:
    """
    Execute one command and render its outcome to standard output.

    A missing id on delete and a declined clear are normal outcomes.

    Raises:
        LedgerError: Propagated from the store for the CLI to report
    """
    if isinstance(command, ListCommand):
        click.echo(render_listing(store.list_all()))

    elif isinstance(command, AddCommand):
        expense = store.add_expense(command.amount, command.memo)
        click.echo("Expense added:")
        click.echo(format_expense(expense))

    elif isinstance(command, ClearCommand):
        if not confirm(CLEAR_PROMPT):
            click.echo("Aborted. No expenses were deleted.")
            return
        removed = store.delete_all()
        click.echo(f"All expenses deleted ({removed} removed).")

    elif isinstance(command, DeleteCommand):
        expense = store.delete_by_id(command.expense_id)
        if expense is None:
            click.echo(f"There is no expense with the id '{command.expense_id}'")
            return
        click.echo("Expense deleted:")
        click.echo(format_expense(expense))

    elif isinstance(command, SearchCommand):
        click.echo(render_listing(store.search(command.term)))

    elif isinstance(command, HelpCommand):
        click.echo(command_summary())

    else:  # pragma: no cover - parse_command only builds the types above
        raise LedgerError(f"Unsupported command: {command!r}")
