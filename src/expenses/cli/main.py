#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Ledger

Parses the invocation into one ledger command, opens the store, bootstraps
the expense table and runs the command.
"""

import logging
import os

import click

from .. import __version__
from ..core.config import get_config, mask_db_url
from ..core.exceptions import LedgerError, UsageError
from ..ledger.store import LedgerStore
from .commands import HelpCommand, command_summary, parse_command
from .dispatcher import confirm_keypress, dispatch

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    # Everything after the command name belongs to the command, e.g. search -v
    "allow_interspersed_args": False,
}


@click.command(context_settings=CONTEXT_SETTINGS, epilog="\b\n" + command_summary())
@click.option("--db-url", help="Database URL (overrides EXPENSES_DB_URL)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="expenses")
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="COMMAND [ARGS]...")
@click.pass_context
def main(ctx: click.Context, db_url: str | None, verbose: bool, debug: bool, args: tuple[str, ...]) -> None:
    """Expense Ledger - record, list, search and delete expenses.

    Options go before the command; anything after it is passed to the command.
    """
    ctx.ensure_object(dict)

    try:
        command = parse_command(args)
    except UsageError as e:
        raise click.UsageError(str(e), ctx) from e

    if isinstance(command, HelpCommand):
        click.echo(ctx.get_help())
        return

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expenses").setLevel(logging.DEBUG)

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Database: {mask_db_url(db_url or config.database.url)}")
        click.echo(f"Table: {config.database.table_name}")

    confirm = ctx.obj.get("confirm", confirm_keypress)

    try:
        with LedgerStore.from_config(config, database_url=db_url) as store:
            store.ensure_schema()
            dispatch(command, store, confirm)
    except LedgerError as e:
        logger.error("Command %s failed: %s", type(command).__name__, e)
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
