#!/usr/bin/env python3
"""
Unit tests for command dispatch.

Commands run against a real temporary store; confirmation is injected.
"""

from unittest.mock import MagicMock

import pytest

from expenses.cli.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    SearchCommand,
)
from expenses.cli.dispatcher import CLEAR_PROMPT, dispatch
from expenses.core.exceptions import ConstraintViolation


@pytest.mark.cli
class TestDispatch:
    """Test each command's effect and output."""

    def test_add_then_list(self, store, capsys):
        dispatch(AddCommand(amount="5.00", memo="coffee"), store)
        dispatch(AddCommand(amount="10.50", memo="books"), store)
        capsys.readouterr()

        dispatch(ListCommand(), store)
        out = capsys.readouterr().out

        assert "Found 2 expenses:" in out
        assert out.index("coffee") < out.index("books")
        assert out.rstrip().endswith("Total |        15.50")

    def test_add_echoes_record(self, store, capsys):
        dispatch(AddCommand(amount="7.25", memo="parking"), store)
        out = capsys.readouterr().out

        assert out.startswith("Expense added:")
        assert "7.25 | parking" in out

    def test_add_constraint_violation_propagates(self, store):
        with pytest.raises(ConstraintViolation):
            dispatch(AddCommand(amount="0", memo="free"), store)
        assert store.list_all().count == 0

    def test_delete_existing(self, store, capsys):
        expense = store.add_expense("3.00", "snack")

        dispatch(DeleteCommand(expense_id=expense.id), store)
        out = capsys.readouterr().out

        assert "Expense deleted:" in out
        assert "3.00 | snack" in out
        assert store.list_all().count == 0

    def test_delete_missing_reports_not_found(self, store, capsys):
        dispatch(DeleteCommand(expense_id=999), store)
        assert capsys.readouterr().out.strip() == "There is no expense with the id '999'"

    def test_search(self, store, capsys):
        store.add_expense("4.50", "Coffee")
        store.add_expense("12.00", "books")

        dispatch(SearchCommand(term="COFFEE"), store)
        out = capsys.readouterr().out

        assert "Found 1 expense:" in out
        assert "books" not in out
        assert out.rstrip().endswith("4.50")

    def test_help(self, store, capsys):
        dispatch(HelpCommand(), store)
        out = capsys.readouterr().out
        assert out.startswith("Commands:")
        assert "add AMOUNT MEMO" in out


@pytest.mark.cli
class TestClearConfirmation:
    """Test clear only proceeds after confirmation."""

    def test_confirmed_clear_empties_ledger(self, store, capsys):
        store.add_expense("1.00", "a")
        store.add_expense("2.00", "b")
        confirm = MagicMock(return_value=True)

        dispatch(ClearCommand(), store, confirm)

        confirm.assert_called_once_with(CLEAR_PROMPT)
        assert store.list_all().count == 0
        assert "All expenses deleted (2 removed)." in capsys.readouterr().out

    def test_declined_clear_is_a_no_op(self, store, capsys):
        store.add_expense("1.00", "a")

        dispatch(ClearCommand(), store, lambda prompt: False)

        assert store.list_all().count == 1
        assert "Aborted" in capsys.readouterr().out

    def test_non_destructive_commands_never_confirm(self, store):
        confirm = MagicMock(return_value=True)
        store.add_expense("1.00", "a")

        dispatch(ListCommand(), store, confirm)
        dispatch(SearchCommand(term="a"), store, confirm)
        dispatch(DeleteCommand(expense_id=999), store, confirm)

        confirm.assert_not_called()
