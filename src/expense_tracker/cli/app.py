"""CLI application entry point and command dispatch for expense-tracker.

This module is the **sole error boundary** for the entire application.
It catches :class:`~expense_tracker.exceptions.ExpenseTrackerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* Input validation failures are printed here and end the command with
  exit code 0; they are values, not exceptions.
* Store failures propagate as exceptions up to :func:`cli` and are fatal.
* This module is the only place that reads configuration and translates
  between the domain world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from expense_tracker.cli import exit_codes
from expense_tracker.cli.console import console, output
from expense_tracker.cli.prompt import confirm
from expense_tracker.config import get_settings
from expense_tracker.core.expense_service import ExpenseService
from expense_tracker.core.formatting import format_expenses
from expense_tracker.core.models import Expense
from expense_tracker.core.protocols import ExpenseStore
from expense_tracker.core.validation import (
    validate_id,
    validate_new_expense,
    validate_search,
)
from expense_tracker.exceptions import ExpenseTrackerError
from expense_tracker.version import __version__

logger = logging.getLogger(__name__)

COMMANDS_TEXT = """\
Commands:

add AMOUNT MEMO - record a new expense
clear - delete all expenses
list - list all expenses
delete NUMBER - remove expense with id NUMBER
search QUERY - list expenses with a matching memo field"""

HELP_TEXT = f"An expenses recording system\n\n{COMMANDS_TEXT}"

CLEAR_QUESTION = "This will remove all expenses. Are you sure? (y/n)"

Handler = Callable[[ExpenseService, list[str]], None]


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The first positional token names the command; everything after it
    is handed to the command verbatim.
    """
    parser = argparse.ArgumentParser(
        prog="expenses",
        description="An expenses recording system.",
        epilog=COMMANDS_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--database-url",
        metavar="URL",
        default=None,
        help="SQLAlchemy database URL (default: from EXPENSES_* settings).",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="One of: add, list, search, delete, clear.",
    )
    parser.add_argument(
        "arguments",
        nargs=argparse.REMAINDER,
        help="Arguments for the command.",
    )
    return parser


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _say(message: str) -> None:
    output.print(message, markup=False)


def _print_expenses(expenses: list[Expense]) -> None:
    for line in format_expenses(expenses):
        _say(line)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_add(service: ExpenseService, arguments: list[str]) -> None:
    """``add AMOUNT MEMO...`` — memo tokens are joined with single spaces."""
    amount = arguments[0] if arguments else ""
    memo = " ".join(arguments[1:])

    failure = validate_new_expense(amount, memo)
    if failure is not None:
        _say(failure.message)
        return

    service.add_expense(amount, memo)
    _say("The expense has been added successfully.")


def _handle_list(service: ExpenseService, arguments: list[str]) -> None:
    expenses = service.list_expenses()
    if not expenses:
        _say("No expenses found.")
        return
    _print_expenses(expenses)


def _handle_search(service: ExpenseService, arguments: list[str]) -> None:
    memo = " ".join(arguments)

    failure = validate_search(memo)
    if failure is not None:
        _say(failure.message)
        return

    matches = service.search_expenses(memo)
    if not matches:
        _say("No record found for this expense.")
        return
    _print_expenses(matches)


def _handle_delete(service: ExpenseService, arguments: list[str]) -> None:
    raw_id = arguments[0] if arguments else ""

    failure = validate_id(raw_id)
    if failure is not None:
        _say(failure.message)
        return

    deleted = service.delete_expense(int(raw_id))
    if deleted is None:
        _say(f"The expense with id {raw_id} doesn't exist in the database.")
        return
    _say("The following expense has been deleted:")
    _print_expenses([deleted])


def _handle_clear(service: ExpenseService, arguments: list[str]) -> None:
    """``clear`` — asks for a single ``y`` keystroke before deleting."""
    if arguments:
        _say("The clear command doesn't take any arguments.")
        return

    if not confirm(CLEAR_QUESTION):
        logger.debug("Clear not confirmed; nothing deleted")
        return

    service.clear_expenses()
    _say("All expenses have been deleted.")


_COMMANDS: dict[str, Handler] = {
    "add": _handle_add,
    "list": _handle_list,
    "search": _handle_search,
    "delete": _handle_delete,
    "clear": _handle_clear,
}


# ---------------------------------------------------------------------------
# Store bootstrap
# ---------------------------------------------------------------------------

def _open_store(database_url: str | None) -> ExpenseStore:
    """Connect to the configured SQL store.

    An explicit ``--database-url`` wins over the ``EXPENSES_*`` settings.
    """
    from expense_tracker.infra.sql_store import SqlExpenseStore

    url = database_url or get_settings().resolved_database_url
    return SqlExpenseStore(url)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    store: ExpenseStore | None = None,
) -> int:
    """Run the expenses CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    store:
        Store to operate on.  When ``None``, a SQL store is opened from
        configuration and closed before returning.  A store passed in
        stays open; the caller owns it.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    StoreError
        When the store cannot be reached or a store operation fails.
    """
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)

    # A leading unrecognised option (e.g. ``--bogus``) is an unknown command.
    handler = _COMMANDS.get(args.command) if args.command and not unknown else None
    if handler is None:
        _say(HELP_TEXT)
        return exit_codes.SUCCESS

    owns_store = store is None
    active_store = store if store is not None else _open_store(args.database_url)
    try:
        handler(ExpenseService(active_store), list(args.arguments))
    finally:
        if owns_store:
            active_store.close()

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _configure_logging(level: str) -> None:
    """Send diagnostics to stderr through Rich at *level*."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        _configure_logging(get_settings().log_level)
        code = main()
        sys.exit(code)
    except ExpenseTrackerError as exc:
        console.print(f"Error: {exc}", markup=False)
        if exc.hint:
            console.print(f"Hint: {exc.hint}", markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            markup=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
