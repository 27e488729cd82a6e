"""Allow ``python -m expense_tracker`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m expense_tracker`` behaves identically to the ``expenses``
console script.
"""

from __future__ import annotations

from expense_tracker.cli.app import cli

if __name__ == "__main__":
    cli()
