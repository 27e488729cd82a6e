"""expense-tracker — record, list, search and clear expenses from the shell.

Backed by a single relational ``expenses`` table through SQLAlchemy.
"""

from expense_tracker.version import __version__

__all__: list[str] = ["__version__"]
