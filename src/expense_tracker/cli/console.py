"""CLI console helpers with optional Rich support.

Two proxies are exposed:

* :data:`console` — stderr, for diagnostics and fatal errors.
* :data:`output` — stdout, for command results.

Rich is imported lazily on every call so that a replaced
``sys.stdout``/``sys.stderr`` (pipes, tests) is always honoured.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
    """Return ``rich.console.Console``, or ``None`` when Rich is missing."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-print fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def _stream(self) -> Any:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain ``print``.

        With ``markup=False`` the text is written verbatim: no markup,
        no highlighting, no wrapping.
        """
        console_class = _load_rich_console_class()
        if console_class is None:
            print(*objects, file=self._stream())
            return
        rich_console = console_class(file=self._stream(), soft_wrap=True)
        rich_console.print(
            *objects, markup=markup, emoji=markup, highlight=False,
        )


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
