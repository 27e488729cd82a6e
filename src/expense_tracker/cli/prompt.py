"""Single-keystroke confirmation input.

Blocks until one character (or end-of-input) arrives; no timeout.
"""

from __future__ import annotations

import sys


def _read_raw_posix(fd: int) -> str:
    import termios
    import tty

    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def read_char() -> str:
    """Read exactly one character from standard input.

    Interactive terminals are switched to raw mode so the answer does
    not need Enter.  Pipes and redirected input are read as-is.  Returns
    ``""`` at end of input.

    In raw mode Ctrl+C does not raise ``KeyboardInterrupt``; it arrives
    as ``"\\x03"`` and is treated like any other non-``y`` answer.
    """
    stream = sys.stdin
    if stream is None:
        return ""
    if not stream.isatty():
        return stream.read(1)

    if sys.platform == "win32":
        import msvcrt

        return msvcrt.getwch()
    return _read_raw_posix(stream.fileno())


def confirm(question: str) -> bool:
    """Print *question* and return ``True`` only if the user types ``y``."""
    from expense_tracker.cli.console import output

    output.print(question, markup=False)
    return read_char() == "y"
