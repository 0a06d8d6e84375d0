"""
lssecrets UI - Console implementation.

Rich consoles for the report (stdout) and fatal errors (stderr).
Report lines are written straight to the stream so keyring content is
printed verbatim; rich only styles the error console.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

# Custom theme
LSSECRETS_THEME = Theme(
    {
        "error": "red bold",
        "muted": "dim",
    }
)


def _plain_console(stderr: bool = False, theme: Theme | None = None) -> Console:
    return Console(
        stderr=stderr,
        theme=theme,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


class ConsoleUI:
    """
    Console user interface.

    The report goes to stdout line by line, errors go to stderr.
    """

    def __init__(self, theme: Theme | None = None) -> None:
        """Initialize consoles."""
        self.console = _plain_console(theme=theme or LSSECRETS_THEME)
        self.err_console = _plain_console(stderr=True, theme=theme or LSSECRETS_THEME)

    def line(self, text: str = "") -> None:
        """Write one report line exactly as given, bypassing rich rendering."""
        self.console.file.write(f"{text}\n")

    def error(self, message: str) -> None:
        """Display a fatal error on stderr."""
        self.err_console.print(f"Error: {message}", style="error")
