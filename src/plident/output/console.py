"""Rich Console factory and theme for plident output.

Rendering goes to an in-memory buffer so renderers can hand plain strings
to click. Rich drops the colour codes itself when stdout is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PLIDENT_THEME = Theme(
    {
        "plident.ok": "bold green",
        "plident.error": "bold red",
        "plident.op": "bold cyan",
        "plident.key": "dim",
        "plident.number": "bold blue",
        "plident.match": "green",
        "plident.mismatch": "yellow",
    }
)

CONSOLE_WIDTH = 120


def create_console() -> Console:
    """Console writing to a StringIO buffer, themed and without highlighting."""
    return Console(file=StringIO(), theme=PLIDENT_THEME, highlight=False, width=CONSOLE_WIDTH)


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
