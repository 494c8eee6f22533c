"""Rich console for installer reports.

Reports are rendered into a StringIO buffer and handed back as a string,
so AppContext decides whether they land on stdout or stderr. Rich drops
colour by itself when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

REPORT_WIDTH = 100

# One style per per-platform outcome, plus the pieces of a report line.
INSTALLER_THEME = Theme(
    {
        "aem.done": "bold green",
        "aem.failed": "bold red",
        "aem.kept": "bold yellow",
        "aem.missing": "dim",
        "aem.op": "bold cyan",
        "aem.label": "dim",
        "aem.platform": "bold blue",
        "aem.path": "dim",
        "aem.scope": "magenta",
        "aem.banner": "bold cyan",
    }
)


def create_console(*, width: int = REPORT_WIDTH) -> Console:
    """A themed Console writing into a fresh StringIO buffer."""
    return Console(file=StringIO(), theme=INSTALLER_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    """Text rendered so far into a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
