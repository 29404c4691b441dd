"""
Scytale Console Interface
==========================

Rich-powered console abstraction shared by the Scytale presentation
layer and CLI.

The class wraps :class:`rich.console.Console` and adds helpers for the
banner, section headers, coloured status messages, tables and a status
spinner, all drawn from one theme.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------
_SCYTALE_THEME = Theme(
    {
        "scytale.banner": "bold bright_cyan",
        "scytale.section": "bold bright_magenta",
        "scytale.success": "bold green",
        "scytale.warning": "bold yellow",
        "scytale.error": "bold red",
        "scytale.info": "bold bright_blue",
        "scytale.dim": "dim white",
        "scytale.highlight": "bold bright_white",
        "scytale.plain": "bright_green",
        "scytale.cipher": "bright_yellow",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ___  ___ _   _ _____ ___  _     ___
 / __|/ __| | | |_   _/ _ \| |   | __|
 \__ \ (__| |_| | | || (_) | |__ | _|
 |___/\___|\__, | |_| \__,_|____||___|
           |___/
[/bright_cyan]"""

_TAGLINE = "Classical Cipher Toolkit"


class ScytaleConsole:
    """Unified console interface for the Scytale toolkit.

    Usage::

        con = ScytaleConsole()
        con.banner()
        con.section("Frequency Analysis")
        con.success("Language detected")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (library / test mode).
            record: Enable Rich recording for text or HTML export.
        """
        self._console = Console(
            theme=_SCYTALE_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Scytale banner with the version beneath it."""
        subtitle = (
            f"[scytale.highlight]{_TAGLINE}[/scytale.highlight]\n"
            f"[scytale.dim]Version: {version}[/scytale.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(
            f"  {title}  ",
            style="scytale.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[scytale.success][✔] SUCCESS:[/scytale.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[scytale.warning][⚠] WARNING:[/scytale.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[scytale.error][✘] ERROR:[/scytale.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[scytale.info][ℹ] INFO:[/scytale.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(
        self, message: str = "Working..."
    ) -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message.

        Example::

            with con.status("Trying 26 shifts..."):
                candidates = engine.crack_shift(text)
        """
        with self._console.status(
            f"[scytale.info]{message}[/scytale.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()

    def divider(self, style: str = "dim") -> None:
        self._console.rule(style=style)

    def export_text(self) -> str:
        """Export recorded output as plain text (requires ``record=True``)."""
        return self._console.export_text()
