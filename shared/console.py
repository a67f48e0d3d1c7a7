"""
Cryptex Console Interface
==========================

Rich-powered console abstraction providing a unified presentation layer
for every Cryptex module.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages, tables and
status spinners -- all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_CRYPTEX_THEME = Theme(
    {
        "cryptex.banner": "bold bright_cyan",
        "cryptex.section": "bold bright_magenta",
        "cryptex.success": "bold green",
        "cryptex.warning": "bold yellow",
        "cryptex.error": "bold red",
        "cryptex.info": "bold bright_blue",
        "cryptex.dim": "dim white",
        "cryptex.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
   ___  ___  _  _  ___  _____  ___  __  __
  / __|| _ \| || || _ \|_   _|| __| \ \/ /
 | (__ |   / \_. ||  _/  | |  | _|   >  <
  \___||_|_\ |__/ |_|    |_|  |___| /_/\_\
[/bright_cyan]"""

_TAGLINE = "Classical Cipher Cryptanalysis Toolkit"


class CryptexConsole:
    """Unified console interface for all Cryptex modules.

    Usage::

        con = CryptexConsole()
        con.banner()
        con.section("Vigenere Crack")
        con.success("Key recovered")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text / HTML export.
        """
        self._console = Console(
            theme=_CRYPTEX_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / section header
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Cryptex ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[cryptex.highlight]{_TAGLINE}[/cryptex.highlight]\n"
            f"[cryptex.dim]Version: {version}  |  {now}[/cryptex.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="cryptex.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[cryptex.success][✔] SUCCESS:[/cryptex.success] {message}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[cryptex.warning][⚠] WARNING:[/cryptex.warning] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[cryptex.error][✘] ERROR:[/cryptex.error] {message}"
        )

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[cryptex.info][ℹ] INFO:[/cryptex.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
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
            rows:     Iterable of row tuples; each element is stringified.
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
            # Cells are data, never markup: ciphertext may contain brackets.
            tbl.add_row(*(Text(str(cell)) for cell in row))

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

            with con.status("Enumerating keys..."):
                report = engine.brute_force(text, key_length=4)
        """
        with self._console.status(
            f"[cryptex.info]{message}[/cryptex.info]",
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
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
