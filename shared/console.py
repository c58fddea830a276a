"""
rdelf Console Interface
========================

Rich-powered console abstraction giving every rdelf tool the same
presentation layer: severity-coloured messages, plain
labeled lines and styled tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all rdelf output
# ---------------------------------------------------------------------------
_RDELF_THEME = Theme(
    {
        "rdelf.success": "bold green",
        "rdelf.warning": "bold yellow",
        "rdelf.error": "bold red",
    }
)


class RdelfConsole:
    """Unified console interface for rdelf tools.

    Wraps :class:`rich.console.Console` with the helpers the tools need.

    Usage::

        con = RdelfConsole()
        con.line("Class: ELF64")
        con.error("file too short")
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        record: bool = False,
        width: int | None = None,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text / HTML export.
            width:  Fixed output width; ``None`` lets Rich detect it.
        """
        self._console = Console(
            theme=_RDELF_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
            width=width,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[rdelf.success][✔] SUCCESS:[/rdelf.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[rdelf.warning][⚠] WARNING:[/rdelf.warning] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[rdelf.error][✘] ERROR:[/rdelf.error] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Plain output
    # ------------------------------------------------------------------ #

    def line(self, text: str = "") -> None:
        """Print *text* verbatim: no markup, no highlighting, no wrapping."""
        self._console.print(
            text,
            markup=False,
            highlight=False,
            soft_wrap=True,
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
        justify: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified
                      and rendered without markup.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
            justify:  Optional per-column justification ("left"/"right").
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            just = justify[idx] if justify and idx < len(justify) else "left"
            tbl.add_column(col_name, style=style, justify=just, no_wrap=True)

        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
