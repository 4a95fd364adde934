"""Rich-based terminal UI implementation."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from typing import TextIO


class RichUI:
    """Rich-based terminal UI."""

    def __init__(
        self,
        no_color: bool = False,
        ascii_only: bool = False,
        file: TextIO | None = None,
    ):
        self.no_color = no_color
        self.ascii_only = ascii_only
        self._file = file or sys.stderr
        self.console = Console(
            file=self._file,
            no_color=no_color,
            force_terminal=True,
            highlight=False,
            emoji=not ascii_only,
        )

    def info(self, text: str) -> None:
        self.console.print(text, style="dim", markup=False)

    def ok(self, text: str) -> None:
        self.console.print(f"OK: {text}", style="green", markup=False)

    def warn(self, text: str) -> None:
        self.console.print(f"WARN: {text}", style="yellow", markup=False)

    def err(self, text: str) -> None:
        self.console.print(f"ERROR: {text}", style="red bold", markup=False)
