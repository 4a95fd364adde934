"""Plain text UI implementation (no Rich dependency)."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
}


class PlainUI:
    """Plain text UI with optional ANSI colors."""

    def __init__(
        self,
        no_color: bool = False,
        file: TextIO | None = None,
    ):
        self.no_color = no_color
        self._file = file or sys.stderr

    def _color(self, text: str, *styles: str) -> str:
        """Apply color codes if colors are enabled."""
        if self.no_color:
            return text
        prefix = "".join(COLORS.get(s, "") for s in styles)
        return f"{prefix}{text}{COLORS['reset']}" if prefix else text

    def _print(self, text: str = "") -> None:
        print(text, file=self._file)

    def info(self, text: str) -> None:
        self._print(self._color(text, "dim"))

    def ok(self, text: str) -> None:
        self._print(self._color(f"OK: {text}", "green"))

    def warn(self, text: str) -> None:
        self._print(self._color(f"WARN: {text}", "yellow"))

    def err(self, text: str) -> None:
        self._print(self._color(f"ERROR: {text}", "red", "bold"))
