"""Base UI protocol for rp5 output."""

from __future__ import annotations

from typing import Protocol


class UI(Protocol):
    """Protocol for rp5 UI implementations."""

    def info(self, text: str) -> None:
        """Display info message (dim)."""
        ...

    def ok(self, text: str) -> None:
        """Display success message (green)."""
        ...

    def warn(self, text: str) -> None:
        """Display warning message (yellow)."""
        ...

    def err(self, text: str) -> None:
        """Display error message (red)."""
        ...
