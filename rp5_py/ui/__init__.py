"""UI module for rp5 terminal output."""

from rp5_py.ui.base import UI
from rp5_py.ui.plain import PlainUI
from rp5_py.ui.rich_ui import RichUI

__all__ = ["UI", "RichUI", "PlainUI", "get_ui"]


def get_ui(
    mode: str = "auto",
    no_color: bool = False,
    ascii_only: bool = False,
) -> UI:
    """Get appropriate UI implementation based on mode and environment."""
    import sys

    normalized = (mode or "auto").strip().lower()
    if normalized in {"plain", "off", "no", "0"}:
        return PlainUI(no_color=no_color)

    # auto or rich mode; rich needs a real terminal unless asked for explicitly
    if normalized == "auto" and not sys.stderr.isatty():
        return PlainUI(no_color=no_color)
    return RichUI(no_color=no_color, ascii_only=ascii_only)
