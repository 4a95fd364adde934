"""Tests for UI implementations."""

from __future__ import annotations

import io

from rp5_py.ui import PlainUI, RichUI, get_ui


class TestGetUI:
    """Tests for get_ui."""

    def test_plain_modes(self) -> None:
        for mode in ("plain", "off", "no", "0"):
            assert isinstance(get_ui(mode), PlainUI)

    def test_rich_mode(self) -> None:
        assert isinstance(get_ui("rich"), RichUI)

    def test_auto_without_tty_is_plain(self, capsys) -> None:
        assert isinstance(get_ui("auto"), PlainUI)


class TestPlainUI:
    """Tests for PlainUI."""

    def test_no_color(self) -> None:
        out = io.StringIO()
        ui = PlainUI(no_color=True, file=out)
        ui.ok("done")
        ui.warn("careful")
        ui.err("broken")
        ui.info("fyi")
        assert out.getvalue() == "OK: done\nWARN: careful\nERROR: broken\nfyi\n"

    def test_color(self) -> None:
        out = io.StringIO()
        PlainUI(file=out).err("broken")
        assert out.getvalue() == "\033[31m\033[1mERROR: broken\033[0m\n"


class TestRichUI:
    """Tests for RichUI."""

    def test_messages_without_markup(self) -> None:
        out = io.StringIO()
        ui = RichUI(no_color=True, file=out)
        ui.err("[red]not markup[/red]")
        ui.warn("careful")
        text = out.getvalue()
        assert "ERROR: [red]not markup[/red]" in text
        assert "WARN: careful" in text


class TestAsciiOnly:
    """Tests for the ascii_only switch."""

    def test_plain_ui_ignores_ascii(self) -> None:
        ui = get_ui("plain", ascii_only=True)
        assert isinstance(ui, PlainUI)
        assert not hasattr(ui, "ascii_only")

    def test_rich_ui_disables_emoji(self) -> None:
        out = io.StringIO()
        RichUI(no_color=True, ascii_only=True, file=out).info(":smile:")
        assert ":smile:" in out.getvalue()
