"""Tests for hostos module."""

from __future__ import annotations

import sys

import pytest

from rp5_py.errors import UnknownPlatformError
from rp5_py.hostos import Platform, classify_platform, detect_platform


class TestClassifyPlatform:
    """Tests for classify_platform."""

    @pytest.mark.parametrize(
        "raw",
        ["Windows_NT", "win32", "cygwin", "mingw32", "msys", "i386-mswin32"],
    )
    def test_windows(self, raw: str) -> None:
        assert classify_platform(raw) == Platform.WINDOWS

    @pytest.mark.parametrize("raw", ["darwin", "darwin19", "Mac OS X"])
    def test_macosx(self, raw: str) -> None:
        assert classify_platform(raw) == Platform.MACOSX

    @pytest.mark.parametrize("raw", ["linux", "linux-gnu", "Linux"])
    def test_linux(self, raw: str) -> None:
        assert classify_platform(raw) == Platform.LINUX

    @pytest.mark.parametrize("raw", ["solaris", "sunos5-solaris", "freebsd13", "openbsd"])
    def test_unix(self, raw: str) -> None:
        assert classify_platform(raw) == Platform.UNIX

    def test_unknown_is_fatal(self) -> None:
        with pytest.raises(UnknownPlatformError) as exc_info:
            classify_platform("plan9")
        assert "plan9" in str(exc_info.value)
        assert exc_info.value.raw == "plan9"


class TestDetectPlatform:
    """Tests for detect_platform."""

    def test_memoized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        detect_platform.cache_clear()
        monkeypatch.setattr(sys, "platform", "linux")
        assert detect_platform() == Platform.LINUX

        monkeypatch.setattr(sys, "platform", "plan9")
        assert detect_platform() == Platform.LINUX
        detect_platform.cache_clear()
