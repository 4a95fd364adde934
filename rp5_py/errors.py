"""Error types for rp5.

Failures are raised where they are detected and reported once by the CLI.
Usage mistakes are not errors: they print usage and exit normally.
"""

from __future__ import annotations


class Rp5Error(Exception):
    """Base exception for rp5 failures that end the invocation."""

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class MissingResourceError(Rp5Error):
    """A sketch, runtime jar or template is not on disk."""


class UnknownPlatformError(Rp5Error):
    """The host platform string matched none of the known platforms."""

    def __init__(self, raw: str):
        super().__init__(f"unknown os: {raw!r}")
        self.raw = raw


class ConfigError(Rp5Error):
    """The ~/.rp5rc file could not be parsed."""
