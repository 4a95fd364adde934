"""Host operating system detection."""

from __future__ import annotations

import re
import sys
from enum import Enum
from functools import lru_cache

from rp5_py.errors import UnknownPlatformError


class Platform(str, Enum):
    """Platforms rp5 knows how to launch sketches on."""

    WINDOWS = "windows"
    MACOSX = "macosx"
    LINUX = "linux"
    UNIX = "unix"


# Checked in order; "darwin" must not be caught by a bare "win".
_PATTERNS = (
    (re.compile(r"mswin|msys|mingw|cygwin|bccwin|wince|emc|windows|win32", re.IGNORECASE), Platform.WINDOWS),
    (re.compile(r"darwin|mac os", re.IGNORECASE), Platform.MACOSX),
    (re.compile(r"linux", re.IGNORECASE), Platform.LINUX),
    (re.compile(r"solaris|bsd", re.IGNORECASE), Platform.UNIX),
)


def classify_platform(raw: str) -> Platform:
    """Map a raw platform identifier (``sys.platform``, ``uname``) to a Platform.

    Raises:
        UnknownPlatformError: if nothing matches.
    """
    for pattern, platform in _PATTERNS:
        if pattern.search(raw):
            return platform
    raise UnknownPlatformError(raw)


@lru_cache(maxsize=None)
def detect_platform() -> Platform:
    """Classify the running interpreter's platform once per process."""
    return classify_platform(sys.platform)
