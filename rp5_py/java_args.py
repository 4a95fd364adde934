"""Discovery of extra flags for the Java virtual machine.

Flags for the JVM, such as ``-Xmx1024m``, can be stored next to a sketch in
``data/java_args.txt`` or, for every sketch, under ``java_args`` in
``~/.rp5rc``. The sketch-local file wins when both exist.
"""

from __future__ import annotations

from pathlib import Path

from rp5_py.config import Rp5Config
from rp5_py.hostos import Platform

JAVA_ARGS_FILE = Path("data") / "java_args.txt"
JRUBY_PASSTHROUGH = "-J"
DOCK_NAME = "Ruby-Processing"


def dock_icon(platform: Platform, rp5_root: Path) -> list[str]:
    """Flags naming the application and its icon in the macOS Dock."""
    if platform != Platform.MACOSX:
        return []
    icon = rp5_root / "lib" / "templates" / "application" / "Contents" / "Resources" / "sketch.icns"
    return [f"-Xdock:name={DOCK_NAME}", f"-Xdock:icon={icon}"]


def discover_java_args(
    sketch: str,
    config: Rp5Config,
    platform: Platform,
    nojruby: bool,
) -> list[str]:
    """Build the ordered JVM flag list for a sketch.

    Platform flags come first, then the sketch's ``data/java_args.txt`` or,
    failing that, the configured ``java_args``. When the installed ``jruby``
    binary runs the sketch each flag gets the ``-J`` prefix so JRuby forwards
    it to the JVM.
    """
    args = dock_icon(platform, config.rp5_root)

    arg_file = Path(sketch).parent / JAVA_ARGS_FILE
    if arg_file.exists():
        args += arg_file.read_text().split()
    elif config.java_args:
        args += config.java_args.split()

    if not nojruby:
        args = [f"{JRUBY_PASSTHROUGH}{arg}" for arg in args]
    return args
