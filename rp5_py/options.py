"""Command-line option parsing for rp5."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

FLAG_P3D = "--p3d"
FLAG_JRUBY = "--jruby"
FLAG_NOJRUBY = "--nojruby"


class Action(str, Enum):
    """Everything rp5 can be asked to do."""

    RUN = "run"
    WATCH = "watch"
    LIVE = "live"
    CREATE = "create"
    APP = "app"
    SETUP = "setup"
    VERSION = "version"
    HELP = "help"

    @classmethod
    def from_string(cls, value: str | None) -> Action:
        """Resolve a raw action keyword; anything unrecognised means help.

        The six commands match exactly. Version and help match any keyword
        containing ``-v`` or ``-h`` so ``-v``, ``--version``, ``-h`` and
        ``--help`` all work.
        """
        if value is None:
            return cls.HELP
        if value in _COMMANDS:
            return cls(value)
        if "-v" in value:
            return cls.VERSION
        if "-h" in value:
            return cls.HELP
        return cls.HELP


_COMMANDS = {"run", "watch", "live", "create", "app", "setup"}


@dataclass
class Options:
    """Parsed rp5 invocation."""

    action: str | None = None
    path: str = ""
    args: list[str] = field(default_factory=list)
    p3d: bool = False
    jruby: bool = False
    nojruby: bool = False
    # False when path is the cwd-derived default rather than a typed argument.
    path_given: bool = False

    @property
    def command(self) -> Action:
        return Action.from_string(self.action)


def _take_flag(args: list[str], flag: str) -> bool:
    """Remove every occurrence of ``flag`` from ``args``; True if any was present."""
    found = flag in args
    args[:] = [arg for arg in args if arg != flag]
    return found


def parse_options(args: list[str], cwd: Path | None = None) -> Options:
    """Parse the arguments that follow the program name.

    Global flags are stripped wherever they appear. The remaining positionals
    are the action, the sketch path (defaulting to ``<cwd name>.rb``) and the
    arguments handed to the sketch itself.
    """
    remaining = list(args)
    p3d = _take_flag(remaining, FLAG_P3D)
    jruby = _take_flag(remaining, FLAG_JRUBY)
    nojruby = _take_flag(remaining, FLAG_NOJRUBY)

    if len(remaining) > 1:
        path = remaining[1]
    else:
        path = f"{(cwd or Path.cwd()).name}.rb"

    return Options(
        action=remaining[0] if remaining else None,
        path=path,
        args=remaining[2:],
        p3d=p3d,
        jruby=jruby,
        nojruby=nojruby,
        path_given=len(remaining) > 1,
    )
