"""Build the JRuby command for a sketch and hand the process over to it."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from rp5_py.errors import MissingResourceError
from rp5_py.java_args import discover_java_args

if TYPE_CHECKING:
    from rp5_py.config import Rp5Config
    from rp5_py.hostos import Platform
    from rp5_py.options import Options
    from rp5_py.ui.base import UI

JRUBY_MAIN = "org.jruby.Main"
STARTERS = {
    "run": "run.rb",
    "watch": "watch.rb",
    "live": "live.rb",
}


@dataclass(frozen=True)
class Launch:
    """A ready-to-exec command line; performing it replaces this process."""

    argv: list[str]

    @property
    def program(self) -> str:
        return self.argv[0]


def jruby_complete(config: Rp5Config) -> Path:
    """Return the bundled jruby-complete.jar, which must exist."""
    jar = config.jruby_complete
    if not jar.exists():
        raise MissingResourceError(
            f"{jar} does not exist",
            hint="Try running `rp5 setup install`",
        )
    return jar


def build_launch(
    starter: str,
    sketch: str,
    args: list[str],
    options: Options,
    config: Rp5Config,
    platform: Platform,
    ui: UI,
) -> Launch:
    """Build the command that runs ``sketch`` through a starter script.

    The installed ``jruby`` is used unless ``--nojruby`` was passed or the rc
    file sets ``JRUBY: 'false'``, in which case plain ``java`` runs the
    bundled jruby-complete.jar.
    """
    runner = config.runners_dir / starter
    if options.jruby:
        ui.warn("The --jruby flag is no longer required")
    if config.jruby_disabled:
        options.nojruby = True

    java_args = discover_java_args(sketch, config, platform, options.nojruby)
    if options.nojruby:
        argv = [
            "java",
            *java_args,
            "-cp",
            str(jruby_complete(config)),
            JRUBY_MAIN,
            str(runner),
            sketch,
            *args,
        ]
    else:
        argv = ["jruby", *java_args, str(runner), sketch, *args]
    return Launch(argv=argv)


def handoff(launch: Launch) -> NoReturn:
    """Replace the current process with ``launch``."""
    os.execvp(launch.program, launch.argv)
