"""Dispatch a parsed rp5 invocation to the matching command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import click

from rp5_py.exporters import create_sketch, export_app
from rp5_py.help import HELP_MESSAGE, version_line
from rp5_py.hostos import Platform, detect_platform
from rp5_py.launcher import STARTERS, Launch, build_launch
from rp5_py.options import Action, Options
from rp5_py.setup_cmd import run_setup

if TYPE_CHECKING:
    from rp5_py.config import Rp5Config
    from rp5_py.ui.base import UI


class Runner:
    """Runs, watches, goes live with, creates, exports and sets up sketches.

    ``execute`` never replaces the process itself: sketch commands return a
    :class:`Launch` for the caller to hand off to, everything else returns an
    exit code.
    """

    def __init__(
        self,
        config: Rp5Config,
        ui: UI,
        platform_fn: Callable[[], Platform] = detect_platform,
        cwd: Path | None = None,
    ) -> None:
        self.config = config
        self.ui = ui
        self._platform_fn = platform_fn
        self._cwd = cwd

    def execute(self, options: Options) -> Launch | int:
        action = options.command
        if action in (Action.RUN, Action.WATCH, Action.LIVE):
            return self.spin_up(action, options)
        if action == Action.CREATE:
            return create_sketch(options.path, options.args, options.p3d, self.ui, self._cwd)
        if action == Action.APP:
            return export_app(options.path, self.config, self.ui)
        if action == Action.SETUP:
            # A bare `rp5 setup` must print usage, whatever the cwd is called.
            choice = options.path if options.path_given else ""
            return run_setup(choice, self.config, self.ui, self._platform_fn, self._cwd)
        if action == Action.VERSION:
            return self.show_version()
        return self.show_help()

    def spin_up(self, action: Action, options: Options) -> Launch | int:
        """Check the sketch is there, then build its launch command."""
        sketch = options.path
        if not Path(sketch).exists():
            self.ui.err(f"Couldn't find: {sketch}")
            return 1
        return build_launch(
            STARTERS[action.value],
            sketch,
            options.args,
            options,
            self.config,
            self._platform_fn(),
            self.ui,
        )

    def show_version(self) -> int:
        click.echo(version_line())
        return 0

    def show_help(self) -> int:
        click.echo(HELP_MESSAGE)
        return 0
