"""CLI entry point for rp5."""

from __future__ import annotations

import os
import sys

import click

from rp5_py.config import Rp5Config, _parse_bool
from rp5_py.errors import Rp5Error
from rp5_py.launcher import Launch, handoff
from rp5_py.options import parse_options
from rp5_py.runner import Runner
from rp5_py.ui import get_ui


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
        # Stop at the action so a literal "--" reaches the sketch untouched.
        "allow_interspersed_args": False,
    },
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
def cli(argv: tuple[str, ...]) -> None:
    """rp5 - run Ruby-Processing sketches.

    ARGV is `[choice] path/to/sketch [sketch args...]`; run `rp5 --help`
    for the list of choices.
    """
    ui = get_ui(
        os.environ.get("RP5_UI", "auto"),
        no_color="NO_COLOR" in os.environ,
        ascii_only=_parse_bool(os.environ.get("RP5_ASCII")),
    )
    options = parse_options(list(argv))

    try:
        config = Rp5Config.load()
        result = Runner(config, ui).execute(options)
    except Rp5Error as exc:
        ui.err(exc.message)
        if exc.hint:
            ui.info(exc.hint)
        sys.exit(1)

    if not isinstance(result, Launch):
        sys.exit(result)

    try:
        handoff(result)
    except FileNotFoundError:
        ui.err(f"{result.program} not found in PATH")
        if result.program == "jruby":
            ui.info("Install jruby or pass --nojruby to use jruby-complete")
        sys.exit(1)
    except OSError as exc:
        ui.err(f"Could not start {result.program}: {exc}")
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli(prog_name="rp5")


if __name__ == "__main__":
    main()
