"""Setup command for rp5 - check, install and unpack samples."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import click

from rp5_py.help import version_line
from rp5_py.hostos import Platform, detect_platform

if TYPE_CHECKING:
    from rp5_py.config import Rp5Config
    from rp5_py.ui.base import UI

SETUP_USAGE = "Usage: rp5 setup [check | install | unpack_samples]"
SAMPLES_DIRNAME = "rp_samples"


def run_setup(
    choice: str,
    config: Rp5Config,
    ui: UI,
    platform_fn: Callable[[], Platform] = detect_platform,
    cwd: Path | None = None,
) -> int:
    """Run one of the setup sub-commands.

    Args:
        choice: Sub-command; matched by substring like the rest of rp5
        config: Loaded configuration
        ui: UI for warnings and errors
        platform_fn: Platform lookup, used only when writing a default rc file
        cwd: Destination for unpacked samples (default: current directory)

    Returns:
        Exit code (0=success, 1=install step failed)
    """
    if "check" in choice:
        check(config)
        return 0
    if "install" in choice:
        return install(config, ui, platform_fn)
    if "unpack_samples" in choice:
        unpack_samples(config, ui, cwd or Path.cwd())
        return 0
    click.echo(SETUP_USAGE)
    return 0


def check(config: Rp5Config) -> None:
    """Report the installation state without changing anything."""
    click.echo(version_line())
    if config.rc_exists and config.processing_root is not None:
        click.echo(f"  PROCESSING_ROOT = {config.processing_root}")
    else:
        click.echo("  PROCESSING_ROOT = Not Set!!!")
    click.echo(f"  JRUBY = {config.jruby}")
    installed = "true" if config.jruby_complete.exists() else "false"
    click.echo(f"  jruby-complete installed = {installed}")


def install(
    config: Rp5Config,
    ui: UI,
    platform_fn: Callable[[], Platform] = detect_platform,
) -> int:
    """Fetch vendored jars with rake, then write ~/.rp5rc if it is missing."""
    exit_code = 0
    ui.info(f"Running rake in {config.vendors_dir}")
    try:
        result = subprocess.run(["rake"], cwd=config.vendors_dir, check=False)
    except (FileNotFoundError, NotADirectoryError) as exc:
        ui.err(f"Could not run rake: {exc}")
        exit_code = 1
    else:
        if result.returncode != 0:
            ui.err(f"rake exited with status {result.returncode}")
            exit_code = 1

    if not config.rc_exists:
        path = config.write_default(platform_fn())
        ui.ok(f"Wrote {path}")
        ui.warn("PROCESSING_ROOT set optimistically, run check to confirm")
    return exit_code


def unpack_samples(config: Rp5Config, ui: UI, cwd: Path) -> Path:
    """Copy the bundled samples into ``<cwd>/rp_samples``."""
    target = cwd / SAMPLES_DIRNAME
    shutil.copytree(config.samples_dir, target)
    ui.ok(f"Samples unpacked to {target}")
    return target
