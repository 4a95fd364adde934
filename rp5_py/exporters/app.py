"""Export a sketch as a standalone application bundle."""

from __future__ import annotations

import shutil
from pathlib import Path
from string import Template
from typing import TYPE_CHECKING

from rp5_py.errors import MissingResourceError

if TYPE_CHECKING:
    from rp5_py.config import Rp5Config
    from rp5_py.ui.base import UI

# Sketch folders carried into the bundle alongside the main file.
SKETCH_FOLDERS = ("data", "library")


def app_title(sketch: Path) -> str:
    """``my_cool_sketch.rb`` -> ``My Cool Sketch``."""
    words = sketch.stem.replace("-", "_").split("_")
    return " ".join(word.capitalize() for word in words if word)


def export_app(sketch: str, config: Rp5Config, ui: UI) -> int:
    """Build ``<Title>.app`` next to the sketch from the bundled template.

    Raises:
        MissingResourceError: if the sketch or the template is missing.
    """
    main_file = Path(sketch)
    if not main_file.is_file():
        raise MissingResourceError(f"Couldn't find: {sketch}")
    template = config.app_template_dir
    if not template.is_dir():
        raise MissingResourceError(
            f"{template} does not exist",
            hint="Set RP5_ROOT to a complete ruby-processing installation",
        )

    title = app_title(main_file)
    app_dir = main_file.parent / f"{title}.app"
    if app_dir.exists():
        ui.info(f"Replacing {app_dir}")
        shutil.rmtree(app_dir)

    shutil.copytree(template, app_dir)
    java_dir = app_dir / "Contents" / "Java"
    java_dir.mkdir(parents=True, exist_ok=True)
    shutil.copy2(main_file, java_dir / main_file.name)
    for folder in SKETCH_FOLDERS:
        source = main_file.parent / folder
        if source.is_dir():
            shutil.copytree(source, java_dir / folder)

    plist = app_dir / "Contents" / "Info.plist"
    if plist.exists():
        rendered = Template(plist.read_text()).safe_substitute(
            title=title,
            main_file=main_file.name,
        )
        plist.write_text(rendered)

    ui.ok(f"Exported {app_dir}")
    return 0
