"""Create a fresh sketch with the setup/draw boilerplate filled in."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rp5_py.ui.base import UI

CREATE_USAGE = "Usage: rp5 create <sketch_to_generate> [width height] [--p3d]"
DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 200

SKETCH_TEMPLATE = """\
def setup
  size {size}
end

def draw

end
"""


def sketch_source(width: int, height: int, p3d: bool = False) -> str:
    """Return the source of an empty sketch of the given size."""
    size = f"{width}, {height}, P3D" if p3d else f"{width}, {height}"
    return SKETCH_TEMPLATE.format(size=size)


def _parse_size(args: list[str]) -> tuple[int, int]:
    width = int(args[0]) if len(args) > 0 else DEFAULT_WIDTH
    height = int(args[1]) if len(args) > 1 else DEFAULT_HEIGHT
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    return width, height


def create_sketch(
    path: str,
    args: list[str],
    p3d: bool,
    ui: UI,
    cwd: Path | None = None,
) -> int:
    """Write ``<path>.rb`` with an empty sketch.

    Returns:
        Exit code (0=created, 1=bad size or file already exists)
    """
    try:
        width, height = _parse_size(args)
    except ValueError:
        ui.err(f"Invalid sketch size: {' '.join(args)}")
        ui.info(CREATE_USAGE)
        return 1

    target = Path(path)
    if target.suffix != ".rb":
        target = target.with_name(f"{target.name}.rb")
    if not target.is_absolute():
        target = (cwd or Path.cwd()) / target

    if target.exists():
        ui.err(f"That file already exists: {target}")
        return 1

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(sketch_source(width, height, p3d))
    ui.ok(f"Created {target}")
    return 0
