"""Pytest fixtures for rp5_py tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from rp5_py.config import Rp5Config
from rp5_py.ui.plain import PlainUI


@pytest.fixture
def rp5_root(tmp_path: Path) -> Path:
    """Create a ruby-processing installation with the bundled jar and runners."""
    root = tmp_path / "rp5"
    runners = root / "lib" / "ruby-processing" / "runners"
    runners.mkdir(parents=True)
    for starter in ("run.rb", "watch.rb", "live.rb"):
        (runners / starter).write_text("# starter\n")

    jar = root / "lib" / "ruby" / "jruby-complete.jar"
    jar.parent.mkdir(parents=True)
    jar.write_bytes(b"PK")

    samples = root / "samples" / "contributed"
    samples.mkdir(parents=True)
    (samples / "jwishy.rb").write_text("def setup\nend\n")

    (root / "vendors").mkdir()
    return root


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Empty home directory (no ~/.rp5rc)."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def config(rp5_root: Path, home: Path) -> Rp5Config:
    return Rp5Config(rp5_root=rp5_root, home=home)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def ui(output: io.StringIO) -> PlainUI:
    """Colorless UI writing into ``output``."""
    return PlainUI(no_color=True, file=output)


@pytest.fixture
def sketch(tmp_path: Path) -> Path:
    """A sketch file in its own directory."""
    sketch_dir = tmp_path / "sketches" / "wishy"
    sketch_dir.mkdir(parents=True)
    path = sketch_dir / "wishy.rb"
    path.write_text("def setup\n  size 200, 200\nend\n")
    return path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear rp5-related environment variables."""
    for var in ("RP5_ROOT", "RP5_UI", "NO_COLOR", "RP5_ASCII"):
        monkeypatch.delenv(var, raising=False)
