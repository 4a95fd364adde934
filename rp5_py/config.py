"""Configuration handling for rp5."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from rp5_py.errors import ConfigError
from rp5_py.hostos import Platform

RC_FILENAME = ".rp5rc"
JRUBY_COMPLETE = Path("lib") / "ruby" / "jruby-complete.jar"
MAC_PROCESSING_ROOT = "/Applications/Processing.app/Contents/Java"
PROCESSING_VERSION = "processing-2.2.1"


def _parse_bool(value: str | None) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return False
    return bool(re.match(r"^(1|true|yes)$", value.lower()))


def _default_rp5_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _as_setting(value: Any) -> str | None:
    """Normalise a YAML scalar to the string form the launcher compares against."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Rp5Config:
    """Settings for one rp5 invocation.

    ``processing_root``, ``jruby`` and ``java_args`` come from ``~/.rp5rc``;
    ``rp5_root`` is the installation holding the runtime jar, the starter
    scripts, the samples and the application template.
    """

    processing_root: str | None = None
    jruby: str = "true"
    java_args: str | None = None
    rp5_root: Path = field(default_factory=_default_rp5_root)
    home: Path = field(default_factory=Path.home)

    @property
    def rc_path(self) -> Path:
        return self.home / RC_FILENAME

    @property
    def rc_exists(self) -> bool:
        return self.rc_path.exists()

    @property
    def jruby_disabled(self) -> bool:
        """True when the rc file sets ``JRUBY: 'false'``."""
        return self.jruby.strip().lower() == "false"

    @property
    def jruby_complete(self) -> Path:
        return self.rp5_root / JRUBY_COMPLETE

    @property
    def samples_dir(self) -> Path:
        return self.rp5_root / "samples"

    @property
    def vendors_dir(self) -> Path:
        return self.rp5_root / "vendors"

    @property
    def runners_dir(self) -> Path:
        return self.rp5_root / "lib" / "ruby-processing" / "runners"

    @property
    def app_template_dir(self) -> Path:
        return self.rp5_root / "lib" / "templates" / "application"

    @classmethod
    def load(cls, home: Path | None = None, rp5_root: Path | None = None) -> Rp5Config:
        """Load configuration from ``~/.rp5rc`` and the environment.

        ``RP5_ROOT`` overrides the installation root when ``rp5_root`` is not
        given. A missing rc file leaves the defaults in place.
        """
        if home is None:
            home = Path.home()
        if rp5_root is None:
            env_root = os.environ.get("RP5_ROOT")
            rp5_root = Path(env_root) if env_root else _default_rp5_root()

        config = cls(rp5_root=rp5_root, home=home)
        if not config.rc_exists:
            return config

        data = _read_rc(config.rc_path)
        config.processing_root = _as_setting(data.get("PROCESSING_ROOT"))
        jruby = _as_setting(data.get("JRUBY"))
        if jruby is not None:
            config.jruby = jruby
        config.java_args = _as_setting(data.get("java_args"))
        return config

    def write_default(self, platform: Platform) -> Path:
        """Write a best-guess rc file and return its path."""
        if platform == Platform.MACOSX:
            root = MAC_PROCESSING_ROOT
        else:
            root = str(self.home / PROCESSING_VERSION)
        data = {"PROCESSING_ROOT": root, "JRUBY": "true"}
        with open(self.rc_path, "w", encoding="utf-8") as handle:
            yaml.safe_dump(data, handle, default_flow_style=False)
        self.processing_root = root
        self.jruby = "true"
        return self.rc_path


def _read_rc(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a YAML mapping")
    return data
