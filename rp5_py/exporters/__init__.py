"""Sketch generators: new sketch boilerplate and application bundles."""

from rp5_py.exporters.app import export_app
from rp5_py.exporters.creator import create_sketch

__all__ = ["create_sketch", "export_app"]
