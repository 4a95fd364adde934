"""rp5 - command-line launcher for Ruby-Processing sketches."""

__version__ = "2.6.4"
