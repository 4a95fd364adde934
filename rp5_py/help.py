"""Help and version text shown by rp5."""

from __future__ import annotations

from rp5_py import __version__

HELP_MESSAGE = f"""\
Version: {__version__}

Ruby-Processing is a little shim between Processing and JRuby that helps
you create sketches of code art.

Usage:
  rp5 [choice] path/to/sketch

choice:
  run:                   run sketch once
  watch:                 watch for changes on the file and relaunch it on the fly
  live:                  launch sketch and give an interactive IRB shell
  create [width height]: create a new sketch
  app:                   create an application version of the sketch
  setup:                 check setup, install jruby-complete, unpack samples

Common options:
  --nojruby:  use jruby-complete in place of an installed version of jruby
              (set [JRUBY: 'false'] in .rp5rc to make using jruby-complete default)

Examples:
  rp5 setup unpack_samples
  rp5 run rp_samples/contributed/jwishy.rb
  rp5 create some_new_sketch 640 480
  rp5 create some_new_sketch --p3d 640 480
  rp5 watch some_new_sketch.rb

Everything Else:
  http://wiki.github.com/jashkenas/ruby-processing
"""


def version_line() -> str:
    return f"Ruby-Processing version {__version__}"
