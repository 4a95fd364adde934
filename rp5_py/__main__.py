"""Allow running rp5 as ``python -m rp5_py``."""

from rp5_py.cli import main

if __name__ == "__main__":
    main()
