"""
CLI entry point for the number formatter.

Usage:
    python -m xvalues 4k 0x1000
    python -m xvalues --help
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
