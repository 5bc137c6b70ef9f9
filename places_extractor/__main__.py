"""
Package entry point.

Allows running: python -m places_extractor "coffee"
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
