"""
Package entry point.

Allows running: python -m geohash_coverage countries.geojson FR
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
