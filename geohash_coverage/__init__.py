"""
Geohash Coverage

Finds the minimal set of geohash cells covering a country boundary,
split into fully contained cells and overlapping (border) cells.

Quick start (library usage):
    from geohash_coverage import find_country_geohashes

    result = find_country_geohashes(geometry, "FR", "France", max_depth=3)
    print(result.fully_contained, result.overlapping)

Or with caching and configuration:
    from geohash_coverage import CoverageFinder

    finder = CoverageFinder(default_depth=4)
    result = finder.find(geometry, "FR", "France")
"""

from .coverage import (
    CountryGeohashResult,
    GeohashResult,
    GeohashStatus,
    find_country_geohashes,
    summarize_by_depth,
    format_for_display,
)
from .finder import CoverageFinder
from .geo.codec import decode

__version__ = "1.0.0"
__all__ = [
    "CoverageFinder",
    "CountryGeohashResult",
    "GeohashResult",
    "GeohashStatus",
    "find_country_geohashes",
    "summarize_by_depth",
    "format_for_display",
    "decode",
]
