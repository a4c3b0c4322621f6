"""
Coverage module.

- explorer.py: Recursive classification of geohash cells against a country
- report.py: Result types and per-depth views
"""

from .explorer import Relation, classify, explore, find_country_geohashes
from .report import (
    GeohashStatus,
    GeohashResult,
    CountryGeohashResult,
    build_result,
    summarize_by_depth,
    format_for_display,
    to_feature_collection,
)
