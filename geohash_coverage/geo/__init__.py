"""
Geographic utilities module.

- codec.py: Geohash decoding/encoding and bounding boxes
- geometry.py: Point, segment, rectangle and ring predicates
- boundaries.py: GeoJSON ring extraction and country boundary loading
"""

from .codec import BoundingBox, decode, decode_center, encode, is_valid_geohash, children
from .geometry import (
    point_in_polygon,
    segments_intersect,
    rectangle_overlaps_polygon,
    rectangle_contained_in_polygon,
)
from .boundaries import CountryBoundary, extract_rings, load_boundaries, find_boundary
