"""
Coverage Explorer

Finds the geohash cells that cover a country by depth-first subdivision.

Each prefix is classified against the country's rings:
- outside: dropped, children are never visited
- contained: reported, children are never visited
- overlapping: reported, children visited until max_depth

Descendant cells always lie inside their parent's box, so pruning on
outside/contained never loses cells.
"""

import time
from enum import Enum
from typing import Any, List, Sequence

from .report import CountryGeohashResult, GeohashResult, GeohashStatus, build_result
from ..config import BASE32, DEFAULT_MAX_DEPTH
from ..geo.boundaries import extract_rings
from ..geo.codec import BoundingBox, decode
from ..geo.geometry import (
    Ring,
    rectangle_contained_in_polygon,
    rectangle_overlaps_polygon,
)


class Relation(str, Enum):
    OUTSIDE = "outside"
    OVERLAPPING = "overlapping"
    CONTAINED = "contained"


def classify(box: BoundingBox, rings: Sequence[Ring]) -> Relation:
    """
    Classify a cell against a set of rings.

    Contained if any single ring swallows the box. Otherwise overlapping
    if the box overlaps any ring or holds any ring vertex (a cell larger
    than the whole country). Otherwise outside.
    """
    any_overlap = False

    for ring in rings:
        if rectangle_contained_in_polygon(box, ring):
            return Relation.CONTAINED
        if not any_overlap and rectangle_overlaps_polygon(box, ring):
            any_overlap = True

    if not any_overlap:
        any_overlap = any(
            box.contains_point(vertex[0], vertex[1])
            for ring in rings
            for vertex in ring
        )

    return Relation.OVERLAPPING if any_overlap else Relation.OUTSIDE


def explore(rings: Sequence[Ring], max_depth: int) -> List[GeohashResult]:
    """
    Walk the geohash tree and collect reported cells.

    Output order is depth-first pre-order with children in alphabet
    order, which keeps results deterministic.

    Args:
        rings: Outer rings of the country
        max_depth: Deepest prefix length to visit (>= 1)

    Returns:
        List of GeohashResult in exploration order
    """
    results: List[GeohashResult] = []
    if not rings:
        return results

    # LIFO worklist; push in reverse so pops follow alphabet order
    stack = [(c, 1) for c in reversed(BASE32)]

    while stack:
        prefix, depth = stack.pop()
        relation = classify(decode(prefix), rings)

        if relation is Relation.OUTSIDE:
            continue

        if relation is Relation.CONTAINED:
            results.append(GeohashResult(prefix, GeohashStatus.CONTAINED, depth))
            continue

        results.append(GeohashResult(prefix, GeohashStatus.OVERLAPPING, depth))
        if depth < max_depth:
            stack.extend((prefix + c, depth + 1) for c in reversed(BASE32))

    return results


def find_country_geohashes(
    geometry: Any,
    country_code: str,
    country_name: str,
    max_depth: int = None,
) -> CountryGeohashResult:
    """
    Find all geohashes that are inside or overlap a country.

    Geometry other than Polygon/MultiPolygon, or malformed geometry,
    gives an empty result rather than an error.

    Args:
        geometry: GeoJSON geometry of the country
        country_code: Echoed back in the result
        country_name: Echoed back in the result
        max_depth: Maximum geohash length (default DEFAULT_MAX_DEPTH)

    Returns:
        CountryGeohashResult

    Raises:
        ValueError: If max_depth < 1
    """
    if max_depth is None:
        max_depth = DEFAULT_MAX_DEPTH
    if max_depth < 1:
        raise ValueError(f"max_depth must be >= 1, got {max_depth}")

    start = time.perf_counter()

    rings = extract_rings(geometry)
    results = explore(rings, max_depth)

    compute_time_ms = (time.perf_counter() - start) * 1000.0
    return build_result(country_code, country_name, results, compute_time_ms)
