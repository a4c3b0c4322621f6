"""
Coverage Report

Collects classified geohash cells into the result returned to callers,
plus per-depth views for display.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

from ..geo.codec import to_geojson_feature


class GeohashStatus(str, Enum):
    CONTAINED = "contained"
    OVERLAPPING = "overlapping"


@dataclass(frozen=True)
class GeohashResult:
    """One classified cell."""
    geohash: str
    status: GeohashStatus
    depth: int

    def to_dict(self) -> Dict[str, Any]:
        return {"geohash": self.geohash, "status": self.status.value, "depth": self.depth}


@dataclass(frozen=True)
class CountryGeohashResult:
    """Coverage of one country.

    Attributes:
        geohashes: Every reported cell, in exploration order.
        fully_contained: Cells entirely inside the country (not subdivided).
        overlapping: Border cells, reported at every depth they occur.
        max_depth: Deepest depth actually reported (0 when empty).
        compute_time_ms: Wall-clock time spent computing the coverage.
    """
    country_code: str
    country_name: str
    geohashes: Tuple[GeohashResult, ...]
    fully_contained: Tuple[str, ...]
    overlapping: Tuple[str, ...]
    total_count: int
    max_depth: int
    compute_time_ms: float

    def __len__(self):
        return self.total_count

    def __iter__(self):
        return iter(self.geohashes)

    def to_dict(self) -> Dict[str, Any]:
        """Return the result with the camelCase keys used by the UI layer."""
        return {
            "countryCode": self.country_code,
            "countryName": self.country_name,
            "geohashes": [g.to_dict() for g in self.geohashes],
            "fullyContained": list(self.fully_contained),
            "overlapping": list(self.overlapping),
            "totalCount": self.total_count,
            "maxDepth": self.max_depth,
            "computeTimeMs": self.compute_time_ms,
        }

    def __repr__(self):
        return (f"<CountryGeohashResult: {self.total_count} cells for "
                f"'{self.country_code}' (contained={len(self.fully_contained)}, "
                f"overlapping={len(self.overlapping)})>")


def build_result(
    country_code: str,
    country_name: str,
    results: Iterable[GeohashResult],
    compute_time_ms: float,
) -> CountryGeohashResult:
    """
    Partition classified cells into the final result.

    Args:
        country_code: Echoed back unchanged
        country_name: Echoed back unchanged
        results: Cells in exploration order
        compute_time_ms: Elapsed compute time

    Returns:
        CountryGeohashResult
    """
    results = tuple(results)
    contained = tuple(r.geohash for r in results if r.status is GeohashStatus.CONTAINED)
    overlapping = tuple(r.geohash for r in results if r.status is GeohashStatus.OVERLAPPING)

    return CountryGeohashResult(
        country_code=country_code,
        country_name=country_name,
        geohashes=results,
        fully_contained=contained,
        overlapping=overlapping,
        total_count=len(results),
        max_depth=max((r.depth for r in results), default=0),
        compute_time_ms=compute_time_ms,
    )


def summarize_by_depth(result: CountryGeohashResult) -> Dict[int, Dict[str, int]]:
    """Count contained and overlapping cells at each depth."""
    summary: Dict[int, Dict[str, int]] = {}

    for gh in result.geohashes:
        entry = summary.setdefault(gh.depth, {"contained": 0, "overlapping": 0})
        if gh.status is GeohashStatus.CONTAINED:
            entry["contained"] += 1
        else:
            entry["overlapping"] += 1

    return summary


def format_for_display(result: CountryGeohashResult) -> List[Dict[str, Any]]:
    """Group cells by depth (ascending), each list sorted lexicographically."""
    by_depth: Dict[int, Dict[str, List[str]]] = {}

    for gh in result.geohashes:
        entry = by_depth.setdefault(gh.depth, {"contained": [], "overlapping": []})
        entry[gh.status.value].append(gh.geohash)

    return [
        {
            "depth": depth,
            "contained": sorted(data["contained"]),
            "overlapping": sorted(data["overlapping"]),
        }
        for depth, data in sorted(by_depth.items())
    ]


def to_feature_collection(result: CountryGeohashResult) -> Dict[str, Any]:
    """Render every reported cell as a GeoJSON FeatureCollection."""
    features = [
        to_geojson_feature(gh.geohash, {"status": gh.status.value, "depth": gh.depth})
        for gh in result.geohashes
    ]
    return {
        "type": "FeatureCollection",
        "properties": {
            "countryCode": result.country_code,
            "countryName": result.country_name,
        },
        "features": features,
    }
