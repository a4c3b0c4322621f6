"""
Country Boundaries

Resolves GeoJSON geometries into flat lists of outer rings, and loads
country boundaries from GeoJSON files or URLs.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from .geometry import Ring
from ..config import (
    HTTP_TIMEOUT,
    HTTP_USER_AGENT,
    COUNTRY_CODE_KEYS,
    COUNTRY_NAME_KEYS,
)
from ..exceptions import BoundaryError


@dataclass
class CountryBoundary:
    """A country's identity and its GeoJSON geometry."""
    country_code: str
    country_name: str
    geometry: Optional[Dict[str, Any]]


def _is_vertex(vertex: Any) -> bool:
    return (isinstance(vertex, (list, tuple)) and len(vertex) >= 2 and
            all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in vertex[:2]))


def _is_ring(ring: Any) -> bool:
    """A list of vertices, each holding at least numeric lng and lat."""
    return isinstance(ring, list) and all(_is_vertex(v) for v in ring)


def extract_rings(geometry: Any) -> List[Ring]:
    """
    Extract the outer rings of a Polygon or MultiPolygon geometry.

    Holes are ignored. Rings with a vertex that is not at least two
    numbers are dropped. Any other geometry type, or malformed input,
    yields an empty list; this never raises.

    Args:
        geometry: GeoJSON geometry dict

    Returns:
        List of rings, each a list of [lng, lat] vertices
    """
    if not isinstance(geometry, dict):
        return []

    geom_type = geometry.get("type")
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list):
        return []

    rings = []
    if geom_type == "Polygon":
        if coordinates and _is_ring(coordinates[0]):
            rings.append(coordinates[0])
    elif geom_type == "MultiPolygon":
        for polygon in coordinates:
            if isinstance(polygon, list) and polygon and _is_ring(polygon[0]):
                rings.append(polygon[0])

    return rings


def _first_property(properties: Dict[str, Any], keys) -> Optional[str]:
    for key in keys:
        value = properties.get(key)
        if value not in (None, "", "-99"):
            return str(value)
    return None


def _feature_to_boundary(feature: Dict[str, Any]) -> CountryBoundary:
    properties = feature.get("properties") or {}
    code = _first_property(properties, COUNTRY_CODE_KEYS)
    if code is None and feature.get("id") is not None:
        code = str(feature["id"])
    name = _first_property(properties, COUNTRY_NAME_KEYS) or code

    return CountryBoundary(
        country_code=code or "",
        country_name=name or "",
        geometry=feature.get("geometry"),
    )


def parse_boundaries(data: Any) -> List[CountryBoundary]:
    """
    Convert a GeoJSON FeatureCollection (or single Feature) to boundaries.

    Raises:
        BoundaryError: If the document is not a Feature or FeatureCollection
    """
    if not isinstance(data, dict):
        raise BoundaryError("GeoJSON document must be an object")

    doc_type = data.get("type")
    if doc_type == "FeatureCollection":
        features = data.get("features") or []
    elif doc_type == "Feature":
        features = [data]
    else:
        raise BoundaryError(f"Unsupported GeoJSON type: {doc_type!r}")

    return [_feature_to_boundary(f) for f in features if isinstance(f, dict)]


def _fetch_json(url: str, timeout: float) -> Any:
    headers = {"User-Agent": HTTP_USER_AGENT}
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPError as e:
        raise BoundaryError(f"Failed to fetch boundaries from {url}: {e}") from e
    except ValueError as e:
        raise BoundaryError(f"Invalid JSON from {url}: {e}") from e


def _read_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise BoundaryError(f"Cannot read boundary file {path}: {e}") from e
    except ValueError as e:
        raise BoundaryError(f"Invalid JSON in {path}: {e}") from e


def load_boundaries(source: str, timeout: float = None) -> List[CountryBoundary]:
    """
    Load country boundaries from a GeoJSON file path or http(s) URL.

    Args:
        source: Local path or URL of a GeoJSON FeatureCollection
        timeout: HTTP timeout in seconds (defaults to HTTP_TIMEOUT)

    Returns:
        List of CountryBoundary objects, in document order
    """
    if source.startswith(("http://", "https://")):
        data = _fetch_json(source, timeout if timeout is not None else HTTP_TIMEOUT)
    else:
        data = _read_json(source)

    return parse_boundaries(data)


def find_boundary(boundaries: List[CountryBoundary], query: str) -> CountryBoundary:
    """
    Find a boundary by country code or name (case-insensitive).

    Raises:
        BoundaryError: If no boundary matches
    """
    needle = query.strip().lower()
    for boundary in boundaries:
        if boundary.country_code.lower() == needle:
            return boundary
    for boundary in boundaries:
        if boundary.country_name.lower() == needle:
            return boundary

    raise BoundaryError(f"No boundary found for: {query}")
