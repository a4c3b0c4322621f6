from __future__ import annotations

import pytest

from geohash_coverage import config, server
from geohash_coverage.coverage import explorer
from geohash_coverage.geo import boundaries

_CONFIG_ATTRS = ("DEFAULT_MAX_DEPTH", "MAX_ALLOWED_DEPTH", "API_PORT", "API_BASE_URL", "HTTP_TIMEOUT")


# (lng, lat) square from (-1, -1) to (46, 46); swallows the whole "s" cell
BIG_SQUARE = [[-1.0, -1.0], [46.0, -1.0], [46.0, 46.0], [-1.0, 46.0], [-1.0, -1.0]]

# Square from the predicate examples
SQUARE_30 = [(0.0, 0.0), (30.0, 0.0), (30.0, 30.0), (0.0, 30.0)]


@pytest.fixture
def big_square_polygon() -> dict:
    return {"type": "Polygon", "coordinates": [BIG_SQUARE]}


@pytest.fixture
def small_triangle_polygon() -> dict:
    return {"type": "Polygon", "coordinates": [[[10.0, 10.0], [11.0, 10.0], [11.0, 11.0], [10.0, 10.0]]]}


@pytest.fixture
def countries_geojson() -> dict:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"ISO_A2": "SQ", "NAME": "Squareland"},
                "geometry": {"type": "Polygon", "coordinates": [BIG_SQUARE]},
            },
            {
                "type": "Feature",
                "id": "TR",
                "properties": {"name": "Triangle"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[10.0, 10.0], [11.0, 10.0], [11.0, 11.0], [10.0, 10.0]]],
                },
            },
        ],
    }


@pytest.fixture(autouse=True)
def restore_config(monkeypatch):
    """CoverageFinder applies its config to module globals; undo that after each test."""
    for mod in (config, explorer, boundaries, server):
        for attr in _CONFIG_ATTRS:
            if hasattr(mod, attr):
                monkeypatch.setattr(mod, attr, getattr(mod, attr))
    monkeypatch.setattr(config, "ENV_ERRORS", {})
