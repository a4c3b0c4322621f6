from __future__ import annotations

from geohash_coverage.coverage import (
    GeohashResult,
    GeohashStatus,
    build_result,
    format_for_display,
    summarize_by_depth,
    to_feature_collection,
)

C = GeohashStatus.CONTAINED
O = GeohashStatus.OVERLAPPING


def _sample():
    cells = [
        GeohashResult("u", O, 1),
        GeohashResult("uz", O, 2),
        GeohashResult("ub", C, 2),
        GeohashResult("s", O, 1),
        GeohashResult("sb", O, 2),
        GeohashResult("s0", C, 2),
    ]
    return build_result("XX", "Example", cells, 1.5)


def test_build_result_partitions_cells() -> None:
    result = _sample()

    assert result.total_count == 6
    assert len(result) == 6
    assert result.fully_contained == ("ub", "s0")
    assert result.overlapping == ("u", "uz", "s", "sb")
    assert result.max_depth == 2
    assert result.compute_time_ms == 1.5
    assert [c.geohash for c in result] == ["u", "uz", "ub", "s", "sb", "s0"]


def test_build_result_empty() -> None:
    result = build_result("ZZ", "Nowhere", [], 0.0)
    assert result.total_count == 0
    assert result.max_depth == 0


def test_summarize_by_depth() -> None:
    assert summarize_by_depth(_sample()) == {
        1: {"contained": 0, "overlapping": 2},
        2: {"contained": 2, "overlapping": 2},
    }


def test_format_for_display_sorts_within_depth() -> None:
    assert format_for_display(_sample()) == [
        {"depth": 1, "contained": [], "overlapping": ["s", "u"]},
        {"depth": 2, "contained": ["s0", "ub"], "overlapping": ["sb", "uz"]},
    ]


def test_to_dict_uses_wire_keys() -> None:
    data = _sample().to_dict()

    assert data["countryCode"] == "XX"
    assert data["countryName"] == "Example"
    assert data["fullyContained"] == ["ub", "s0"]
    assert data["overlapping"] == ["u", "uz", "s", "sb"]
    assert data["totalCount"] == 6
    assert data["maxDepth"] == 2
    assert data["computeTimeMs"] == 1.5
    assert data["geohashes"][2] == {"geohash": "ub", "status": "contained", "depth": 2}


def test_to_feature_collection() -> None:
    fc = to_feature_collection(_sample())

    assert fc["type"] == "FeatureCollection"
    assert fc["properties"] == {"countryCode": "XX", "countryName": "Example"}
    assert len(fc["features"]) == 6
    first = fc["features"][0]
    assert first["properties"] == {"geohash": "u", "status": "overlapping", "depth": 1}
    assert first["geometry"]["type"] == "Polygon"
