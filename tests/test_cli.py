from __future__ import annotations

import json

import pytest

from geohash_coverage.cli import main
from geohash_coverage.geo import boundaries


@pytest.fixture
def countries_file(tmp_path, countries_geojson) -> str:
    path = tmp_path / "countries.geojson"
    path.write_text(json.dumps(countries_geojson), encoding="utf-8")
    return str(path)


def test_cli_writes_result_json(tmp_path, countries_file) -> None:
    out = tmp_path / "out.json"
    code = main([countries_file, "SQ", "--depth", "1", "-o", str(out), "-q"])

    assert code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["countryCode"] == "SQ"
    assert data["fullyContained"] == ["s"]
    assert data["totalCount"] == 9


def test_cli_prints_to_stdout(countries_file, capsys) -> None:
    code = main([countries_file, "Triangle", "-d", "2"])

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["countryCode"] == "TR"
    assert data["maxDepth"] == 2


def test_cli_geojson_output(tmp_path, countries_file) -> None:
    out = tmp_path / "cells.geojson"
    assert main([countries_file, "SQ", "-d", "1", "--geojson", "-o", str(out), "-q"]) == 0

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["type"] == "FeatureCollection"
    assert len(data["features"]) == 9


def test_cli_summary_output(countries_file, capsys) -> None:
    assert main([countries_file, "SQ", "-d", "1", "--summary"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["summary"] == {"1": {"contained": 1, "overlapping": 8}}
    assert data["byDepth"][0]["contained"] == ["s"]


def test_cli_unknown_country(countries_file, capsys) -> None:
    assert main([countries_file, "Atlantis"]) == 1
    assert "No boundary found" in capsys.readouterr().err


def test_cli_depth_out_of_range(countries_file, capsys) -> None:
    assert main([countries_file, "SQ", "-d", "99"]) == 1
    assert "max_depth" in capsys.readouterr().err


def test_cli_passes_timeout_to_url_sources(monkeypatch, countries_geojson, capsys) -> None:
    calls = []

    def fake_fetch(url: str, timeout: float):
        calls.append((url, timeout))
        return countries_geojson

    monkeypatch.setattr(boundaries, "_fetch_json", fake_fetch)

    assert main(["https://example.org/countries.geojson", "SQ", "-d", "1", "--timeout", "2.5"]) == 0
    assert calls == [("https://example.org/countries.geojson", 2.5)]
    assert json.loads(capsys.readouterr().out)["totalCount"] == 9
