from __future__ import annotations

import pytest

from geohash_coverage import config, server
from geohash_coverage.config_manager import CoverageConfig
from geohash_coverage.coverage import explorer
from geohash_coverage.geo import boundaries
from geohash_coverage.exceptions import ConfigurationError


def test_defaults_come_from_config_module() -> None:
    cfg = CoverageConfig()
    assert cfg.default_depth == config.DEFAULT_MAX_DEPTH
    assert cfg.max_allowed_depth == config.MAX_ALLOWED_DEPTH
    assert cfg.server_port == config.API_PORT
    assert cfg.http_timeout == config.HTTP_TIMEOUT


def test_explicit_values_win() -> None:
    cfg = CoverageConfig(default_depth=2, max_allowed_depth=4, server_port=9000, http_timeout=1.0)
    assert (cfg.default_depth, cfg.max_allowed_depth, cfg.server_port, cfg.http_timeout) == (2, 4, 9000, 1.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_depth": 0},
        {"default_depth": 5, "max_allowed_depth": 4},
        {"max_allowed_depth": 0, "default_depth": 1},
        {"server_port": 70000},
        {"http_timeout": 0},
    ],
)
def test_invalid_values_raise(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        CoverageConfig(**kwargs)


def test_check_depth() -> None:
    cfg = CoverageConfig(default_depth=2, max_allowed_depth=4)
    assert cfg.check_depth(None) == 2
    assert cfg.check_depth(4) == 4
    with pytest.raises(ConfigurationError):
        cfg.check_depth(5)
    with pytest.raises(ConfigurationError):
        cfg.check_depth(0)


def test_verbose_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GEOHASH_VERBOSE", "true")
    assert CoverageConfig().verbose is True


def test_env_int_parsing(monkeypatch) -> None:
    monkeypatch.setenv("GEOHASH_TEST_INT", "7")
    assert config._env_int("GEOHASH_TEST_INT", 1) == 7
    monkeypatch.delenv("GEOHASH_TEST_INT")
    assert config._env_int("GEOHASH_TEST_INT", 1) == 1
    assert config.ENV_ERRORS == {}


def test_bad_env_value_falls_back_until_validated(monkeypatch) -> None:
    monkeypatch.setenv("GEOHASH_TEST_INT", "seven")
    monkeypatch.setenv("GEOHASH_TEST_FLOAT", "soon")

    # Parsing never raises, so importing the package cannot fail
    assert config._env_int("GEOHASH_TEST_INT", 1) == 1
    assert config._env_float("GEOHASH_TEST_FLOAT", 2.5) == 2.5
    assert set(config.ENV_ERRORS) == {"GEOHASH_TEST_INT", "GEOHASH_TEST_FLOAT"}

    with pytest.raises(ConfigurationError, match="GEOHASH_TEST_INT must be an integer"):
        CoverageConfig()


def test_apply_patches_consumer_modules() -> None:
    CoverageConfig(default_depth=2, max_allowed_depth=5, server_port=9123).apply()

    assert config.DEFAULT_MAX_DEPTH == 2
    assert config.API_BASE_URL == "http://localhost:9123"
    assert explorer.DEFAULT_MAX_DEPTH == 2
    assert server.API_PORT == 9123
    assert boundaries.HTTP_TIMEOUT == config.HTTP_TIMEOUT
