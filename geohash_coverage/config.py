"""
Default configuration for the geohash coverage engine.

Values can be overridden with environment variables or through
CoverageConfig (see config_manager.py).
"""

import os

# Unparseable env vars: name -> message. The default is used instead and
# CoverageConfig.validate() reports them.
ENV_ERRORS = {}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        ENV_ERRORS[name] = f"{name} must be an integer, got {raw!r}"
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        ENV_ERRORS[name] = f"{name} must be a number, got {raw!r}"
        return default


# Geohash alphabet (no a, i, l, o)
BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

# Coverage depth
# 3 matches the precision used for location channels
DEFAULT_MAX_DEPTH = _env_int("GEOHASH_DEFAULT_DEPTH", 3)
# Hard ceiling; each level multiplies the worst case by 32
MAX_ALLOWED_DEPTH = _env_int("GEOHASH_MAX_DEPTH", 6)

# Encoding
DEFAULT_ENCODE_PRECISION = 5

# API Server
API_HOST = os.environ.get("GEOHASH_API_HOST", "0.0.0.0")
API_PORT = _env_int("GEOHASH_API_PORT", 8000)
API_BASE_URL = f"http://localhost:{API_PORT}"

# Boundary sources
HTTP_TIMEOUT = _env_float("GEOHASH_HTTP_TIMEOUT", 30.0)
HTTP_USER_AGENT = "GeohashCoverage/1.0"

# GeoJSON property keys tried in order when reading country features
COUNTRY_CODE_KEYS = ("ISO_A2", "iso_a2", "ISO3166-1-Alpha-2", "code", "id")
COUNTRY_NAME_KEYS = ("NAME", "name", "ADMIN", "admin")
