"""
Configuration manager for library usage.

Provides a configuration object that bridges to the module-level
constants in config.py, so library users do not have to set
environment variables.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional

from . import config as _defaults
from .exceptions import ConfigurationError


@dataclass
class CoverageConfig:
    """Configuration for CoverageFinder.

    For every field: explicit arg > env vars (GEOHASH_*) > config.py defaults.

    Args:
        default_depth: Depth used when a call does not pass max_depth.
        max_allowed_depth: Upper bound accepted for max_depth.
        server_port: Port for the API server.
        http_timeout: Timeout (seconds) when fetching remote boundary files.
        verbose: Whether to print progress output.
    """

    default_depth: Optional[int] = None
    max_allowed_depth: Optional[int] = None
    server_port: Optional[int] = None
    http_timeout: Optional[float] = None
    verbose: bool = False

    def __post_init__(self):
        """Resolve unset fields from the environment-backed defaults and validate."""
        if self.default_depth is None:
            self.default_depth = _defaults.DEFAULT_MAX_DEPTH
        if self.max_allowed_depth is None:
            self.max_allowed_depth = _defaults.MAX_ALLOWED_DEPTH
        if self.server_port is None:
            self.server_port = _defaults.API_PORT
        if self.http_timeout is None:
            self.http_timeout = _defaults.HTTP_TIMEOUT
        if os.environ.get("GEOHASH_VERBOSE", "").lower() in ("1", "true", "yes"):
            self.verbose = True
        self.validate()

    def validate(self):
        if _defaults.ENV_ERRORS:
            raise ConfigurationError("; ".join(_defaults.ENV_ERRORS.values()))
        if self.max_allowed_depth < 1:
            raise ConfigurationError(
                f"max_allowed_depth must be >= 1, got {self.max_allowed_depth}"
            )
        if not 1 <= self.default_depth <= self.max_allowed_depth:
            raise ConfigurationError(
                f"default_depth must be between 1 and {self.max_allowed_depth}, "
                f"got {self.default_depth}"
            )
        if not 0 < self.server_port < 65536:
            raise ConfigurationError(f"server_port out of range: {self.server_port}")
        if self.http_timeout <= 0:
            raise ConfigurationError(f"http_timeout must be positive, got {self.http_timeout}")

    def check_depth(self, max_depth: Optional[int]) -> int:
        """Return max_depth (or the default) after checking it is in range."""
        depth = self.default_depth if max_depth is None else max_depth
        if not 1 <= depth <= self.max_allowed_depth:
            raise ConfigurationError(
                f"max_depth must be between 1 and {self.max_allowed_depth}, got {depth}"
            )
        return depth

    def apply(self):
        """Apply this configuration to the config module.

        Modules that did `from ..config import X` hold their own binding,
        so those are patched as well.
        """
        _defaults.DEFAULT_MAX_DEPTH = self.default_depth
        _defaults.MAX_ALLOWED_DEPTH = self.max_allowed_depth
        _defaults.API_PORT = self.server_port
        _defaults.API_BASE_URL = f"http://localhost:{self.server_port}"
        _defaults.HTTP_TIMEOUT = self.http_timeout

        _CONFIG_ATTRS = (
            'DEFAULT_MAX_DEPTH', 'MAX_ALLOWED_DEPTH', 'API_PORT',
            'API_BASE_URL', 'HTTP_TIMEOUT',
        )
        _CONSUMER_MODULES = (
            'geohash_coverage.coverage.explorer',
            'geohash_coverage.geo.boundaries',
            'geohash_coverage.server',
        )
        for mod_name in _CONSUMER_MODULES:
            mod = sys.modules.get(mod_name)
            if mod is None:
                continue
            for attr in _CONFIG_ATTRS:
                if hasattr(mod, attr):
                    setattr(mod, attr, getattr(_defaults, attr))
