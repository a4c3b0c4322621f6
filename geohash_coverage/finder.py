"""
CoverageFinder - High-level API for country geohash coverage.

Wraps the coverage engine with configuration and a per-country cache.

Usage:
    from geohash_coverage import CoverageFinder

    with CoverageFinder(default_depth=3) as finder:
        result = finder.find(geometry, "FR", "France")
        for cell in result:
            print(cell.geohash, cell.status.value)
"""

from typing import Any, Dict, List, Optional, Tuple

from .config_manager import CoverageConfig
from .coverage import CountryGeohashResult, find_country_geohashes, summarize_by_depth
from .geo.boundaries import CountryBoundary, load_boundaries


class CoverageFinder:
    """High-level interface for computing country coverage.

    Results are cached by (country_code, max_depth). The engine is
    deterministic, so cached results stay valid for the lifetime of the
    finder as long as a country code always maps to the same geometry.

    Note: Configuration is applied to shared module-level globals, so
    only one CoverageFinder should be configured at a time.

    Args:
        default_depth: Depth used when find() is called without max_depth.
        max_allowed_depth: Largest depth accepted.
        server_port: Port used by run_server().
        http_timeout: Timeout (seconds) for remote boundary files.
        cache: Whether to memoize results.
        verbose: Whether to print progress output.
    """

    def __init__(
        self,
        default_depth: Optional[int] = None,
        max_allowed_depth: Optional[int] = None,
        server_port: Optional[int] = None,
        http_timeout: Optional[float] = None,
        cache: bool = True,
        verbose: bool = False,
    ):
        self._config = CoverageConfig(
            default_depth=default_depth,
            max_allowed_depth=max_allowed_depth,
            server_port=server_port,
            http_timeout=http_timeout,
            verbose=verbose,
        )

        # Apply configuration to the global config module
        self._config.apply()

        self._use_cache = cache
        self._cache: Dict[Tuple[str, int], CountryGeohashResult] = {}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.clear_cache()
        return False

    @property
    def config(self) -> CoverageConfig:
        return self._config

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self):
        self._cache.clear()

    def find(
        self,
        geometry: Any,
        country_code: str,
        country_name: str,
        max_depth: Optional[int] = None,
    ) -> CountryGeohashResult:
        """Compute (or return the cached) coverage of one country.

        Raises:
            ConfigurationError: If max_depth is outside the allowed range.
        """
        depth = self._config.check_depth(max_depth)
        key = (country_code, depth)

        if self._use_cache and key in self._cache:
            return self._cache[key]

        if self._config.verbose:
            print(f"Computing coverage: {country_name} ({country_code}), depth {depth}")

        result = find_country_geohashes(geometry, country_code, country_name, depth)

        if self._config.verbose:
            print(f"  {result.total_count} cells "
                  f"({len(result.fully_contained)} contained, {len(result.overlapping)} overlapping) "
                  f"in {result.compute_time_ms:.1f}ms")
            for level, counts in sorted(summarize_by_depth(result).items()):
                print(f"    depth {level}: {counts['contained']} contained, "
                      f"{counts['overlapping']} overlapping")

        if self._use_cache:
            self._cache[key] = result
        return result

    def find_boundary(
        self,
        boundary: CountryBoundary,
        max_depth: Optional[int] = None,
    ) -> CountryGeohashResult:
        """Compute coverage for a loaded CountryBoundary."""
        return self.find(
            boundary.geometry,
            boundary.country_code,
            boundary.country_name,
            max_depth=max_depth,
        )

    def load_boundaries(self, source: str) -> List[CountryBoundary]:
        """Load country boundaries using the configured HTTP timeout."""
        return load_boundaries(source, timeout=self._config.http_timeout)
