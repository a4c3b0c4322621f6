"""Custom exceptions for the geohash-coverage library."""


class GeohashCoverageError(Exception):
    """Base exception for all geohash-coverage errors."""
    pass


class BoundaryError(GeohashCoverageError):
    """Raised when country boundaries cannot be loaded or matched."""
    pass


class ConfigurationError(GeohashCoverageError):
    """Raised when configuration is invalid or incomplete."""
    pass

