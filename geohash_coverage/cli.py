"""
Command Line Interface

Entry point for computing country coverage from the command line.

Usage:
    python -m geohash_coverage countries.geojson FR
    python -m geohash_coverage countries.geojson "France" --depth 4 -o france.json
    python -m geohash_coverage https://example.org/countries.geojson DE --geojson
"""

import argparse
import json
import sys

from .config import DEFAULT_MAX_DEPTH, HTTP_TIMEOUT, MAX_ALLOWED_DEPTH
from .coverage import format_for_display, summarize_by_depth, to_feature_collection
from .exceptions import GeohashCoverageError
from .finder import CoverageFinder
from .geo.boundaries import find_boundary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geohash_coverage",
        description="Country geohash coverage finder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m geohash_coverage countries.geojson FR
  python -m geohash_coverage countries.geojson "France" --depth 4 -o france.json
  python -m geohash_coverage countries.geojson JP --geojson -o japan_cells.geojson
  python -m geohash_coverage countries.geojson IT --summary -q
        """
    )

    # Required arguments
    parser.add_argument(
        "source",
        help="GeoJSON FeatureCollection of countries (file path or http(s) URL)"
    )
    parser.add_argument(
        "country",
        help="Country code or name to look up (e.g., 'FR', 'France')"
    )

    # Optional arguments
    parser.add_argument(
        "-d", "--depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum geohash depth (default: {DEFAULT_MAX_DEPTH}, max: {MAX_ALLOWED_DEPTH})"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path (default: stdout)"
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=None,
        help=f"HTTP timeout in seconds for URL sources (default: {HTTP_TIMEOUT})"
    )
    parser.add_argument(
        "--geojson",
        action="store_true",
        help="Write cells as a GeoJSON FeatureCollection instead of the result JSON"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Write only the per-depth grouping of cells"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output"
    )
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    # Progress goes to stdout, so only when the JSON goes to a file
    verbose = not args.quiet and bool(args.output)

    try:
        finder = CoverageFinder(http_timeout=args.timeout, cache=False, verbose=verbose)

        boundaries = finder.load_boundaries(args.source)
        boundary = find_boundary(boundaries, args.country)

        result = finder.find_boundary(boundary, max_depth=args.depth)

        if args.geojson:
            payload = to_feature_collection(result)
        elif args.summary:
            payload = {
                "countryCode": result.country_code,
                "countryName": result.country_name,
                "summary": {str(k): v for k, v in summarize_by_depth(result).items()},
                "byDepth": format_for_display(result),
            }
        else:
            payload = result.to_dict()

        text = json.dumps(payload, indent=2)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text)
            if verbose:
                print(f"Saved to {args.output}", file=sys.stderr)
        else:
            print(text)

        return 0

    except GeohashCoverageError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
