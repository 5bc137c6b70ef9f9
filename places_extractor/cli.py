"""
Command Line Interface

Entry point for searching places from the command line.

Usage:
    python -m places_extractor "coffee"
    python -m places_extractor "pharmacy" --lat 40.7128 --lng -74.0060
    python -m places_extractor "bakery" -o exports --no-csv
    python -m places_extractor --serve --port 8000
"""

import argparse
import asyncio
import logging
import sys

from .config import API_HOST, CSV_FILENAME, MISSING_VALUE
from .config_manager import ExtractorConfig
from .exceptions import PlacesExtractorError
from .export import DirectorySink, format_rating
from .extraction import SearchSessionController
from .models import SearchStatus


async def run_search(cfg: ExtractorConfig, keyword: str, locate: bool, write_csv: bool) -> int:
    """Search once, print the results and optionally write the CSV."""
    verbose = cfg.verbose

    async with SearchSessionController.from_config(cfg, locate=locate) as controller:
        center = controller.state.center
        if verbose:
            print("=" * 70)
            print(f"SEARCHING: '{keyword}' within {cfg.search_radius}m of "
                  f"({center.latitude:.5f}, {center.longitude:.5f})")
            print("=" * 70)

        await controller.search(keyword)
        state = controller.state

        if state.status == SearchStatus.EMPTY:
            if verbose:
                print(f"\n{controller.status_message}")
            return 0

        if verbose:
            for i, place in enumerate(state.results, 1):
                print(f"\n  [{i}/{len(state.results)}] {place.name}")
                print(f"    {place.vicinity}")
                print(f"    Rating: {format_rating(place.rating)} | Phone: {place.phone or MISSING_VALUE}")

        if write_csv:
            sink = DirectorySink(cfg.output_dir)
            controller.export(sink)
            if verbose:
                print(f"\n  CSV output: {sink.last_path}")

        if verbose:
            print(f"\nDone! Found {len(state.results)} places.")
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Search nearby places and export them to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m places_extractor "coffee"
  python -m places_extractor "pharmacy" --lat 40.7128 --lng -74.0060
  python -m places_extractor "bakery" -o exports
  python -m places_extractor --serve --port 8080
        """
    )

    parser.add_argument(
        "keyword",
        nargs="?",
        help="Search keyword (e.g., 'restaurants', 'coffee')"
    )
    parser.add_argument("--lat", type=float, help="Search center latitude (skips geolocation)")
    parser.add_argument("--lng", type=float, help="Search center longitude (skips geolocation)")
    parser.add_argument(
        "-o", "--output-dir",
        default="output",
        help=f"Directory for {CSV_FILENAME} (default: output)"
    )
    parser.add_argument("--no-csv", action="store_true", help="Disable CSV output")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--serve", action="store_true", help="Run the API server instead of searching")
    parser.add_argument("--port", type=int, default=None, help="API server port (with --serve)")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if (args.lat is None) != (args.lng is None):
        parser.error("--lat and --lng must be given together")
    if not args.serve and not (args.keyword and args.keyword.strip()):
        parser.error("a non-empty keyword is required")

    try:
        overrides = {"output_dir": args.output_dir, "verbose": not args.quiet}
        if args.lat is not None:
            overrides.update(default_latitude=args.lat, default_longitude=args.lng)
        if args.port is not None:
            overrides["server_port"] = args.port
        cfg = ExtractorConfig(**overrides)

        if args.serve:
            from .server import run_server
            run_server(
                host=API_HOST,
                port=cfg.server_port,
                config=cfg,
                locate=args.lat is None,
            )
            return 0

        return asyncio.run(run_search(
            cfg,
            args.keyword,
            locate=args.lat is None,
            write_csv=not args.no_csv,
        ))

    except PlacesExtractorError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
