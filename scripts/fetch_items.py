#!/usr/bin/env python3
"""CLI entry point for fetching item lists."""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from item_fetcher import FetchError, ItemFetcher
from item_fetcher.config import FetcherConfig


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Fetch item lists from the Pokemon and Rick and Morty APIs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All Rick and Morty characters through GraphQL
  python fetch_items.py --source rick-and-morty-graphql -o characters.parquet

  # Same data through the paginated REST API, as CSV
  python fetch_items.py --source rick-and-morty -o characters.csv

  # Pokemon collection (set POKEMON_API_URL to point at your endpoint)
  python fetch_items.py --source pokemon -o pokemon.csv

Environment variables (also read from .env):
  POKEMON_API_URL             - Pokemon REST endpoint
  RICK_AND_MORTY_API_URL      - Rick and Morty REST endpoint
  RICK_AND_MORTY_GRAPHQL_URL  - Rick and Morty GraphQL endpoint
  ITEM_FETCHER_TIMEOUT        - Request timeout in seconds
        """
    )

    parser.add_argument(
        "--source",
        choices=ItemFetcher.SOURCES,
        default="rick-and-morty-graphql",
        help="Item source to fetch (default: rick-and-morty-graphql)"
    )

    output_group = parser.add_argument_group("Output options")
    output_group.add_argument(
        "--output", "-o",
        type=str,
        required=True,
        help="Output file path (.parquet or .csv)"
    )
    output_group.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the page progress bar"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (or set ITEM_FETCHER_TIMEOUT env var)"
    )

    args = parser.parse_args(argv)

    try:
        config = FetcherConfig.from_env(timeout=args.timeout)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Determine output path
    output_path = Path(args.output)
    if not output_path.suffix:
        output_path = output_path.with_suffix(".parquet")

    fetcher = ItemFetcher(config)

    print(f"Fetching items from: {args.source}")
    try:
        fetcher.fetch(args.source, progress=not args.no_progress)
    except FetchError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    if output_path.suffix == ".csv":
        fetcher.save_to_csv(output_path)
    else:
        fetcher.save_to_parquet(output_path)

    print(f"\nDone! Output saved to: {output_path}")


if __name__ == "__main__":
    main()
