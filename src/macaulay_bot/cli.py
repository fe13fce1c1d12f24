"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from macaulay_bot import __version__
from macaulay_bot.config import get_settings
from macaulay_bot.datasources.macaulay import search_media
from macaulay_bot.flows.post import post_taxon
from macaulay_bot.reference.records import ReferenceDataError
from macaulay_bot.renderers.post import PostTooLongError
from macaulay_bot.resolution.errors import ResolutionError
from macaulay_bot.services.bluesky import BlueskyError

PREVIEW_IDS = 5


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="macaulay-bot",
        description="Post a random bird or mammal photo from the Macaulay Library to Bluesky",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'post' command - resolve a photo and post it
    post_parser = subparsers.add_parser("post", help="Generate a post and publish it")
    post_parser.add_argument(
        "--mammals",
        action="store_true",
        help="Post a mammal instead of a bird",
    )
    post_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the post without publishing",
    )
    post_parser.add_argument(
        "--test-species",
        type=str,
        default=None,
        metavar="SCIENTIFIC_NAME",
        help="Use this mammal (e.g. Odobenus_rosmarus) instead of a random one",
    )

    # 'search' command - raw photo lookup by taxon code
    search_parser = subparsers.add_parser("search", help="Search photos by taxon code")
    search_parser.add_argument("taxon_code", help="eBird/Macaulay taxon code (e.g. gybtes1)")
    search_parser.add_argument(
        "--include-child-taxa",
        action="store_true",
        help="Include subspecies in the search",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_post(args: argparse.Namespace) -> int:
    """Handle the 'post' command."""
    if args.dry_run:
        print("Dry run - will not post to Bluesky")
    if args.test_species:
        print(f"Test mode - using specific species: {args.test_species}")

    try:
        post_taxon(mammals=args.mammals, dry_run=args.dry_run, test_species=args.test_species)
    except (ResolutionError, ReferenceDataError, PostTooLongError, BlueskyError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    found = search_media(args.taxon_code, include_child_taxa=args.include_child_taxa)
    if found is None:
        print("Failed to retrieve data", file=sys.stderr)
        return 1

    ids = found.asset_ids
    preview = ", ".join(str(i) for i in ids[:PREVIEW_IDS])
    more = "..." if len(ids) > PREVIEW_IDS else ""
    print(f"Found {len(ids)} asset IDs")
    print(f"Asset IDs: {preview}{more}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    return 0


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "post": cmd_post,
        "search": cmd_search,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
