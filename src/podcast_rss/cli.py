"""
Command-line interface for the podcast RSS generator.

Usage:
    podcast-rss build                    # Build feed from ./podcast.yaml to stdout
    podcast-rss build show.yaml -o feed.xml
    podcast-rss categories               # List the Apple Podcasts categories
    podcast-rss categories Arts Books Sports   # Group and check a flat list
"""

import argparse
import logging
import sys
from pathlib import Path

from podcast_rss.config import find_podcast_yaml, get_config


def cmd_build(args):
    """Build a feed from a YAML definition and write the RSS document."""
    config = get_config()

    from podcast_rss.builder import load_feed_file
    from podcast_rss.encoder import encode
    from podcast_rss.errors import FeedWriteError, ItemValidationError

    if args.file:
        feed_file = Path(args.file)
    else:
        feed_file = config.feed_file
        if not feed_file.exists():
            # Fall back to the same name in the working directory or its parents
            feed_file = find_podcast_yaml(file_name=feed_file.name) or feed_file

    if not feed_file.exists():
        print(f"ERROR: Feed definition not found: {feed_file}")
        sys.exit(1)

    try:
        feed = load_feed_file(feed_file, config=config)
    except ItemValidationError as exc:
        print(f"ERROR: Invalid episode: {exc}")
        sys.exit(1)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    try:
        if args.output:
            with open(args.output, "wb") as f:
                encode(feed, f, config=config)
            print(f"Wrote {len(feed.items)} episode(s) to {args.output}")
        else:
            encode(feed, sys.stdout, config=config)
    except (FeedWriteError, OSError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)


def cmd_categories(args):
    """List the category taxonomy or group a flat list of names."""
    from podcast_rss.categories import CATEGORIES, parse_categories, validate_category

    if not args.names:
        for category, subs in CATEGORIES.items():
            print(category)
            for sub in subs:
                print(f"  - {sub}")
        return

    grouped = parse_categories(args.names)
    if not grouped:
        print("No top-level category found.")
        sys.exit(1)

    unknown_found = False
    for category, subs in grouped.items():
        print(category)
        unknown = validate_category(category, subs)
        for sub in subs:
            marker = "  (unknown)" if sub in unknown else ""
            print(f"  - {sub}{marker}")
        unknown_found = unknown_found or bool(unknown)

    if unknown_found:
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="podcast-rss",
        description="Podcast RSS generator -- build Apple Podcasts ready feeds",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # build
    sub_build = subparsers.add_parser("build", help="Build an RSS feed from YAML")
    sub_build.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Feed definition (default: PODCAST_RSS_FEED_FILE or podcast.yaml)",
    )
    sub_build.add_argument(
        "-o", "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    sub_build.set_defaults(func=cmd_build)

    # categories
    sub_categories = subparsers.add_parser(
        "categories",
        help="List or check Apple Podcasts categories",
    )
    sub_categories.add_argument(
        "names",
        nargs="*",
        help="Flat list of categories, each followed by its sub-categories",
    )
    sub_categories.set_defaults(func=cmd_categories)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    args.func(args)


if __name__ == "__main__":
    main()
