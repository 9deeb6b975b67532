"""Autocomplete CLI: query a title file from the command line."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from moviefinder.autocomplete.index import MovieIndex
from moviefinder.config.logging_config import setup_logging
from moviefinder.config.settings import get_settings

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for limits: an integer of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MovieFinder autocomplete tools.")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Title TSV file (default: data/moviedata.tsv under the project root).",
    )
    sub = parser.add_subparsers(dest="command")

    search = sub.add_parser("search", help="Titles starting with or containing a fragment.")
    search.add_argument("key", help="Fragment to match.")
    search.add_argument("--limit", type=positive_int, default=None, help="Max suggestions.")

    complete = sub.add_parser("complete", help="Titles starting with a prefix.")
    complete.add_argument("prefix", help="Prefix to complete.")
    complete.add_argument("--limit", type=positive_int, default=None, help="Max completions.")

    movie = sub.add_parser("movie", help="Show the record for an exact title.")
    movie.add_argument("title", help="Title, exactly as stored.")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir)

    data_file = args.data_file or settings.data_file
    if not data_file.exists():
        logger.error("Title file not found: %s", data_file)
        return 1

    index = MovieIndex.from_file(data_file, settings.index)

    if args.command == "search":
        for title in index.suggest(args.key, limit=args.limit):
            print(f"  {title}")

    elif args.command == "complete":
        for title in index.complete(args.prefix, limit=args.limit):
            print(f"  {title}")

    elif args.command == "movie":
        record = index.get_movie(args.title)
        if record is None:
            print(f"No movie titled {args.title!r}")
            return 1
        print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
