"""Serve the MovieFinder API with uvicorn."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from moviefinder.config.logging_config import setup_logging
from moviefinder.config.settings import ApiSettings, get_settings

logger = logging.getLogger(__name__)


def build_parser(api: ApiSettings) -> argparse.ArgumentParser:
    """Command-line options; defaults come from *api*."""
    parser = argparse.ArgumentParser(description="Serve type-ahead title search over HTTP.")
    parser.add_argument("--host", default=api.host, help=f"Bind address (default: {api.host}).")
    parser.add_argument("--port", type=int, default=api.port, help=f"Bind port (default: {api.port}).")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes.")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings.api).parse_args(argv)
    setup_logging(log_dir=settings.logs_dir)

    if not settings.data_file.exists():
        logger.warning("No title file at %s; the index will start empty", settings.data_file)

    logger.info("Serving %s on http://%s:%d", settings.api.title, args.host, args.port)
    uvicorn.run(
        "moviefinder.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
