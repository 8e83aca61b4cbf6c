# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from artistsync.app import add_artists, sync_spotify_artists
from artistsync.config import ConfigurationError, configure_logging, get_sync_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from artistsync.config import SyncConfig

AUTHORIZATION_ENV = "ARTISTSYNC_AUTHORIZATION"

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise local artists with Spotify")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Match stored artists against Spotify")
    sync.add_argument(
        "--authorization",
        type=str,
        default=None,
        help=f"Authorization header value (defaults to ${AUTHORIZATION_ENV})",
    )
    sync.add_argument(
        "--pacing-ms",
        type=int,
        default=None,
        help="Delay in milliseconds after every artist (defaults to config)",
    )

    artists = subparsers.add_parser("artists", help="Artist management commands")
    artists_sub = artists.add_subparsers(dest="artists_command", required=True)
    artists_add = artists_sub.add_parser("add", help="Store artists by name")
    artists_add.add_argument("names", nargs="+", help="Artist names to store")

    return parser.parse_args(list(argv))


def _sync_config(args: argparse.Namespace) -> SyncConfig:
    config = get_sync_config()
    if args.pacing_ms is None:
        return config
    if args.pacing_ms < 0:
        raise ValueError("Pacing delay must be non-negative")
    return replace(config, pacing_delay_ms=args.pacing_ms)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(verbose=parsed_args.verbose, quiet=parsed_args.quiet)
        sync_config = _sync_config(parsed_args) if parsed_args.command == "sync" else None
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "sync":
            authorization = parsed_args.authorization or os.getenv(AUTHORIZATION_ENV)
            response = sync_spotify_artists(authorization, sync_config=sync_config)
            print(response.to_json(indent=2))
            if not response.success:
                sys.exit(1)
        elif parsed_args.command == "artists" and parsed_args.artists_command == "add":
            created = add_artists(parsed_args.names)
            for record in created:
                print(f"{record.id}\t{record.name}")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    run()
