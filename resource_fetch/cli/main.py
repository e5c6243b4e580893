#!/usr/bin/env python3
"""
Command-line interface for resource_fetch.

Fetches one resource and writes its bytes to stdout or to a file.
Exit status: 0 on success, 1 on fetch or configuration failure, 2 on usage
errors.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from ..config import ConfigLoader, ConfigLoadError, GlobalConfig
from ..config.models import LogLevel
from ..exceptions import FetchError
from ..fetcher import ResourceFetcher
from ..logging import cleanup_logging, setup_logging
from .formatting import Formatter, create_formatter
from .parsers import create_parser


def build_config(args: argparse.Namespace) -> GlobalConfig:
    """Load configuration and apply command-line overrides."""
    config = ConfigLoader().load_config(args.config)

    http = config.http.model_copy()
    ftp = config.ftp.model_copy()
    features = config.features.model_copy()
    logging_config = config.logging.model_copy()

    if args.timeout is not None:
        http.total_timeout = args.timeout
        ftp.socket_timeout = args.timeout
    if args.insecure:
        http.verify_ssl = False
        ftp.verify_tls = False
    if args.no_redirects:
        http.follow_redirects = False
    if args.no_ftp:
        features.enable_ftp = False

    if args.verbose:
        logging_config.level = LogLevel.DEBUG
    elif args.log_level:
        logging_config.level = LogLevel(args.log_level)
    elif "level" not in config.logging.model_fields_set:
        # The routing INFO line is noise on a terminal
        logging_config.level = LogLevel.WARNING

    return GlobalConfig(http=http, ftp=ftp, features=features, logging=logging_config)


def write_output(content: bytes, args: argparse.Namespace, formatter: Formatter) -> None:
    """Write fetched bytes to the output file or stdout."""
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(content)
        formatter.print_success(f"Wrote {len(content):,} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(content)
        sys.stdout.buffer.flush()


async def run(args: argparse.Namespace, formatter: Formatter) -> int:
    """Run one fetch for parsed arguments."""
    try:
        config = build_config(args)
    except ConfigLoadError as e:
        formatter.print_error(str(e))
        return 1

    setup_logging(config.logging)
    try:
        fetcher = ResourceFetcher(config)
        try:
            content = await fetcher.fetch(args.identifier)
        except FetchError as e:
            formatter.print_fetch_error(e)
            return 1
        formatter.print_info(f"Fetched {len(content):,} bytes from {args.identifier}")
        try:
            write_output(content, args, formatter)
        except OSError as e:
            formatter.print_error(f"Failed to write output: {e}")
            return 1
        return 0
    finally:
        cleanup_logging()


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    formatter = create_formatter(verbose=args.verbose)
    return asyncio.run(run(args, formatter))


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
