"""
Main CLI Orchestration Module

This module provides the main entry point for the Moto Modem Status CLI:
log in, fetch downstream and upstream channels, print JSON.
"""

import logging
import sys
import time
from datetime import datetime
from typing import Optional

from moto_modem_status import MotoModemError, MotoModemStatusClient, __version__

from .args import parse_args
from .formatters import (
    format_json_output,
    print_error_suggestions,
    print_json_output,
    print_summary_to_stderr,
)
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI application."""
    start_time = time.time()

    args = parse_args(argv)
    setup_logging(debug=args.debug, quiet=args.quiet, log_file=args.log_file)

    if not args.quiet:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"Moto Modem Status Client v{__version__} - {timestamp}", file=sys.stderr)
        print(f"Connecting to {args.host} as {args.username}", file=sys.stderr)

    try:
        with MotoModemStatusClient(
            password=args.password,
            username=args.username,
            host=args.host,
            timeout=args.timeout,
        ) as client:
            client.login()
            downstream = client.get_downstream_channels()
            upstream = client.get_upstream_channels()

        elapsed = time.time() - start_time

        if not args.quiet:
            print_summary_to_stderr(downstream, upstream)

        print_json_output(format_json_output(downstream, upstream, args.host, elapsed))
        logger.info(f"Channel status retrieved successfully in {elapsed:.2f}s")

    except KeyboardInterrupt:
        elapsed = time.time() - start_time
        logger.error(f"Operation cancelled by user after {elapsed:.2f}s")
        print(f"Operation cancelled by user after {elapsed:.2f}s", file=sys.stderr)
        sys.exit(1)

    except MotoModemError as e:
        elapsed = time.time() - start_time
        logger.error(f"Failed to get channel status after {elapsed:.2f}s: {e}")
        print(f"Error after {elapsed:.2f}s: {e}", file=sys.stderr)
        print_error_suggestions(debug=args.debug)
        sys.exit(1)


if __name__ == "__main__":
    main()
