"""
Command Line Argument Parsing Module

This module handles all argument parsing and validation for the Moto Modem
Status CLI.
"""

import argparse
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

PASSWORD_ENV_VAR = "MOTO_MODEM_PASSWORD"


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Query Motorola cable modem channel status and output JSON data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s --password "your_password"
  %(prog)s --password "password" --host 192.168.100.1
  {PASSWORD_ENV_VAR}=password %(prog)s --debug

Output:
  JSON object with downstream and upstream channel information.
  Summary information is printed to stderr, JSON data to stdout.
  Use --quiet to suppress stderr output and get pure JSON on stdout.
        """,
    )

    # Connection settings
    parser.add_argument(
        "--host",
        default="192.168.100.1",
        help="Modem hostname or IP address, optionally with :port (default: %(default)s)",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Modem login username (default: %(default)s)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help=f"Modem login password (default: ${PASSWORD_ENV_VAR})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30,
        help="Request timeout in seconds (default: %(default)s)",
    )

    # Output options
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging output to stderr",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress summary output to stderr (JSON only to stdout)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log output to this file",
    )

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.password is None:
        args.password = os.environ.get(PASSWORD_ENV_VAR)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    return args


def validate_args(args: argparse.Namespace) -> None:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments namespace

    Raises:
        ValueError: If arguments are invalid
    """
    if not args.password:
        raise ValueError(f"A password is required (--password or ${PASSWORD_ENV_VAR})")

    if args.timeout <= 0:
        raise ValueError("Timeout must be greater than 0")

    if not args.host:
        raise ValueError("Host must not be empty")

    logger.debug("Arguments validated successfully")
