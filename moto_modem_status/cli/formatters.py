"""
Output Formatting Module

This module provides functions for formatting and displaying channel
data, including JSON serialization and a human-readable summary.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any

from moto_modem_status import __version__
from moto_modem_status.models import DownstreamChannel, UpstreamChannel

logger = logging.getLogger(__name__)


def print_summary_to_stderr(downstream: list[DownstreamChannel], upstream: list[UpstreamChannel]) -> None:
    """
    Print a human-readable summary to stderr (so JSON output to stdout is clean).

    Args:
        downstream: Decoded downstream channels
        upstream: Decoded upstream channels
    """
    print("=" * 60, file=sys.stderr)
    print("MODEM CHANNEL STATUS SUMMARY", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    ds_locked = sum(1 for ch in downstream if ch.locked)
    us_locked = sum(1 for ch in upstream if ch.locked)
    print(f"Downstream Channels: {len(downstream)} ({ds_locked} locked)", file=sys.stderr)
    print(f"Upstream Channels: {len(upstream)} ({us_locked} locked)", file=sys.stderr)

    if downstream:
        uncorrected = sum(ch.uncorrected_errors for ch in downstream)
        lowest_snr = min(downstream, key=lambda ch: ch.snr)
        print(f"Uncorrected Errors: {uncorrected}", file=sys.stderr)
        print(
            f"Lowest SNR: {lowest_snr.snr} dB (channel {lowest_snr.channel}, ID {lowest_snr.channel_id})",
            file=sys.stderr,
        )

    print("=" * 60, file=sys.stderr)


def format_json_output(
    downstream: list[DownstreamChannel],
    upstream: list[UpstreamChannel],
    host: str,
    elapsed_time: float,
) -> dict[str, Any]:
    """
    Format the complete JSON output with metadata.

    Args:
        downstream: Decoded downstream channels
        upstream: Decoded upstream channels
        host: Queried modem host
        elapsed_time: Total elapsed time for the operation

    Returns:
        JSON-serializable output dictionary
    """
    return {
        "downstream_channels": [ch.to_dict() for ch in downstream],
        "upstream_channels": [ch.to_dict() for ch in upstream],
        "query_timestamp": datetime.now().isoformat(),
        "query_host": host,
        "client_version": __version__,
        "elapsed_time": elapsed_time,
    }


def print_json_output(json_data: dict[str, Any]) -> None:
    """Print JSON output to stdout."""
    logger.debug("Outputting JSON to stdout")
    print(json.dumps(json_data, indent=2))


def print_error_suggestions(debug: bool = False) -> None:
    """
    Print helpful error suggestions.

    Args:
        debug: Whether debug mode is enabled
    """
    if debug:
        import traceback

        traceback.print_exc(file=sys.stderr)
    else:
        print("\nTroubleshooting suggestions:", file=sys.stderr)
        print("1. Verify the modem password is correct", file=sys.stderr)
        print("2. Check that the modem IP address is reachable", file=sys.stderr)
        print("3. Ensure the modem web interface is enabled", file=sys.stderr)
        print("4. Try with --debug for more detailed error information", file=sys.stderr)
