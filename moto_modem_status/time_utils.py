"""
Time Utilities for Moto Modem Status Client
===========================================

This module provides the clock used to timestamp HNAP_AUTH headers.

A clock is any zero-argument callable returning milliseconds since the
epoch. The client and authenticator accept one as ``clock=`` so tests can
inject a fixed value.

"""

import time
from typing import Callable

Clock = Callable[[], int]


def current_timestamp_ms() -> int:
    """Return the current system time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def fixed_clock(timestamp: int) -> Clock:
    """
    Return a clock that always reports ``timestamp``.

    Args:
        timestamp: Milliseconds since the epoch

    Returns:
        Zero-argument callable returning ``timestamp``
    """

    def clock() -> int:
        return timestamp

    return clock


__all__ = ["Clock", "current_timestamp_ms", "fixed_clock"]
