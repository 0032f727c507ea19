"""
Channel Parser for Moto Modem Status Client
===========================================

This module decodes the channel strings returned by the channel info
actions.

Channels are joined by "|+|"; each channel is a run of "^" separated
fields, normally closed by a trailing "^":

    1^Locked^QAM256^20^531.0^ 2.8^45.1^0^0^|+|2^Locked^QAM256^13^...

"""

import logging
from typing import Callable, TypeVar

from moto_modem_status.exceptions import MotoMalformedRecordError
from moto_modem_status.models import DownstreamChannel, UpstreamChannel

logger = logging.getLogger("moto-modem-status")

RECORD_SEPARATOR = "|+|"
FIELD_SEPARATOR = "^"

DOWNSTREAM_FIELDS = 9
UPSTREAM_FIELDS = 7

T = TypeVar("T")


def _split_fields(line: str, expected: int, channel_type: str) -> list[str]:
    """Split a channel record into exactly ``expected`` fields."""
    if line.endswith(FIELD_SEPARATOR):
        line = line[: -len(FIELD_SEPARATOR)]

    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != expected:
        problem = "too many" if len(fields) > expected else "too few"
        raise MotoMalformedRecordError(
            f"Invalid {channel_type} channel record: {problem} fields ({len(fields)}, expected {expected})",
            details={"channel_type": channel_type, "record": line},
        )
    return fields


def _number(convert: Callable[[str], T], fields: list[str], index: int, name: str, channel_type: str) -> T:
    value = fields[index]
    try:
        return convert(value)
    except ValueError as e:
        raise MotoMalformedRecordError(
            f"Invalid {channel_type} channel record: {name} is not a number",
            details={"channel_type": channel_type, "field": name, "value": value},
        ) from e


def parse_downstream_line(line: str) -> DownstreamChannel:
    """
    Decode one downstream channel record.

    Fields: channel, lock status, modulation, channel ID, frequency (MHz),
    power (dBmV), SNR (dB), corrected errors, uncorrected errors.

    Raises:
        MotoMalformedRecordError: On a wrong field count or non-numeric field
    """
    f = _split_fields(line, DOWNSTREAM_FIELDS, "downstream")
    return DownstreamChannel(
        channel=_number(int, f, 0, "channel", "downstream"),
        lock_status=f[1],
        modulation=f[2],
        channel_id=_number(int, f, 3, "channel_id", "downstream"),
        frequency=_number(float, f, 4, "frequency", "downstream"),
        power=_number(float, f, 5, "power", "downstream"),
        snr=_number(float, f, 6, "snr", "downstream"),
        corrected_errors=_number(int, f, 7, "corrected_errors", "downstream"),
        uncorrected_errors=_number(int, f, 8, "uncorrected_errors", "downstream"),
    )


def parse_upstream_line(line: str) -> UpstreamChannel:
    """
    Decode one upstream channel record.

    Fields: channel, lock status, channel type, channel ID, symbol rate,
    frequency (MHz), power (dBmV).

    Raises:
        MotoMalformedRecordError: On a wrong field count or non-numeric field
    """
    f = _split_fields(line, UPSTREAM_FIELDS, "upstream")
    return UpstreamChannel(
        channel=_number(int, f, 0, "channel", "upstream"),
        lock_status=f[1],
        channel_type=f[2],
        channel_id=_number(int, f, 3, "channel_id", "upstream"),
        symbol_rate=_number(int, f, 4, "symbol_rate", "upstream"),
        frequency=_number(float, f, 5, "frequency", "upstream"),
        power=_number(float, f, 6, "power", "upstream"),
    )


def _decode(raw: str, parse_line: Callable[[str], T]) -> list[T]:
    if not raw or not raw.strip():
        return []
    return [parse_line(entry) for entry in raw.split(RECORD_SEPARATOR)]


def decode_downstream(raw: str) -> list[DownstreamChannel]:
    """Decode a "|+|" joined downstream channel string, preserving order."""
    channels = _decode(raw, parse_downstream_line)
    logger.debug(f"Decoded {len(channels)} downstream channels")
    return channels


def decode_upstream(raw: str) -> list[UpstreamChannel]:
    """Decode a "|+|" joined upstream channel string, preserving order."""
    channels = _decode(raw, parse_upstream_line)
    logger.debug(f"Decoded {len(channels)} upstream channels")
    return channels


__all__ = [
    "decode_downstream",
    "decode_upstream",
    "parse_downstream_line",
    "parse_upstream_line",
]
