"""
Data Models for Moto Modem Status Client
========================================

This module contains the channel records decoded from the modem's
channel info responses.

"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class DownstreamChannel:
    """
    Status of a single downstream channel.

    Attributes:
        channel: Channel index as listed by the modem (1-based)
        lock_status: Lock status ("Locked", "Not Locked", ...)
        modulation: Modulation (e.g. "QAM256", "OFDM PLC")
        channel_id: DOCSIS channel ID
        frequency: Center frequency in MHz
        power: Receive power in dBmV
        snr: Signal-to-noise ratio in dB
        corrected_errors: Corrected codeword count
        uncorrected_errors: Uncorrected codeword count

    Examples:
        >>> DownstreamChannel(
        ...     channel=1,
        ...     lock_status="Locked",
        ...     modulation="QAM256",
        ...     channel_id=20,
        ...     frequency=531.0,
        ...     power=2.8,
        ...     snr=45.1,
        ...     corrected_errors=0,
        ...     uncorrected_errors=0,
        ... )
    """

    channel: int
    lock_status: str
    modulation: str
    channel_id: int
    frequency: float
    power: float
    snr: float
    corrected_errors: int
    uncorrected_errors: int

    @property
    def locked(self) -> bool:
        """True if the modem reports the channel as locked."""
        return self.lock_status == "Locked"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class UpstreamChannel:
    """
    Status of a single upstream channel.

    Attributes:
        channel: Channel index as listed by the modem (1-based)
        lock_status: Lock status ("Locked", "Not Locked", ...)
        channel_type: Channel type (e.g. "SC-QAM", "OFDMA")
        channel_id: DOCSIS channel ID
        symbol_rate: Symbol rate in kSym/s
        frequency: Center frequency in MHz
        power: Transmit power in dBmV
    """

    channel: int
    lock_status: str
    channel_type: str
    channel_id: int
    symbol_rate: int
    frequency: float
    power: float

    @property
    def locked(self) -> bool:
        """True if the modem reports the channel as locked."""
        return self.lock_status == "Locked"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# Export all models
__all__ = ["DownstreamChannel", "UpstreamChannel"]
