"""
Moto Modem Status Library
=========================

Python library for querying Motorola MB8600-family cable modem channel
status via HNAP.

The modem speaks HNAP as JSON over HTTPS. Each request is signed with an
HMAC-MD5 HNAP_AUTH header, and the login handshake derives a session key
from a challenge so the password never crosses the wire.

Quick Start:
    >>> from moto_modem_status import MotoModemStatusClient
    >>> with MotoModemStatusClient(password="your_password") as client:
    ...     client.login()
    ...     downstream = client.get_downstream_channels()
    ...     upstream = client.get_upstream_channels()
    ...     print(f"{len(downstream)} downstream, {len(upstream)} upstream")

Error Handling:
    All operations raise subclasses of MotoModemError:

    >>> from moto_modem_status import MotoAuthenticationError
    >>> try:
    ...     client = MotoModemStatusClient(password="wrong_password")
    ...     client.login()
    ... except MotoAuthenticationError as e:
    ...     print(f"Login failed: {e}")

This is an unofficial library not affiliated with Motorola or CommScope.

License: MIT
"""

from .client.main import MotoModemStatusClient
from .client.parser import decode_downstream, decode_upstream
from .exceptions import (
    MotoAuthenticationError,
    MotoConfigurationError,
    MotoConnectionError,
    MotoHTTPError,
    MotoInvalidActionError,
    MotoMalformedRecordError,
    MotoMalformedResponseError,
    MotoModemError,
    MotoNoResponseError,
    MotoParsingError,
    MotoTimeoutError,
)
from .models import DownstreamChannel, UpstreamChannel

# Version information
__version__ = "1.0.0"
__license__ = "MIT"

# Public API
__all__ = [
    "DownstreamChannel",
    "MotoAuthenticationError",
    "MotoConfigurationError",
    "MotoConnectionError",
    "MotoHTTPError",
    "MotoInvalidActionError",
    "MotoMalformedRecordError",
    "MotoMalformedResponseError",
    "MotoModemError",
    "MotoModemStatusClient",
    "MotoNoResponseError",
    "MotoParsingError",
    "MotoTimeoutError",
    "UpstreamChannel",
    "__license__",
    "__version__",
    "decode_downstream",
    "decode_upstream",
]
