"""
Main Moto Modem Status Client
=============================

This module contains the client facade that wires together the transport,
session store, authenticator, request handler and channel parser.

"""

import logging
from typing import Optional

from moto_modem_status.client.auth import HNAPAuthenticator
from moto_modem_status.client.http import HNAPRequestHandler, Timeout
from moto_modem_status.client.parser import decode_downstream, decode_upstream
from moto_modem_status.client.session import SessionStore
from moto_modem_status.client.transport import create_modem_session
from moto_modem_status.exceptions import MotoConfigurationError
from moto_modem_status.models import DownstreamChannel, UpstreamChannel
from moto_modem_status.time_utils import Clock, current_timestamp_ms

logger = logging.getLogger("moto-modem-status")

DOWNSTREAM_ACTION = "GetMotoStatusDownstreamChannelInfo"
DOWNSTREAM_FIELD = "MotoConnDownstreamChannel"

UPSTREAM_ACTION = "GetMotoStatusUpstreamChannelInfo"
UPSTREAM_FIELD = "MotoConnUpstreamChannel"


class MotoModemStatusClient:
    """
    HNAP client for Motorola MB8600-family cable modems.

    The client talks HTTPS to the modem with certificate verification
    disabled, as the modem uses a self-signed certificate. Calls are
    synchronous; one client instance is not safe for concurrent use.

    Examples:
        >>> with MotoModemStatusClient(password="motorola") as client:
        ...     client.login()
        ...     for channel in client.get_downstream_channels():
        ...         print(channel.channel_id, channel.snr)
    """

    def __init__(
        self,
        password: str,
        username: str = "admin",
        host: str = "192.168.100.1",
        timeout: Timeout = None,
        clock: Clock = current_timestamp_ms,
    ):
        """
        Initialize the modem client.

        Args:
            password: Modem admin password
            username: Login username (default: "admin")
            host: Modem address, optionally with ":port" (default: "192.168.100.1")
            timeout: Optional requests timeout in seconds or (connect, read)
            clock: Millisecond timestamp source for request signing

        Raises:
            MotoConfigurationError: If host or password is missing or the
                endpoint URL cannot be built
        """
        if not host:
            raise MotoConfigurationError("Modem host is required", details={"parameter": "host"})
        if not password:
            raise MotoConfigurationError("Modem password is required", details={"parameter": "password"})

        self.host = host
        self.username = username
        self.password = password
        self.timeout = timeout
        self.hnap_url = f"https://{host}/HNAP1/"

        self.session = create_modem_session()
        try:
            self.session_store = SessionStore(self.session.cookies, self.hnap_url)
        except MotoConfigurationError:
            self.session.close()
            raise

        self.authenticator = HNAPAuthenticator(username, password, self.session_store, clock)
        self.request_handler = HNAPRequestHandler(self.session, self.hnap_url, self.authenticator, timeout)

        logger.info(f"🛡️ MotoModemStatusClient initialized for {host}")

    @property
    def authenticated(self) -> bool:
        return self.authenticator.authenticated

    @property
    def private_key(self) -> str:
        """Private key used for signing, or the login sentinel."""
        return self.session_store.private_key

    @private_key.setter
    def private_key(self, value: str) -> None:
        self.session_store.private_key = value

    @property
    def uid(self) -> str:
        """Session uid returned by the modem at login."""
        return self.session_store.uid

    @uid.setter
    def uid(self, value: str) -> None:
        self.session_store.uid = value

    def login(self) -> dict[str, str]:
        """
        Log in to the modem using the client credentials.

        Returns:
            Final Login response map

        Raises:
            MotoAuthenticationError: If the modem rejects the login
        """
        return self.authenticator.login(self.request_handler)

    def call(self, action: str, params: Optional[dict[str, str]] = None) -> dict[str, str]:
        """Invoke a known HNAP action and return its response map."""
        return self.request_handler.invoke(action, params)

    def get_downstream_channels(self) -> list[DownstreamChannel]:
        """Return the downstream channels in the order the modem lists them."""
        resp = self.call(DOWNSTREAM_ACTION)
        data = resp.get(DOWNSTREAM_FIELD, "")
        logger.debug(f"Got downstream channels: {data}")
        return decode_downstream(data)

    def get_upstream_channels(self) -> list[UpstreamChannel]:
        """Return the upstream channels in the order the modem lists them."""
        resp = self.call(UPSTREAM_ACTION)
        data = resp.get(UPSTREAM_FIELD, "")
        logger.debug(f"Got upstream channels: {data}")
        return decode_upstream(data)

    def close(self) -> None:
        """Clean up resources."""
        self.session_store.clear()
        if self.session:
            self.session.close()

    def __enter__(self) -> "MotoModemStatusClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


# Export main client
__all__ = ["MotoModemStatusClient"]
