"""
HTTP Transport for Moto Modem Status Client
===========================================

This module builds the requests Session used to talk to the modem.

The modem serves HTTPS with a self-signed certificate, so certificate
verification is disabled and the matching urllib3 warning is silenced.
Retries are disabled at the adapter level; a failed request is reported
to the caller immediately.

"""

import logging

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.exceptions import InsecureRequestWarning
from urllib3.util.retry import Retry

# The modem certificate is self-signed; verification is off on purpose
urllib3.disable_warnings(InsecureRequestWarning)

logger = logging.getLogger("moto-modem-status")

USER_AGENT = "MotoModemStatusClient/1.0.0"


def create_modem_session() -> requests.Session:
    """
    Create a requests Session for HNAP communication with the modem.

    Returns:
        requests.Session with certificate verification disabled, no retries
        and a cookie jar that holds the HNAP session values
    """
    session = requests.Session()

    adapter = HTTPAdapter(
        pool_connections=1,
        pool_maxsize=1,
        max_retries=Retry(total=0, raise_on_status=False),
    )
    session.mount("https://", adapter)
    session.mount("http://", adapter)

    session.verify = False
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Cache-Control": "no-cache",
        }
    )

    logger.debug("🔧 Created modem session (certificate verification disabled)")
    return session


__all__ = ["create_modem_session"]
