"""
Session State for Moto Modem Status Client
==========================================

This module keeps the HNAP session values (signing key and session id).

Both values live as cookies in the transport's cookie jar, scoped to the
modem host and path "/", so every request carries them back to the modem
exactly like the web UI does.

"""

import logging
from typing import Optional
from urllib.parse import urlsplit

from requests.cookies import RequestsCookieJar

from moto_modem_status.exceptions import MotoConfigurationError

logger = logging.getLogger("moto-modem-status")

PRIVATE_KEY_COOKIE = "PrivateKey"
DEFAULT_PRIVATE_KEY = "withoutloginkey"

UID_COOKIE = "uid"
DEFAULT_UID = ""

COOKIE_PATH = "/"


class SessionStore:
    """Cookie-backed store for the signing key and session id."""

    def __init__(self, cookies: RequestsCookieJar, base_url: str):
        """
        Initialize session store.

        Args:
            cookies: Cookie jar shared with the HTTP session
            base_url: Modem HNAP endpoint URL; cookies are scoped to its host

        Raises:
            MotoConfigurationError: If base_url has no host
        """
        try:
            host = urlsplit(base_url).hostname
        except ValueError as e:
            raise MotoConfigurationError(
                f"Invalid modem URL {base_url!r}",
                details={"base_url": base_url, "parse_error": str(e)},
            ) from e
        if not host:
            raise MotoConfigurationError(
                f"Cannot scope session cookies to {base_url!r}",
                details={"base_url": base_url},
            )
        self.cookies = cookies
        self.domain = host

    def get(self, name: str, default: str = "") -> str:
        """Return the cookie value for the modem host, or default if absent."""
        for cookie in self.cookies:
            if cookie.name != name or cookie.domain.lstrip(".") != self.domain:
                continue
            if cookie.path in (COOKIE_PATH, ""):
                return cookie.value or ""
        return default

    def set(self, name: str, value: str) -> None:
        """Store a cookie for the modem host at path "/"."""
        self.cookies.set(name, value, domain=self.domain, path=COOKIE_PATH)
        logger.debug(f"🍪 Stored {name} cookie for {self.domain}")

    def clear(self) -> None:
        """Drop both session values, reverting to the defaults."""
        for name in (PRIVATE_KEY_COOKIE, UID_COOKIE):
            try:
                self.cookies.clear(self.domain, COOKIE_PATH, name)
            except KeyError:
                pass

    @property
    def private_key(self) -> str:
        """Signing key, or the pre-login sentinel."""
        return self.get(PRIVATE_KEY_COOKIE, DEFAULT_PRIVATE_KEY)

    @private_key.setter
    def private_key(self, value: str) -> None:
        self.set(PRIVATE_KEY_COOKIE, value)

    @property
    def uid(self) -> str:
        """Session id returned by the modem at login."""
        return self.get(UID_COOKIE, DEFAULT_UID)

    @uid.setter
    def uid(self, value: Optional[str]) -> None:
        self.set(UID_COOKIE, value or "")
