"""
Authentication module for Moto Modem Status Client
==================================================

This module handles HNAP request signing and the two-phase login with the
modem.

Every request carries an HNAP_AUTH header signed with the current private
key. Before login the key is the public sentinel "withoutloginkey"; the
challenge exchange replaces it with a key derived from the modem's public
key, the password and the challenge.

"""

import hashlib
import hmac
import logging
from typing import TYPE_CHECKING, Optional

from moto_modem_status.client.session import SessionStore
from moto_modem_status.exceptions import MotoAuthenticationError
from moto_modem_status.time_utils import Clock, current_timestamp_ms

if TYPE_CHECKING:
    from moto_modem_status.client.http import HNAPRequestHandler

logger = logging.getLogger("moto-modem-status")

SOAP_NAMESPACE = "http://purenetworks.com/HNAP1/"

LOGIN_ACTION = "Login"
LOGIN_FAILED = "FAILED"


def hmac_md5_hex(key: str, data: str) -> str:
    """Return the uppercase hex HMAC-MD5 of data keyed by key."""
    return (
        hmac.new(
            key.encode("utf-8"),
            data.encode("utf-8"),
            hashlib.md5,
        )
        .hexdigest()
        .upper()
    )


class HNAPAuthenticator:
    """Signs HNAP requests and performs the login handshake."""

    def __init__(
        self,
        username: str,
        password: str,
        session_store: SessionStore,
        clock: Clock = current_timestamp_ms,
    ):
        """
        Initialize HNAP authenticator.

        Args:
            username: Login username
            password: Login password
            session_store: Holder of the private key and uid cookies
            clock: Millisecond timestamp source for HNAP_AUTH
        """
        self.username = username
        self.password = password
        self.session_store = session_store
        self.clock = clock
        self.authenticated: bool = False

    def sign(self, action: str, timestamp: int) -> str:
        """
        Generate the HNAP_AUTH token for an action.

        Args:
            action: HNAP action name
            timestamp: Milliseconds since the epoch

        Returns:
            "<HMAC> <timestamp>" token string
        """
        message = f"{timestamp}{SOAP_NAMESPACE}{action}"
        auth_hash = hmac_md5_hex(self.session_store.private_key, message)
        return f"{auth_hash} {timestamp}"

    def auth_header(self, action: str) -> str:
        """Sign an action with a fresh timestamp from the clock."""
        return self.sign(action, self.clock())

    def compute_private_key(self, public_key: str, challenge: str) -> str:
        """Derive the session private key from the login challenge."""
        return hmac_md5_hex(public_key + self.password, challenge)

    def compute_login_password(self, challenge: str) -> str:
        """Compute the LoginPassword proof from the current private key."""
        return hmac_md5_hex(self.session_store.private_key, challenge)

    def build_login_params(self, action: str, login_password: str = "") -> dict[str, str]:
        """Build Login parameters for the "request" or "login" phase."""
        return {
            "Action": action,
            "Captcha": "",
            "PrivateLogin": "LoginPassword",
            "Username": self.username,
            "LoginPassword": login_password,
        }

    @staticmethod
    def check_login_result(response: dict[str, str], phase: str) -> None:
        """
        Validate the LoginResult of a Login response.

        Raises:
            MotoAuthenticationError: If LoginResult is missing or FAILED
        """
        result: Optional[str] = response.get("LoginResult")
        if result is None or result == LOGIN_FAILED:
            logger.error(f"Login failed during {phase} phase (LoginResult={result})")
            raise MotoAuthenticationError(
                "Login failed",
                details={"phase": phase, "login_result": result},
            )

    def login(self, request_handler: "HNAPRequestHandler") -> dict[str, str]:
        """
        Log in to the modem.

        The first Login call requests a challenge; the derived private key and
        session uid are stored right away. The second call proves knowledge of
        the password without sending it.

        Note:
            If the second phase fails the new private key stays in the
            session store.

        Args:
            request_handler: Handler used to send the Login actions

        Returns:
            Final Login response map

        Raises:
            MotoAuthenticationError: If either phase reports failure
        """
        logger.info("🔐 Starting authentication...")
        self.authenticated = False

        params = self.build_login_params("request")
        challenge_resp = request_handler.invoke(LOGIN_ACTION, params)
        self.check_login_result(challenge_resp, "challenge")

        public_key = challenge_resp.get("PublicKey", "")
        challenge = challenge_resp.get("Challenge", "")

        self.session_store.private_key = self.compute_private_key(public_key, challenge)
        self.session_store.uid = challenge_resp.get("Cookie", "")

        params = self.build_login_params("login", self.compute_login_password(challenge))
        login_resp = request_handler.invoke(LOGIN_ACTION, params)
        self.check_login_result(login_resp, "login")

        self.authenticated = True
        logger.info(f"🎉 Authentication successful (LoginResult={login_resp['LoginResult']})")
        return login_resp
