"""
HTTP Request Handling for Moto Modem Status Client
==================================================

This module sends signed HNAP actions to the modem and unwraps the JSON
response envelope.

"""

import json
import logging
from typing import Any, Optional, Union

import requests

from moto_modem_status.client.auth import SOAP_NAMESPACE, HNAPAuthenticator
from moto_modem_status.exceptions import (
    MotoHTTPError,
    MotoInvalidActionError,
    MotoMalformedResponseError,
    MotoNoResponseError,
    MotoTimeoutError,
    wrap_connection_error,
)

logger = logging.getLogger("moto-modem-status")

KNOWN_ACTIONS = (
    "Login",
    "GetHomeConnection",
    "GetHomeAddress",
    "GetMotoStatusSoftware",
    "GetMotoStatusLog",
    "GetMotoLagStatus",
    "GetMotoStatusConnectionInfo",
    "GetMotoStatusDownstreamChannelInfo",
    "GetMotoStatusStartupSequence",
    "GetMotoStatusUpstreamChannelInfo",
)

Timeout = Optional[Union[float, tuple[float, float]]]


class HNAPRequestHandler:
    """Performs signed HNAP actions against the modem."""

    def __init__(
        self,
        session: requests.Session,
        hnap_url: str,
        authenticator: HNAPAuthenticator,
        timeout: Timeout = None,
    ):
        """
        Initialize HNAP request handler.

        Args:
            session: HTTP session to use (shares its cookie jar with the session store)
            hnap_url: Full HNAP endpoint URL, e.g. "https://192.168.100.1/HNAP1/"
            authenticator: Signs each action
            timeout: Optional requests timeout; None waits indefinitely
        """
        self.session = session
        self.hnap_url = hnap_url
        self.authenticator = authenticator
        self.timeout = timeout

    def build_headers(self, action: str) -> dict[str, str]:
        """Build the request headers, signing the action exactly once."""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "SOAPAction": f"{SOAP_NAMESPACE}{action}",
            "HNAP_AUTH": self.authenticator.auth_header(action),
        }

    def invoke(self, action: str, params: Optional[dict[str, str]] = None) -> dict[str, str]:
        """
        Invoke an HNAP action.

        Args:
            action: HNAP action name, one of KNOWN_ACTIONS
            params: Action parameters; None is treated as empty

        Returns:
            Contents of the "<action>Response" object

        Raises:
            MotoInvalidActionError: If action is unknown (no request is made)
            MotoConnectionError: If the transport fails
            MotoTimeoutError: If the request times out
            MotoHTTPError: If the modem answers with a status other than 200
            MotoMalformedResponseError: If the body is not the expected envelope
            MotoNoResponseError: If "<action>Response" is missing
        """
        if action not in KNOWN_ACTIONS:
            raise MotoInvalidActionError(f"Invalid action: {action}", details={"action": action})

        if params is None:
            params = {}

        body = json.dumps({action: params})
        headers = self.build_headers(action)

        logger.debug(f"📤 HNAP: {action} -> {self.hnap_url}")
        response = self._post(action, body, headers)

        logger.debug(f"📥 HNAP: {action} status {response.status_code}")
        if response.status_code != 200:
            raise MotoHTTPError(
                f"Action {action} received non-OK status code: {response.status_code}",
                status_code=response.status_code,
                details={"action": action, "response_text": str(response.text)[:500]},
            )

        return self._unwrap(action, str(response.text))

    def _post(self, action: str, body: str, headers: dict[str, str]) -> requests.Response:
        """POST to the HNAP endpoint, translating transport failures."""
        try:
            return self.session.post(
                self.hnap_url,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise MotoTimeoutError(
                f"Request to {action} timed out",
                details={"operation": action, "timeout": self.timeout},
            ) from e
        except requests.exceptions.RequestException as e:
            logger.debug(f"🔧 Transport error for {action}: {e}")
            host = self.hnap_url.split("://")[-1].split("/")[0]
            raise wrap_connection_error(e, host) from e

    def _unwrap(self, action: str, response_text: str) -> dict[str, str]:
        """Extract the "<action>Response" mapping from a response body."""
        try:
            data: Any = json.loads(response_text)
        except json.JSONDecodeError as e:
            raise MotoMalformedResponseError(
                f"Response to {action} is not valid JSON",
                details={"action": action, "parse_error": str(e), "response_text": response_text[:200]},
            ) from e

        if not isinstance(data, dict):
            raise MotoMalformedResponseError(
                f"Response to {action} is not a JSON object",
                details={"action": action, "response_text": response_text[:200]},
            )

        key = f"{action}Response"
        if key not in data:
            raise MotoNoResponseError(
                "No response from modem",
                details={"action": action, "keys": sorted(data)},
            )

        value = data[key]
        if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
            raise MotoMalformedResponseError(
                f"{key} is not a JSON object of strings",
                details={"action": action, "response_text": response_text[:200]},
            )

        return value
