"""
Custom exceptions for Moto Modem Status Client.

This module defines all custom exceptions used throughout the moto-modem-status
library. All exceptions inherit from MotoModemError for easy catching of
library-specific errors.

Example usage:
    try:
        client = MotoModemStatusClient(password="wrong")
        client.login()
    except MotoAuthenticationError as e:
        print(f"Login failed: {e}")
    except MotoModemError as e:
        print(f"Modem error: {e}")
"""

from typing import Any, Optional


class MotoModemError(Exception):
    """
    Base exception for all Moto Modem Status Client errors.

    All exceptions include contextual details to help with debugging and
    monitoring integration.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary with additional error context
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class MotoConfigurationError(MotoModemError):
    """
    Raised when the client cannot be initialized.

    This exception is raised when:
    - Host or password is missing
    - The HNAP endpoint URL cannot be built from the host
    """


class MotoInvalidActionError(MotoModemError):
    """
    Raised when an HNAP action outside the known set is requested.

    Raised before any network traffic takes place.

    Attributes:
        details: Includes 'action'
    """


class MotoAuthenticationError(MotoModemError):
    """
    Raised when login with the modem fails.

    This exception is raised when:
    - The challenge response has no LoginResult or reports FAILED
    - The login response has no LoginResult or reports FAILED

    Attributes:
        details: Includes 'phase' (challenge/login) and 'login_result'
    """


class MotoConnectionError(MotoModemError):
    """
    Raised when the transport to the modem fails.

    This exception is raised when:
    - Network connection cannot be established
    - Modem is unreachable
    - SSL/TLS handshake fails

    Attributes:
        details: May include 'host', 'error_type', 'original_error'
    """


class MotoTimeoutError(MotoConnectionError):
    """
    Raised when a caller-supplied timeout expires while talking to the modem.

    Attributes:
        details: May include 'operation', 'timeout'
    """


class MotoHTTPError(MotoModemError):
    """
    Raised when the modem answers with a non-200 HTTP status.

    Attributes:
        details: May include 'action', 'status_code', 'response_text'
        status_code: HTTP status code
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        if status_code and self.details is not None:
            self.details["status_code"] = status_code


class MotoParsingError(MotoModemError):
    """Raised when data returned by the modem cannot be parsed."""


class MotoMalformedResponseError(MotoParsingError):
    """
    Raised when an HNAP response body is not the expected JSON envelope.

    The envelope is a JSON object of the form {"<Action>Response": {...}}.

    Attributes:
        details: May include 'action', 'parse_error', 'response_text'
    """


class MotoNoResponseError(MotoMalformedResponseError):
    """
    Raised when the "<Action>Response" key is missing from the envelope.

    Attributes:
        details: Includes 'action' and 'keys' found in the body
    """


class MotoMalformedRecordError(MotoParsingError):
    """
    Raised when a channel record cannot be decoded.

    This exception is raised when:
    - A record has too many or too few '^' separated fields
    - A numeric field does not parse

    Attributes:
        details: May include 'channel_type', 'record', 'field', 'value'
    """


def wrap_connection_error(original_error: Exception, host: str) -> MotoConnectionError:
    """
    Wrap a transport exception in MotoConnectionError.

    Args:
        original_error: The original exception
        host: Host that failed to connect

    Returns:
        MotoConnectionError with context
    """
    message = f"Failed to connect to {host}"

    if isinstance(original_error, ConnectionRefusedError) or "refused" in str(original_error).lower():
        message = f"Connection refused by {host} - modem may be offline or web interface disabled"

    return MotoConnectionError(
        message,
        details={
            "host": host,
            "error_type": type(original_error).__name__,
            "original_error": str(original_error),
        },
    )


__all__ = [
    "MotoAuthenticationError",
    "MotoConfigurationError",
    "MotoConnectionError",
    "MotoHTTPError",
    "MotoInvalidActionError",
    "MotoMalformedRecordError",
    "MotoMalformedResponseError",
    "MotoModemError",
    "MotoNoResponseError",
    "MotoParsingError",
    "MotoTimeoutError",
    "wrap_connection_error",
]
