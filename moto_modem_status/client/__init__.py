"""
HNAP client components: session store, authenticator, request handler,
channel parser and the client facade that ties them together.
"""

from .auth import HNAPAuthenticator
from .http import KNOWN_ACTIONS, HNAPRequestHandler
from .main import MotoModemStatusClient
from .parser import decode_downstream, decode_upstream
from .session import SessionStore

__all__ = [
    "KNOWN_ACTIONS",
    "HNAPAuthenticator",
    "HNAPRequestHandler",
    "MotoModemStatusClient",
    "SessionStore",
    "decode_downstream",
    "decode_upstream",
]
