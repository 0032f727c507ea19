from unittest.mock import patch

import pytest

from moto_modem_status import MotoModemStatusClient
from moto_modem_status.time_utils import fixed_clock

from sample_data import (
    ADDRESS,
    CHALLENGE,
    DOWNSTREAM_RESPONSE,
    PASSWORD,
    PUBLIC_KEY,
    TIMESTAMP,
    UPSTREAM_RESPONSE,
    USERNAME,
    ok_response,
)


@pytest.fixture
def mock_modem_responses():
    """Fixture providing mock modem responses."""
    return {
        "challenge_response": {
            "LoginResponse": {
                "Challenge": CHALLENGE,
                "Cookie": "1738371436",
                "PublicKey": PUBLIC_KEY,
                "LoginResult": "OK",
            }
        },
        "login_success": {"LoginResponse": {"LoginResult": "OK"}},
        "login_failure": {"LoginResponse": {"LoginResult": "FAILED"}},
        "login_missing_result": {"LoginResponse": {"Challenge": CHALLENGE}},
        "downstream": {
            "GetMotoStatusDownstreamChannelInfoResponse": {
                "MotoConnDownstreamChannel": DOWNSTREAM_RESPONSE,
                "GetMotoStatusDownstreamChannelInfoResult": "OK",
            }
        },
        "upstream": {
            "GetMotoStatusUpstreamChannelInfoResponse": {
                "MotoConnUpstreamChannel": UPSTREAM_RESPONSE,
                "GetMotoStatusUpstreamChannelInfoResult": "OK",
            }
        },
    }


@pytest.fixture
def client():
    """Client with a fixed clock, closed after the test."""
    with MotoModemStatusClient(
        password=PASSWORD,
        username=USERNAME,
        host=ADDRESS,
        clock=fixed_clock(TIMESTAMP),
    ) as c:
        yield c


@pytest.fixture
def mock_post():
    """Patch requests.Session.post for the duration of a test."""
    with patch("requests.Session.post") as mocked:
        yield mocked


@pytest.fixture
def mock_successful_auth_flow(mock_post, mock_modem_responses):
    """Mock successful two-phase login."""
    mock_post.side_effect = [
        ok_response(mock_modem_responses["challenge_response"]),
        ok_response(mock_modem_responses["login_success"]),
    ]
    return mock_post
