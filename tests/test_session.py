"""Tests for cookie-backed session state."""

import pytest
import requests
from requests.cookies import RequestsCookieJar

from moto_modem_status import MotoConfigurationError
from moto_modem_status.client.session import (
    DEFAULT_PRIVATE_KEY,
    DEFAULT_UID,
    PRIVATE_KEY_COOKIE,
    SessionStore,
)

HNAP_URL = "https://192.168.100.1/HNAP1/"


@pytest.fixture
def store():
    return SessionStore(RequestsCookieJar(), HNAP_URL)


@pytest.mark.unit
class TestSessionStore:
    """Test SessionStore get/set semantics."""

    def test_defaults(self, store):
        assert store.private_key == DEFAULT_PRIVATE_KEY == "withoutloginkey"
        assert store.uid == DEFAULT_UID == ""

    def test_get_default_for_unknown_name(self, store):
        assert store.get("missing", "fallback") == "fallback"

    def test_set_private_key(self, store):
        store.private_key = "test"

        assert store.private_key == "test"

    def test_set_uid(self, store):
        store.uid = "1738371436"

        assert store.uid == "1738371436"

    def test_overwrite(self, store):
        store.private_key = "first"
        store.private_key = "second"

        assert store.private_key == "second"

    def test_cookie_scoped_to_host_and_root_path(self, store):
        store.set("uid", "abc")

        cookie = next(iter(store.cookies))
        assert cookie.domain == "192.168.100.1"
        assert cookie.path == "/"

    def test_ignores_other_hosts(self, store):
        store.cookies.set(PRIVATE_KEY_COOKIE, "other", domain="10.0.0.1", path="/")

        assert store.private_key == DEFAULT_PRIVATE_KEY

    def test_ignores_other_paths(self, store):
        store.cookies.set(PRIVATE_KEY_COOKIE, "deep", domain="192.168.100.1", path="/HNAP1/")

        assert store.private_key == DEFAULT_PRIVATE_KEY

    def test_clear(self, store):
        store.private_key = "key"
        store.uid = "uid"

        store.clear()

        assert store.private_key == DEFAULT_PRIVATE_KEY
        assert store.uid == DEFAULT_UID

    def test_clear_when_empty(self, store):
        store.clear()

        assert store.private_key == DEFAULT_PRIVATE_KEY

    def test_host_with_port(self):
        store = SessionStore(RequestsCookieJar(), "https://192.168.100.1:8443/HNAP1/")

        assert store.domain == "192.168.100.1"

    def test_url_without_host(self):
        with pytest.raises(MotoConfigurationError):
            SessionStore(RequestsCookieJar(), "https:///HNAP1/")

    def test_cookies_sent_to_modem(self):
        session = requests.Session()
        store = SessionStore(session.cookies, HNAP_URL)
        store.uid = "1738371436"
        store.private_key = "ABCDEF"

        prepared = session.prepare_request(requests.Request("POST", HNAP_URL))

        assert "uid=1738371436" in prepared.headers["Cookie"]
        assert "PrivateKey=ABCDEF" in prepared.headers["Cookie"]
        session.close()
