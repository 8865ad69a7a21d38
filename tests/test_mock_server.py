# ==============================================================================
# Tests for the mock bootstrap server
# ==============================================================================
"""
End-to-end tests: real httpx responses from the mock server fed to the
extractors.

Tests cover:
- Health endpoint
- Session cookie, security key and UI id on the bootstrap page
- Push id toggled by query parameter and environment
- Single-quoted rendering
- Request id propagation and query validation
"""

import uuid

import pytest

from mock_server.main import quote_style_from_env
from mock_server.page import QuoteStyle, render_bootstrap_page
from vaadin_uidl import from_response, get_jsessionid, get_push_id, get_security_key, get_ui_id


class TestHealth:
    def test_ok(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"ok": True}


class TestBootstrapPage:
    """The page carries every identifier the extractors look for."""

    def test_default_page(self, client):
        r = client.get("/")
        assert r.status_code == 200
        meta = from_response(r)
        assert meta.session_id is not None
        assert len(meta.session_id) == 32
        assert uuid.UUID(meta.security_key)
        assert meta.push_enabled
        assert meta.ui_id == 0
        assert meta.missing() == []

    def test_cookie_attributes_not_included(self, client):
        r = client.get("/")
        assert "HttpOnly" in r.headers["set-cookie"]
        assert ";" not in get_jsessionid(r)

    def test_push_disabled_by_query(self, client):
        r = client.get("/", params={"push": "false"})
        assert get_push_id(r.text) is None
        assert get_security_key(r.text) is not None

    def test_push_disabled_by_env(self, client, monkeypatch):
        monkeypatch.setenv("MOCK_PUSH_ENABLED", "off")
        assert get_push_id(client.get("/").text) is None

    def test_single_quotes(self, client):
        r = client.get("/", params={"quote": "single", "ui_id": 12})
        assert "'Vaadin-Security-Key'" in r.text
        assert get_security_key(r.text) is not None
        assert get_push_id(r.text) is not None
        assert get_ui_id(r.text) == 12

    def test_fresh_tokens_per_request(self, client):
        first = from_response(client.get("/"))
        second = from_response(client.get("/"))
        assert first.security_key != second.security_key
        assert first.session_id != second.session_id

    def test_request_id_is_echoed(self, client):
        r = client.get("/", headers={"X-Request-ID": "req-1"})
        assert r.headers["X-Request-ID"] == "req-1"

    def test_negative_ui_id_rejected(self, client):
        assert client.get("/", params={"ui_id": -1}).status_code == 422


class TestRendering:
    """Direct rendering, without HTTP."""

    def test_push_id_omitted(self):
        html = render_bootstrap_page(security_key=str(uuid.uuid4()), push_id=None, ui_id=5)
        assert "Vaadin-Push-ID" not in html
        assert get_ui_id(html) == 5

    def test_quote_style_env(self, monkeypatch):
        monkeypatch.setenv("MOCK_QUOTE_STYLE", "Single")
        assert quote_style_from_env() is QuoteStyle.single

    def test_bad_quote_style_env(self, monkeypatch):
        monkeypatch.setenv("MOCK_QUOTE_STYLE", "backtick")
        with pytest.raises(ValueError, match="MOCK_QUOTE_STYLE"):
            quote_style_from_env()
