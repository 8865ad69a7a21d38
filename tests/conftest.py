"""
Pytest fixtures shared across all test modules.

Provides:
- Vaadin-like bootstrap bodies in both quoting styles
- A TestClient wired to the mock bootstrap server
"""

import pytest
from fastapi.testclient import TestClient

from mock_server.main import create_app

SECURITY_KEY = "1b4e28ba-2fa1-11d2-883f-0016d3cca427"
PUSH_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture()
def double_quoted_body():
    """Bootstrap payload the way Flow serializes it (JSON, double quotes)."""
    return (
        "<script>window.Vaadin.appConfig = "
        '{"v-uiId":3,"uidl":{"Vaadin-Security-Key":"%s","Vaadin-Push-ID":"%s"}};'
        "</script>" % (SECURITY_KEY, PUSH_ID)
    )


@pytest.fixture()
def single_quoted_body():
    """Same payload as a JS object literal with single quotes and spacing."""
    return (
        "<script>var cfg = {'v-uiId' : 7, "
        "'Vaadin-Security-Key' : '%s', "
        "'Vaadin-Push-ID': '%s'};</script>" % (SECURITY_KEY, PUSH_ID)
    )


@pytest.fixture()
def client(monkeypatch):
    """TestClient for the mock server with env-driven defaults cleared."""
    monkeypatch.delenv("MOCK_PUSH_ENABLED", raising=False)
    monkeypatch.delenv("MOCK_QUOTE_STYLE", raising=False)
    with TestClient(create_app()) as c:
        yield c
