"""Stateless extractors for Vaadin UIDL load-test scripts.

The extractors pull the identifiers a test client has to thread through a
UIDL session (session cookie, security key, push id, UI id) out of raw
response artifacts. They never perform I/O and report absence as ``None``.
"""
from importlib.metadata import PackageNotFoundError, version

from .bootstrap import REQUIRED_FIELDS, BootstrapMetadata, extract_bootstrap, from_response
from .extract import get_jsessionid, get_push_id, get_security_key, get_ui_id

try:
    __version__ = version("vaadin-uidl-extract")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "REQUIRED_FIELDS",
    "BootstrapMetadata",
    "extract_bootstrap",
    "from_response",
    "get_jsessionid",
    "get_push_id",
    "get_security_key",
    "get_ui_id",
]
