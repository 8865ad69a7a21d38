from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Optional, Union

import httpx

__all__ = [
    "HeaderSource",
    "get_jsessionid",
    "get_security_key",
    "get_push_id",
    "get_ui_id",
]

HeaderSource = Union[
    httpx.Response,
    httpx.Headers,
    Mapping[str, Optional[str]],
    Sequence[tuple[str, Optional[str]]],
    str,
    None,
]

# Canonical 8-4-4-4-12 grouping; only the hex digits are case-insensitive.
_UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

_JSESSIONID_RE = re.compile(r"JSESSIONID=([^;]+)")
_UI_ID_RE = re.compile(r"""["']v-uiId["']\s*:\s*([0-9]+)""")


def _labeled_uuid(label: str) -> re.Pattern[str]:
    """Compile a ``"<label>": "<uuid>"`` pattern capturing the UUID."""
    return re.compile(rf"""["']{re.escape(label)}["']\s*:\s*["']({_UUID})["']""")


_SECURITY_KEY_RE = _labeled_uuid("Vaadin-Security-Key")
_PUSH_ID_RE = _labeled_uuid("Vaadin-Push-ID")


def _first_group(pattern: re.Pattern[str], text: str | None) -> str | None:
    if not text:
        return None
    m = pattern.search(text)
    return m.group(1) if m else None


def _set_cookie_values(source: HeaderSource) -> list[str]:
    """Return every Set-Cookie value carried by `source`, in order.

    A bare string is treated as the cookie header value itself. Entries
    whose value is None count as absent.
    """
    if source is None:
        return []
    if isinstance(source, str):
        return [source]
    if isinstance(source, httpx.Response):
        source = source.headers
    if not isinstance(source, httpx.Headers):
        pairs = source.items() if isinstance(source, Mapping) else source
        # httpx defaults to ascii; cookie attributes may carry any text
        source = httpx.Headers(
            [(name, value) for name, value in pairs if value is not None], encoding="utf-8"
        )
    return source.get_list("set-cookie")


def get_jsessionid(headers: HeaderSource) -> str | None:
    """Return the JSESSIONID cookie value or None if it is not set.

    - Header names are looked up case-insensitively; the cookie name is not
    - Several Set-Cookie headers are scanned in order, first match wins
    - The value stops at the next ``;`` (cookie attributes are dropped)
    """
    for value in _set_cookie_values(headers):
        token = _first_group(_JSESSIONID_RE, value)
        if token is not None:
            return token
    return None


def get_security_key(html: str | None) -> str | None:
    """Return the Vaadin CSRF security key from a bootstrap page, case preserved."""
    return _first_group(_SECURITY_KEY_RE, html)


def get_push_id(html: str | None) -> str | None:
    """Return the Vaadin push-channel id from a bootstrap page.

    Pages served without push support carry no push id; that is not an error.
    """
    return _first_group(_PUSH_ID_RE, html)


def get_ui_id(html: str | None) -> int | None:
    """Return the numeric UI id. ``0`` is a valid id, distinct from None."""
    digits = _first_group(_UI_ID_RE, html)
    return int(digits) if digits is not None else None
