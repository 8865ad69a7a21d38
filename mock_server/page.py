from __future__ import annotations

import json
from enum import Enum
from typing import Any

__all__ = ["QuoteStyle", "render_bootstrap_page"]


class QuoteStyle(str, Enum):
    double = "double"
    single = "single"


def _literal(value: Any, quote: QuoteStyle) -> str:
    if isinstance(value, str):
        q = '"' if quote is QuoteStyle.double else "'"
        return f"{q}{value}{q}"
    return json.dumps(value)


def _object(fields: dict[str, Any], quote: QuoteStyle) -> str:
    parts = [f"{_literal(k, quote)}: {_literal(v, quote)}" for k, v in fields.items()]
    return "{" + ", ".join(parts) + "}"


def render_bootstrap_page(
    *, security_key: str, push_id: str | None, ui_id: int, quote: QuoteStyle = QuoteStyle.double
) -> str:
    """Render an HTML page shaped like a Vaadin Flow bootstrap response.

    The push id is only emitted when `push_id` is given, as for an app
    without @Push.
    """
    uidl: dict[str, Any] = {"Vaadin-Security-Key": security_key}
    if push_id is not None:
        uidl["Vaadin-Push-ID"] = push_id
    uidl["syncId"] = 0
    uidl["clientId"] = 0
    config = {"v-uiId": ui_id, "heartbeatInterval": 300, "requestURL": "./"}
    script = (
        "window.Vaadin = window.Vaadin || {};\n"
        f"window.Vaadin.appConfig = {_object(config, quote)};\n"
        f"window.Vaadin.uidl = {_object(uidl, quote)};\n"
    )
    return (
        "<!doctype html>\n"
        "<html lang=\"en\">\n"
        "<head><meta charset=\"UTF-8\"><title>Vaadin</title></head>\n"
        "<body>\n"
        "<div id=\"outlet\"></div>\n"
        f"<script>\n{script}</script>\n"
        "</body>\n"
        "</html>\n"
    )
