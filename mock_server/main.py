"""FastAPI app factory: health endpoint plus a Vaadin-like bootstrap page."""
from __future__ import annotations

import os
from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI, Query, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse

from mock_server.page import QuoteStyle, render_bootstrap_page
from vaadin_uidl.logging_conf import get_logger, setup_logging

setup_logging()
logger = get_logger("mock_server")


def push_enabled_from_env() -> bool:
    """Return MOCK_PUSH_ENABLED from environment, defaulting to true."""
    return os.getenv("MOCK_PUSH_ENABLED", "true").strip().lower() not in {"0", "false", "no", "off"}


def quote_style_from_env() -> QuoteStyle:
    """Return MOCK_QUOTE_STYLE from environment, defaulting to double quotes."""
    raw = os.getenv("MOCK_QUOTE_STYLE", QuoteStyle.double.value)
    try:
        return QuoteStyle(raw.strip().lower())
    except ValueError as e:
        raise ValueError("MOCK_QUOTE_STYLE must be 'double' or 'single'") from e


def new_session_token() -> str:
    """Mint a servlet-container style session id (32 upper-case hex chars)."""
    return uuid4().hex.upper()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Vaadin bootstrap mock",
        version=os.getenv("APP_VERSION", "0.1.0"),
    )

    @app.middleware("http")
    async def request_id(request: Request, call_next: Callable[[Request], Response]):
        """Echo the caller's X-Request-ID (or a fresh one) so load-test traces line up."""
        rid = request.headers.get("X-Request-ID") or str(uuid4())
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        logger.info(
            "request.end",
            extra={"event": "request_end", "path": request.url.path, "status_code": response.status_code, "request_id": rid},
        )
        return response

    @app.get("/health", summary="Liveness/readiness check")
    async def health() -> JSONResponse:
        return JSONResponse(content={"ok": True})

    @app.get("/", response_class=HTMLResponse, summary="Bootstrap page")
    async def bootstrap(
        push: bool | None = Query(None, description="Emit a Vaadin-Push-ID (env: MOCK_PUSH_ENABLED)"),
        quote: QuoteStyle | None = Query(None, description="Quote style of the inline config"),
        ui_id: int = Query(0, ge=0, description="Value emitted as v-uiId"),
    ) -> HTMLResponse:
        push = push_enabled_from_env() if push is None else push
        quote = quote or quote_style_from_env()
        security_key = str(uuid4())
        push_id = str(uuid4()) if push else None

        html = render_bootstrap_page(
            security_key=security_key, push_id=push_id, ui_id=ui_id, quote=quote
        )
        response = HTMLResponse(content=html)
        response.set_cookie("JSESSIONID", new_session_token(), path="/", httponly=True)
        logger.info(
            "bootstrap.served",
            extra={"event": "bootstrap_served", "push": push, "quote": quote.value, "ui_id": ui_id},
        )
        return response

    return app


# ASGI entrypoint for uvicorn: `uvicorn mock_server.main:app --port 8080`
app = create_app()
