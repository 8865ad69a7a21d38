from __future__ import annotations

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .extract import HeaderSource, get_jsessionid, get_push_id, get_security_key, get_ui_id

__all__ = [
    "REQUIRED_FIELDS",
    "BootstrapMetadata",
    "extract_bootstrap",
    "from_response",
]

# Push id is left out: pages without @Push never carry one.
REQUIRED_FIELDS: tuple[str, ...] = ("session_id", "security_key", "ui_id")


class BootstrapMetadata(BaseModel):
    """Identifiers a test client carries forward after loading a Vaadin page.

    Every field is optional; None means the response did not carry it.
    """

    model_config = ConfigDict(frozen=True)

    session_id: Optional[str] = None  # JSESSIONID cookie value
    security_key: Optional[str] = None  # Vaadin-Security-Key (CSRF token)
    push_id: Optional[str] = None  # Vaadin-Push-ID
    ui_id: Optional[int] = Field(None, ge=0)  # v-uiId

    @property
    def push_enabled(self) -> bool:
        return self.push_id is not None

    def missing(self, required: tuple[str, ...] = REQUIRED_FIELDS) -> list[str]:
        """Return the names in `required` whose value is absent, in order.

        Raises:
            ValueError: if a name is not a field of this model.
        """
        unknown = [name for name in required if name not in type(self).model_fields]
        if unknown:
            raise ValueError(f"unknown bootstrap field(s): {', '.join(unknown)}")
        return [name for name in required if getattr(self, name) is None]


def extract_bootstrap(headers: HeaderSource, html: str | None) -> BootstrapMetadata:
    """Run all four extractors over one bootstrap response's artifacts."""
    return BootstrapMetadata(
        session_id=get_jsessionid(headers),
        security_key=get_security_key(html),
        push_id=get_push_id(html),
        ui_id=get_ui_id(html),
    )


def from_response(response: httpx.Response) -> BootstrapMetadata:
    """Shortcut for `extract_bootstrap` over an httpx response."""
    return extract_bootstrap(response.headers, response.text)
