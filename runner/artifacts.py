from __future__ import annotations

from pathlib import Path

import httpx

from runner.types import ArtifactError

__all__ = ["parse_header_block", "read_body", "read_headers"]


def _require_file(path: Path) -> None:
    if not path.is_file():
        raise ArtifactError(f"artifact not found: {path}")


def parse_header_block(text: str) -> httpx.Headers:
    """Parse a raw ``Name: value`` header block into httpx headers.

    - A leading ``HTTP/1.1 200 OK`` status line is skipped
    - Blank lines and lines without a colon are ignored
    - Repeated names (several Set-Cookie lines) are all kept
    """
    pairs: list[tuple[str, str]] = []
    for line in text.splitlines():
        if not line.strip() or line.startswith("HTTP/"):
            continue
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            continue
        pairs.append((name.strip(), value.strip()))
    return httpx.Headers(pairs, encoding="utf-8")


def read_headers(path: Path) -> httpx.Headers:
    _require_file(path)
    return parse_header_block(path.read_text(encoding="utf-8", errors="replace"))


def read_body(path: Path) -> str:
    """Return the saved page body; undecodable bytes are replaced, not fatal."""
    _require_file(path)
    return path.read_text(encoding="utf-8", errors="replace")
