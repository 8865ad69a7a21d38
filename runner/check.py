#!/usr/bin/env python3
"""Offline check of a saved Vaadin bootstrap response.

Steps:
- read the saved body (and header block, when given)
- run the UIDL extractors over them
- emit a compact JSON summary and an exit code

Exit codes: 0 all required identifiers present, 1 something missing,
2 the artifacts could not be read.
"""
from __future__ import annotations

import sys
from pathlib import Path

from runner.artifacts import read_body, read_headers
from runner.cli import parse_args
from runner.types import InspectError
from vaadin_uidl.bootstrap import REQUIRED_FIELDS, extract_bootstrap
from vaadin_uidl.logging_conf import get_logger, setup_logging

logger = get_logger("runner")

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_UNREADABLE = 2


def check_artifacts(
    *, body_path: Path, headers_path: Path | None = None, require_push: bool = False
) -> tuple[dict, int]:
    """Extract the bootstrap identifiers and compute a summary dict and exit code."""
    html = read_body(body_path)
    headers = read_headers(headers_path) if headers_path is not None else None
    meta = extract_bootstrap(headers, html)

    required = REQUIRED_FIELDS + (("push_id",) if require_push else ())
    missing = meta.missing(required)
    summary = {
        "event": "inspect_summary",
        **meta.model_dump(),
        "push_enabled": meta.push_enabled,
        "missing": missing,
    }
    return summary, EXIT_OK if not missing else EXIT_MISSING


def run(argv: list[str]) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        summary, exit_code = check_artifacts(
            body_path=Path(args.body),
            headers_path=Path(args.headers) if args.headers else None,
            require_push=args.require_push,
        )
    except InspectError as e:
        logger.error(
            "runner.error",
            extra={"event": "inspect_error", "error": str(e)},
        )
        return EXIT_UNREADABLE
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    raise SystemExit(run(argv if argv is not None else sys.argv[1:]))


if __name__ == "__main__":
    main()
