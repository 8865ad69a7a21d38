from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the bootstrap inspection runner."""
    parser = argparse.ArgumentParser(
        description="Extract Vaadin UIDL session identifiers from saved response artifacts"
    )
    parser.add_argument(
        "--body",
        default=os.getenv("UIDL_BODY"),
        required=os.getenv("UIDL_BODY") is None,
        help="File holding the bootstrap page body (env: UIDL_BODY)",
    )
    parser.add_argument(
        "--headers",
        default=os.getenv("UIDL_HEADERS"),
        help="File holding the raw response header block (env: UIDL_HEADERS)",
    )
    parser.add_argument(
        "--require-push",
        action="store_true",
        help="Treat a missing Vaadin-Push-ID as a failure",
    )
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
    return parser.parse_args(argv)
