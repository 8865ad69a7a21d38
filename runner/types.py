from __future__ import annotations


class InspectError(RuntimeError):
    """Raised when the inspection run cannot proceed (e.g., unreadable input)."""


class ArtifactError(InspectError):
    """Raised when a saved response artifact is missing or not a regular file."""
