"""Errors raised at the load/store boundaries of a dedupe run."""

from pathlib import Path


class DedupeError(Exception):
    """Base class for failures that abort a run."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{message} ({path})")


class InputError(DedupeError):
    """Source document is missing or unreadable."""


class ParseError(DedupeError):
    """Source content is not a valid JSON/YAML mapping."""


class WriteError(DedupeError):
    """Destination cannot be written."""
