"""OpenAPI document loader.

Reads a JSON or YAML document fully into memory as a mutable dict tree.
"""

import json
from pathlib import Path

import yaml

from openapi_dedupe.errors import InputError, ParseError

YAML_SUFFIXES = (".yaml", ".yml")

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _JsonSafeLoader(yaml.SafeLoader):
    """SafeLoader that keeps dates and timestamps as plain strings."""


_JsonSafeLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def detect_format(file_path: Path, text: str | None = None) -> str:
    """Detect whether a document is JSON or YAML.

    Returns: 'json' or 'yaml'.
    """
    if file_path.suffix.lower() in YAML_SUFFIXES:
        return "yaml"
    if file_path.suffix.lower() == ".json":
        return "json"
    if text is not None and text.lstrip().startswith("{"):
        return "json"
    return "yaml"


def load_document(file_path: Path) -> dict:
    """Read and parse an OpenAPI document into a dict."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(file_path, f"Cannot read input document: {e}") from e

    fmt = detect_format(file_path, text)
    try:
        if fmt == "json":
            doc = json.loads(text)
        else:
            doc = yaml.load(text, Loader=_JsonSafeLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ParseError(file_path, f"Invalid {fmt.upper()} document: {e}") from e

    if not isinstance(doc, dict):
        raise ParseError(file_path, "Top-level value must be a mapping")
    return doc
