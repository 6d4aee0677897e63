"""Serialize processed documents and count their parameters."""

import json
import os
import tempfile
from pathlib import Path

from openapi_dedupe.errors import WriteError
from openapi_dedupe.normalizer.document import STANDARD_METHODS

COUNTED_METHODS = (*STANDARD_METHODS, "search")


def write_document(doc: dict, file_path: Path) -> None:
    """Write a document as pretty-printed JSON, replacing the target atomically."""
    try:
        content = json.dumps(doc, indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as e:
        raise WriteError(file_path, f"Cannot serialize output document: {e}") from e

    tmp_name = None
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=file_path.parent,
            prefix=f".{file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        os.replace(tmp_name, file_path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(file_path, f"Cannot write output document: {e}") from e


def count_parameters(doc: dict, merged: bool = False) -> int:
    """Count the parameters each operation receives.

    For a raw document every operation is charged its path-level parameters
    plus its own. With ``merged=True`` the operations already carry the
    path-level parameters, so only their own lists are counted.
    """
    paths = doc.get("paths")
    if not isinstance(paths, dict):
        return 0

    total = 0
    for path_item in paths.values():
        if not isinstance(path_item, dict):
            continue
        path_params = 0 if merged else len(path_item.get("parameters") or [])
        for method in COUNTED_METHODS:
            operation = path_item.get(method)
            if isinstance(operation, dict):
                total += path_params + len(operation.get("parameters") or [])
    return total
