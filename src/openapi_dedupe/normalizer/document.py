"""Document-level orchestration of the normalization passes."""

import copy

from openapi_dedupe.normalizer.parameters import deduplicate
from openapi_dedupe.normalizer.paths import normalize_search
from openapi_dedupe.report import Reporter

STANDARD_METHODS = ("get", "post", "put", "delete", "patch", "head", "options", "trace")


def process_operation(operation: dict, path_parameters: list[dict]) -> dict:
    """Merge path-level parameters into an operation and deduplicate them."""
    merged = deduplicate([*path_parameters, *(operation.get("parameters") or [])])
    if merged:
        operation["parameters"] = merged
    else:
        operation.pop("parameters", None)
    return operation


def process_document(doc: dict, reporter: Reporter | None = None) -> dict:
    """Return a normalized deep copy of an OpenAPI document.

    The input is never mutated. Path-level ``parameters`` stay in place
    after being merged into each operation.
    """
    processed = copy.deepcopy(doc)
    paths = processed.get("paths")
    if not isinstance(paths, dict):
        return processed

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue

        normalize_search(path, path_item, reporter)

        path_parameters = path_item.get("parameters") or []
        for method in STANDARD_METHODS:
            if isinstance(path_item.get(method), dict):
                process_operation(path_item[method], path_parameters)

    return processed
