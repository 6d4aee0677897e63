"""Parameter deduplication for merged path-level and operation-level lists.

Two parameters are the same parameter when they share a ``$ref`` or the
same ``in`` + ``name`` pair, regardless of schema differences. When
duplicates disagree, the more complete declaration is kept.
"""

import json


def parameter_key(param: dict) -> tuple:
    """Build the identity key for a parameter."""
    if param.get("$ref"):
        return ("$ref", param["$ref"])

    location = param.get("in") or ""
    name = param.get("name") or ""

    if not location or not name:
        # Malformed entry: fold the schema in so unrelated entries don't collide
        schema = param.get("schema") or {}
        if isinstance(schema, dict) and schema.get("$ref"):
            fingerprint = f"schema:$ref:{schema['$ref']}"
        else:
            fingerprint = json.dumps(schema, sort_keys=True, default=str)
        return ("inline", location, name, fingerprint)

    return ("inline", location, name)


def _schema_size(param: dict) -> int:
    schema = param.get("schema")
    return len(schema) if isinstance(schema, dict) else 0


def choose_better(existing: dict, new: dict) -> dict:
    """Pick the parameter to keep from two duplicates.

    Rules, first match wins: a ``$ref`` beats an inline declaration, then
    the larger schema, then a non-empty description, then more fields
    overall. Ties keep ``existing``.
    """
    if bool(existing.get("$ref")) != bool(new.get("$ref")):
        return existing if existing.get("$ref") else new

    existing_schema, new_schema = _schema_size(existing), _schema_size(new)
    if existing_schema != new_schema:
        return existing if existing_schema > new_schema else new

    if bool(existing.get("description")) != bool(new.get("description")):
        return existing if existing.get("description") else new

    if len(existing) != len(new):
        return existing if len(existing) > len(new) else new

    return existing


def deduplicate(parameters: list[dict] | None) -> list[dict]:
    """Remove duplicate parameters, keeping first-seen positions."""
    if not parameters:
        return []

    seen: dict[tuple, int] = {}
    result: list[dict] = []

    for param in parameters:
        key = parameter_key(param)
        if key not in seen:
            seen[key] = len(result)
            result.append(param)
            continue

        index = seen[key]
        result[index] = choose_better(result[index], param)

    return result
