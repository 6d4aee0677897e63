"""Normalization of the non-standard ``search`` verb on a path item."""

from openapi_dedupe.report import Reporter

RENAMED = "renamed"
DROPPED = "dropped"


def normalize_search(path: str, path_item: dict, reporter: Reporter | None = None) -> str | None:
    """Rename ``search`` to ``post``, or drop it when ``post`` already exists.

    An empty ``{}`` operation counts as present; only a missing or null
    slot is absent. Returns the action taken, or None when there was no
    ``search`` operation.
    """
    if "search" not in path_item:
        return None

    search = path_item.pop("search")
    if search is None:
        return None

    if path_item.get("post") is None:
        path_item["post"] = search
        if reporter:
            reporter.info(f'  Renamed "search" to "post" in path: {path}')
        return RENAMED

    if reporter:
        reporter.info(f'  Dropped "search" method (post already exists) in path: {path}')
    return DROPPED
