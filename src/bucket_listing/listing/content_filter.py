"""Removal of entries absorbed into a common prefix."""

from collections.abc import Iterable

from .models import Entry


def filter_entries_by_common_prefixes(
    entries: Iterable[Entry], common_prefixes: Iterable[str]
) -> list[Entry]:
    """Drop every entry whose key falls under one of ``common_prefixes``.

    Entries that are kept are the same objects that were passed in. A key
    equal to a common prefix (a zero-length "directory marker") is dropped
    as well, since it starts with itself.

    Args:
        entries: Entries to filter, normally already filtered by prefix
        common_prefixes: Common prefixes to exclude

    Returns:
        Entries to report individually, in input order
    """
    excluded = tuple(common_prefixes)
    if not excluded:
        return list(entries)
    return [entry for entry in entries if not entry.key.startswith(excluded)]
