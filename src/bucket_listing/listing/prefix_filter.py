"""Restriction of a snapshot to the keys under a prefix."""

from collections.abc import Iterable
from typing import Optional

from .models import Entry


def filter_by_prefix(entries: Iterable[Entry], prefix: Optional[str]) -> list[Entry]:
    """Keep only the entries whose key starts with ``prefix``.

    A missing or empty prefix matches every entry.

    Args:
        entries: Snapshot of entries
        prefix: Requested key prefix

    Returns:
        Entries under the prefix, in input order
    """
    if not prefix:
        return list(entries)
    return [entry for entry in entries if entry.key.startswith(prefix)]
