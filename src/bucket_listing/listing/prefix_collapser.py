"""Collapsing of keys into common prefixes.

A common prefix is the requested prefix extended up to and including the
first delimiter found after it. For keys ``photos/2023/a.jpg`` and
``photos/2024/b.jpg`` listed with prefix ``photos/`` and delimiter ``/`` the
common prefixes are ``photos/2023/`` and ``photos/2024/``.

Only one level is collapsed per call: anything nested below the first
delimiter is absorbed into the same common prefix. Listing a deeper level
means calling again with a longer prefix.
"""

from collections.abc import Iterable
from typing import Optional

from .models import Entry


def collapse_common_prefixes(
    prefix: Optional[str], delimiter: Optional[str], entries: Iterable[Entry]
) -> set[str]:
    """Compute the common prefixes of ``entries`` for a prefix and delimiter.

    Args:
        prefix: Requested key prefix, None or empty for the whole namespace
        delimiter: Segment delimiter, None or empty disables collapsing
        entries: Entries to collapse, normally already filtered by prefix

    Returns:
        Set of common prefixes, each ending with the delimiter
    """
    common_prefixes: set[str] = set()
    if not delimiter:
        return common_prefixes

    effective_prefix = prefix or ""
    for entry in entries:
        key = entry.key
        # Tolerate unfiltered input
        if not key.startswith(effective_prefix):
            continue

        remainder = key[len(effective_prefix) :]
        index = remainder.find(delimiter)
        if index >= 0:
            common_prefixes.add(
                effective_prefix + remainder[: index + len(delimiter)]
            )

    return common_prefixes
