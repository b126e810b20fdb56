"""Listing pipeline composing the prefix filter, collapser and content filter."""

from collections.abc import Iterable
from typing import Optional

from bucket_listing.core import get_logger, get_tracer

from .content_filter import filter_entries_by_common_prefixes
from .models import Entry, ListingResult
from .prefix_collapser import collapse_common_prefixes
from .prefix_filter import filter_by_prefix

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def list_entries(
    entries: Iterable[Entry],
    prefix: Optional[str] = None,
    delimiter: Optional[str] = None,
) -> ListingResult:
    """List a snapshot the way an object store answers a list-bucket request.

    Args:
        entries: Flat snapshot of a bucket
        prefix: Only keys starting with this prefix are listed
        delimiter: Keys sharing a segment up to this delimiter are collapsed

    Returns:
        ListingResult with the common prefixes and the remaining entries

    Example:
        >>> result = list_entries(snapshot, prefix="b/", delimiter="/")
        >>> sorted(result.common_prefixes)
        ['b/1/']
    """
    with tracer.start_as_current_span("list_entries") as span:
        span.set_attribute("listing.prefix", prefix or "")
        span.set_attribute("listing.delimiter", delimiter or "")

        matching = filter_by_prefix(entries, prefix)
        common_prefixes = collapse_common_prefixes(prefix, delimiter, matching)
        remaining = filter_entries_by_common_prefixes(matching, common_prefixes)

        span.set_attribute("listing.entry_count", len(remaining))
        span.set_attribute("listing.common_prefix_count", len(common_prefixes))

    logger.info(
        "Entries listed",
        prefix=prefix,
        delimiter=delimiter,
        matching_count=len(matching),
        entry_count=len(remaining),
        common_prefix_count=len(common_prefixes),
    )
    return ListingResult(
        common_prefixes=frozenset(common_prefixes),
        entries=tuple(remaining),
        prefix=prefix,
        delimiter=delimiter,
    )
