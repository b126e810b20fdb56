"""Prefix and delimiter listing over a flat key namespace."""

from .content_filter import filter_entries_by_common_prefixes
from .models import Entry, ListingResult, Owner
from .pipeline import list_entries
from .prefix_collapser import collapse_common_prefixes
from .prefix_filter import filter_by_prefix

__all__ = [
    "Entry",
    "ListingResult",
    "Owner",
    "collapse_common_prefixes",
    "filter_by_prefix",
    "filter_entries_by_common_prefixes",
    "list_entries",
]
