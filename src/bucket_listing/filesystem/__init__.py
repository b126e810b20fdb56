"""Snapshot readers for file-backed buckets."""

from .operations import list_local_entries, list_remote_entries

__all__ = [
    "list_local_entries",
    "list_remote_entries",
]
