"""Unified interface for all bucket backends (filesystem and object storage)."""

from .storage_operations import load_entries, list_storage_contents

__all__ = [
    "load_entries",
    "list_storage_contents",
]
