"""Object-storage style listings over flat key namespaces.

Object stores have no real directories: a bucket is a flat set of keys. A
listing request with a prefix and a delimiter makes it look hierarchical by
collapsing every key that shares a segment up to the next delimiter into one
"common prefix". This package implements that listing over snapshots read
from file-backed buckets (local or over SSH) and from S3-compatible services.

Key Features:
    - Prefix filtering, common prefix collapsing and content filtering
    - Snapshot readers for local, SSH and S3 buckets
    - List-bucket style response model
    - CLI interface

Recommended Usage:
    Use the unified interface to list a bucket:

    >>> from bucket_listing import list_storage_contents, S3StorageConfig
    >>> result = list_storage_contents(
    ...     "s3://bucket", S3StorageConfig(), prefix="photos/", delimiter="/"
    ... )
    >>> sorted(result.common_prefixes)
    ['photos/2023/', 'photos/2024/']

Advanced Usage:
    Run the listing pipeline over any snapshot of entries:

    >>> from bucket_listing.listing import list_entries
    >>> result = list_entries(entries, prefix="b/", delimiter="/")
"""

__version__ = "0.1.0"

# Listing core
from .listing import (
    Entry,
    ListingResult,
    Owner,
    collapse_common_prefixes,
    filter_by_prefix,
    filter_entries_by_common_prefixes,
    list_entries,
)

# Storage configuration and response schemas
from .schemas import (
    ListBucketResponse,
    LocalStorageConfig,
    S3StorageConfig,
    SSHStorageConfig,
    StorageConfig,
)

# Unified interface (recommended)
from .unified import (
    list_storage_contents,
    load_entries,
)

__all__ = [
    # Listing core
    "Entry",
    "ListingResult",
    "Owner",
    "collapse_common_prefixes",
    "filter_by_prefix",
    "filter_entries_by_common_prefixes",
    "list_entries",
    # Schemas
    "ListBucketResponse",
    "LocalStorageConfig",
    "S3StorageConfig",
    "SSHStorageConfig",
    "StorageConfig",
    # Unified interface
    "list_storage_contents",
    "load_entries",
]
