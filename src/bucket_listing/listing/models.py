"""Value types exchanged by the listing pipeline."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Owner:
    """Owner of a stored object.

    Attributes:
        id: Numeric owner identifier
        display_name: Human-readable owner name
    """

    id: int
    display_name: str


@dataclass(frozen=True)
class Entry:
    """Listing metadata of one stored object.

    Everything except the key is opaque to the listing pipeline and is passed
    through untouched.

    Attributes:
        key: Object key, unique within its bucket
        last_modified: Last modification timestamp
        etag: Entity tag of the object content
        size: Object size in bytes
        storage_class: Storage class name
        owner: Owner of the object
    """

    key: str
    last_modified: str
    etag: str
    size: str
    storage_class: str
    owner: Owner


@dataclass(frozen=True)
class ListingResult:
    """Outcome of one listing call.

    Attributes:
        common_prefixes: Collapsed "directory" markers, unordered
        entries: Entries reported individually
        prefix: Prefix the listing was restricted to
        delimiter: Delimiter used for collapsing
    """

    common_prefixes: frozenset[str] = field(default_factory=frozenset)
    entries: tuple[Entry, ...] = ()
    prefix: str | None = None
    delimiter: str | None = None

    @property
    def keys(self) -> list[str]:
        """Keys of the individually reported entries."""
        return [entry.key for entry in self.entries]
