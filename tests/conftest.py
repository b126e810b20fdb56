"""Test configuration and fixtures for bucket-listing."""

import pytest

from bucket_listing.listing.models import Entry, Owner

ALL_KEYS = [
    "3330/0",
    "33309/0",
    "a",
    "b",
    "b/1",
    "b/1/1",
    "b/1/2",
    "b/2",
    "c/1",
    "c/1/1",
    "d:1",
    "d:1:1",
    "eor.txt",
    "foo/eor.txt",
]


def make_entry(key: str) -> Entry:
    """Create an entry with placeholder metadata."""
    return Entry(
        key=key,
        last_modified="lastModified",
        etag="etag",
        size="size",
        storage_class="storageClass",
        owner=Owner(id=0, display_name="name"),
    )


@pytest.fixture
def all_keys():
    """Keys of the sample bucket."""
    return list(ALL_KEYS)


@pytest.fixture
def bucket_entries():
    """Unfiltered snapshot of the sample bucket."""
    return [make_entry(key) for key in ALL_KEYS]


@pytest.fixture
def bucket_dir(tmp_path):
    """Create a file-backed bucket holding a few nested objects."""
    bucket = tmp_path / "bucket"
    (bucket / "photos" / "2023").mkdir(parents=True)
    (bucket / "photos" / "2024").mkdir(parents=True)

    (bucket / "readme.txt").write_text("hello")
    (bucket / "photos" / "cover.jpg").write_text("cover" * 10)
    (bucket / "photos" / "2023" / "a.jpg").write_text("a" * 100)
    (bucket / "photos" / "2024" / "b.jpg").write_text("b" * 200)

    return bucket


@pytest.fixture
def mock_ssh_key(tmp_path):
    """Create a mock SSH key file for testing."""
    key_file = tmp_path / "test_key"
    key_file.write_text("mock ssh key content")
    key_file.chmod(0o600)
    return str(key_file)


@pytest.fixture
def entry_factory():
    """Factory building entries with placeholder metadata."""
    return make_entry
