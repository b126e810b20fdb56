"""Tests for S3 bucket snapshots."""

from unittest.mock import MagicMock, patch

import boto3
import pytest
from moto import mock_aws
from pydantic import ValidationError as SchemaValidationError

from bucket_listing.core.exceptions import CommandExecutionError, ValidationError
from bucket_listing.listing import list_entries
from bucket_listing.objectstorage import S3ClientConfig, S3ClientManager
from bucket_listing.objectstorage.snapshot import S3SnapshotReader, read_s3_entries

CREDENTIALS = {
    "access_key_id": "test_key",
    "secret_access_key": "test_secret",
    "region_name": "us-east-1",
}

SAMPLE_KEYS = [
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


class TestParseS3Path:
    """Test S3 path parsing."""

    def test_bucket_and_prefix(self):
        """Test splitting a path with a prefix."""
        assert S3ClientManager.parse_s3_path("s3://bucket/data/2024/") == (
            "bucket",
            "data/2024/",
        )

    def test_bucket_only(self):
        """Test a path without a prefix."""
        assert S3ClientManager.parse_s3_path("s3://bucket") == ("bucket", "")

    def test_special_characters_kept_in_prefix(self):
        """Test that characters meaningful in URLs stay part of the prefix."""
        assert S3ClientManager.parse_s3_path("s3://bucket/a?b#c") == ("bucket", "a?b#c")

    def test_wrong_scheme(self):
        """Test that non-S3 paths are rejected."""
        with pytest.raises(ValidationError, match="must start with 's3://'"):
            S3ClientManager.parse_s3_path("/local/path")

    def test_missing_bucket(self):
        """Test that a path without bucket is rejected."""
        with pytest.raises(ValidationError, match="missing bucket"):
            S3ClientManager.parse_s3_path("s3:///prefix")


class TestS3ClientManager:
    """Test boto3 client creation."""

    @patch("bucket_listing.objectstorage.clients.s3_client.boto3")
    def test_explicit_credentials(self, mock_boto3):
        """Test that explicit credentials are passed to boto3."""
        config = S3ClientConfig(
            access_key_id="key",
            secret_access_key="secret",
            session_token="token",
            endpoint_url="http://localhost:9000",
        )

        S3ClientManager(config).client

        mock_boto3.client.assert_called_once_with(
            "s3",
            region_name="us-east-1",
            endpoint_url="http://localhost:9000",
            aws_access_key_id="key",
            aws_secret_access_key="secret",
            aws_session_token="token",
        )

    @patch("bucket_listing.objectstorage.clients.s3_client.boto3")
    def test_profile(self, mock_boto3):
        """Test that a profile creates a session."""
        config = S3ClientConfig(aws_profile="myprofile")

        S3ClientManager(config).client

        mock_boto3.Session.assert_called_once_with(profile_name="myprofile")
        mock_boto3.Session.return_value.client.assert_called_once_with(
            "s3", region_name="us-east-1"
        )
        mock_boto3.client.assert_not_called()

    @patch("bucket_listing.objectstorage.clients.s3_client.boto3")
    def test_client_created_once(self, mock_boto3):
        """Test that the client is created lazily and cached."""
        manager = S3ClientManager(S3ClientConfig())

        assert manager.client is manager.client
        mock_boto3.client.assert_called_once()

    def test_extra_fields_forbidden(self):
        """Test that unknown configuration fields are rejected."""
        with pytest.raises(SchemaValidationError):
            S3ClientConfig(bucket="nope")


@mock_aws
class TestS3SnapshotReader:
    """Test reading S3 snapshots with mocked S3."""

    def setup_method(self, method):
        """Set up test environment."""
        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        self.s3_client.create_bucket(Bucket="test-bucket")

        for key in SAMPLE_KEYS:
            self.s3_client.put_object(Bucket="test-bucket", Key=key, Body=b"content")

    def test_snapshot_is_flat(self):
        """Test that every key is returned in full."""
        entries = read_s3_entries("s3://test-bucket", **CREDENTIALS)

        assert sorted(entry.key for entry in entries) == sorted(SAMPLE_KEYS)

    def test_snapshot_narrowed_by_path_prefix(self):
        """Test that a path prefix narrows the snapshot without shortening keys."""
        entries = read_s3_entries("s3://test-bucket/b/", **CREDENTIALS)

        assert sorted(entry.key for entry in entries) == [
            "b/1",
            "b/1/1",
            "b/1/2",
            "b/2",
        ]

    def test_path_prefix_does_not_become_listing_prefix(self):
        """Test that keys read below a path prefix stay absolute when listed."""
        entries = read_s3_entries("s3://test-bucket/b/", **CREDENTIALS)

        unprefixed = list_entries(entries, delimiter="/")
        assert unprefixed.common_prefixes == frozenset({"b/"})
        assert unprefixed.keys == []

        prefixed = list_entries(entries, prefix="b/", delimiter="/")
        assert prefixed.common_prefixes == frozenset({"b/1/"})
        assert sorted(prefixed.keys) == ["b/1", "b/2"]

    def test_entry_metadata(self):
        """Test conversion of S3 object metadata."""
        entries = read_s3_entries("s3://test-bucket/eor", **CREDENTIALS)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.key == "eor.txt"
        assert entry.size == "7"
        assert entry.etag.startswith('"')
        assert entry.storage_class == "STANDARD"
        assert entry.last_modified.endswith("Z")

    def test_missing_bucket(self):
        """Test that reading a missing bucket fails."""
        with pytest.raises(CommandExecutionError, match="Failed to read S3 bucket"):
            read_s3_entries("s3://missing-bucket", **CREDENTIALS)

    @pytest.mark.parametrize(
        "prefix,delimiter",
        [("", "/"), ("b", "/"), ("b/", "/"), ("c/", "/"), ("d", ":"), ("eor", "/")],
    )
    def test_listing_matches_s3_delimiter_listing(self, prefix, delimiter):
        """Test that listing a flat snapshot agrees with S3's own listing."""
        entries = read_s3_entries("s3://test-bucket", **CREDENTIALS)
        result = list_entries(entries, prefix=prefix, delimiter=delimiter)

        response = self.s3_client.list_objects_v2(
            Bucket="test-bucket", Prefix=prefix, Delimiter=delimiter
        )
        expected_keys = [obj["Key"] for obj in response.get("Contents", [])]
        expected_prefixes = [cp["Prefix"] for cp in response.get("CommonPrefixes", [])]

        assert sorted(result.keys) == sorted(expected_keys)
        assert result.common_prefixes == frozenset(expected_prefixes)


class TestS3OwnerConversion:
    """Test owner conversion from list_objects_v2 pages."""

    def _reader_with_page(self, page):
        reader = S3SnapshotReader(S3ClientConfig())
        client = MagicMock()
        client.get_paginator.return_value.paginate.return_value = [page]
        reader.client_manager._client = client
        return reader

    def test_hex_canonical_id(self):
        """Test that a hex canonical ID becomes a numeric owner ID."""
        reader = self._reader_with_page(
            {"Contents": [{"Key": "k", "Owner": {"ID": "ff", "DisplayName": "me"}}]}
        )

        entry = reader.read_entries("s3://bucket")[0]

        assert entry.owner.id == 255
        assert entry.owner.display_name == "me"

    def test_missing_owner(self):
        """Test defaults when S3 returns no owner."""
        reader = self._reader_with_page({"Contents": [{"Key": "k", "Size": 3}]})

        entry = reader.read_entries("s3://bucket")[0]

        assert entry.owner.id == 0
        assert entry.owner.display_name == ""
        assert entry.size == "3"
        assert entry.last_modified == ""

    def test_empty_page(self):
        """Test that a page without contents yields no entries."""
        reader = self._reader_with_page({"KeyCount": 0})

        assert reader.read_entries("s3://bucket/none") == []

    def test_paginates_flat_view_with_owner(self):
        """Test the arguments of the paginated listing."""
        reader = self._reader_with_page({})

        reader.read_entries("s3://bucket/data/")

        client = reader.client_manager._client
        client.get_paginator.assert_called_once_with("list_objects_v2")
        client.get_paginator.return_value.paginate.assert_called_once_with(
            Bucket="bucket", Prefix="data/", FetchOwner=True
        )
