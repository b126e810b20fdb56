"""Tests for the command-line interface."""

import json
from unittest.mock import patch

from typer.testing import CliRunner

from bucket_listing import __version__
from bucket_listing.cli import app
from bucket_listing.listing import list_entries
from bucket_listing.schemas import LocalStorageConfig, S3StorageConfig, SSHStorageConfig

runner = CliRunner()


class TestListCommand:
    """Test the list command."""

    def test_list_local_bucket_text(self, bucket_dir):
        """Test text output for a local bucket."""
        result = runner.invoke(
            app, ["list", str(bucket_dir), "--storage-type", "local", "-d", "/"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["PRE photos/", "readme.txt"]

    def test_list_local_bucket_json(self, bucket_dir):
        """Test JSON output for a local bucket."""
        result = runner.invoke(
            app,
            [
                "list",
                str(bucket_dir),
                "-t",
                "local",
                "--prefix",
                "photos/",
                "--delimiter",
                "/",
                "--output",
                "json",
            ],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["prefix"] == "photos/"
        assert payload["delimiter"] == "/"
        assert payload["common_prefixes"] == ["photos/2023/", "photos/2024/"]
        assert [content["key"] for content in payload["contents"]] == [
            "photos/cover.jpg"
        ]

    def test_list_empty_result(self, bucket_dir):
        """Test the message for a listing with nothing in it."""
        result = runner.invoke(
            app, ["list", str(bucket_dir), "-t", "local", "--prefix", "missing/"]
        )

        assert result.exit_code == 0
        assert "No keys found." in result.output

    @patch("bucket_listing.cli.list_storage_contents")
    def test_list_s3_options(self, mock_list, bucket_entries):
        """Test that S3 options build an S3 configuration."""
        mock_list.return_value = list_entries(bucket_entries, delimiter="/")

        result = runner.invoke(
            app,
            [
                "list",
                "s3://bucket",
                "-t",
                "s3",
                "--delimiter",
                "/",
                "--aws-profile",
                "myprofile",
                "--region",
                "eu-west-1",
            ],
        )

        assert result.exit_code == 0
        assert "PRE b/" in result.output
        kwargs = mock_list.call_args.kwargs
        assert kwargs["config"] == S3StorageConfig(
            region_name="eu-west-1", aws_profile="myprofile"
        )
        assert kwargs["delimiter"] == "/"
        assert kwargs["prefix"] is None
        assert kwargs["timeout"] == 300

    @patch("bucket_listing.cli.list_storage_contents")
    def test_list_ssh_options(self, mock_list):
        """Test that SSH options build an SSH configuration."""
        mock_list.return_value = list_entries([])

        result = runner.invoke(
            app,
            [
                "list",
                "/srv/bucket",
                "-t",
                "ssh",
                "--hostname",
                "test.host",
                "--username",
                "user",
                "--ssh-key",
                "/key",
                "--timeout",
                "30",
            ],
        )

        assert result.exit_code == 0
        kwargs = mock_list.call_args.kwargs
        assert kwargs["config"] == SSHStorageConfig(
            hostname="test.host", username="user", ssh_key_path="/key"
        )
        assert kwargs["timeout"] == 30

    def test_list_ssh_missing_options(self):
        """Test that SSH listing requires connection options."""
        result = runner.invoke(app, ["list", "/srv/bucket", "-t", "ssh"])

        assert result.exit_code == 1
        assert "SSH storage requires" in result.output

    @patch("bucket_listing.cli.list_storage_contents")
    def test_list_error(self, mock_list):
        """Test that listing errors exit with status 1."""
        mock_list.side_effect = Exception("boom")

        result = runner.invoke(app, ["list", "/srv/bucket", "-t", "local"])

        assert result.exit_code == 1
        assert "Error: boom" in result.output
        assert mock_list.call_args.kwargs["config"] == LocalStorageConfig()


    def test_list_help_explains_s3_path_prefix(self):
        """Test that the list help says how an s3:// path prefix is treated."""
        result = runner.invoke(app, ["list", "--help"])

        assert result.exit_code == 0
        assert "narrows" in result.output
        assert "absolute" in result.output

class TestVersion:
    """Test version output."""

    def test_version(self):
        """Test the --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"bucket-listing {__version__}" in result.output
