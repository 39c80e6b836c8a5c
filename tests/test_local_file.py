#!/usr/bin/env python3
"""Tests for the LocalFile descriptor."""

import os
import sys
import pytest
from unittest.mock import Mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from gist_uploader.exceptions import GistCreationError
from gist_uploader.local_file import (
    LocalFile,
    PENDING,
    UPLOADED,
    FAILED,
    DRY_RUN,
)


@pytest.fixture
def client():
    """Mock gist client returning a gist URL."""
    client = Mock()
    client.create_gist.return_value = {
        "id": "abc123",
        "html_url": "https://gist.github.com/abc123",
    }
    return client


class TestAccessors:
    """Tests for existence, size and name accessors."""

    def test_existing_file(self, temp_file):
        """Should report an existing file."""
        local_file = LocalFile(temp_file)
        assert local_file.exists() is True
        assert local_file.is_file() is True
        assert local_file.status == PENDING

    def test_missing_file(self, tmp_path):
        """Should report a missing file without raising."""
        local_file = LocalFile(str(tmp_path / "missing.txt"))
        assert local_file.exists() is False
        assert local_file.is_file() is False
        assert local_file.size() is None

    def test_directory_is_not_file(self, tmp_path):
        """Directories exist but are not regular files."""
        local_file = LocalFile(str(tmp_path))
        assert local_file.exists() is True
        assert local_file.is_file() is False

    def test_size(self, temp_file):
        """Should return the size in bytes."""
        assert LocalFile(temp_file).size() == len(b"Test file content for upload testing")

    def test_name(self):
        """Should use the base name of the path."""
        assert LocalFile("some/dir/notes.md").name() == "notes.md"

    def test_name_of_malformed_paths(self):
        """Paths without a usable base name have no display name."""
        assert LocalFile("").name() is None
        assert LocalFile("some/dir/").name() is None
        assert LocalFile(".").name() is None
        assert LocalFile("..").name() is None

    def test_null_byte_path(self):
        """A path with a null byte neither exists nor raises."""
        local_file = LocalFile("bad\0name.txt")
        assert local_file.exists() is False
        assert local_file.size() is None


class TestReadContent:
    """Tests for reading file content."""

    def test_read_text(self, temp_file):
        """Should read the file as text."""
        assert LocalFile(temp_file).read_content() == "Test file content for upload testing"

    def test_read_binary_replaces_invalid_bytes(self, tmp_path):
        """Undecodable bytes are replaced rather than raising."""
        path = tmp_path / "data.bin"
        path.write_bytes(b"ok\xff\xfe")
        content = LocalFile(str(path)).read_content()
        assert content.startswith("ok")
        assert "\ufffd" in content

    def test_read_missing_raises(self, tmp_path):
        """Reading a missing file raises OSError."""
        with pytest.raises(OSError):
            LocalFile(str(tmp_path / "missing.txt")).read_content()


class TestUpload:
    """Tests for LocalFile.upload."""

    def test_upload_creates_gist(self, temp_file, client):
        """Should send the file content under its base name."""
        local_file = LocalFile(temp_file)
        url = local_file.upload(client, public=True, description="notes")

        assert url == "https://gist.github.com/abc123"
        assert local_file.status == UPLOADED
        client.create_gist.assert_called_once_with(
            {os.path.basename(temp_file): "Test file content for upload testing"},
            public=True,
            description="notes",
        )

    def test_dry_run_never_calls_client(self, temp_file, client):
        """Dry-run files are never sent."""
        local_file = LocalFile(temp_file, dry_run=True)
        assert local_file.upload(client) is None
        assert local_file.status == DRY_RUN
        client.create_gist.assert_not_called()

    def test_upload_failure_marks_failed(self, temp_file, client):
        """API errors propagate and mark the file as failed."""
        client.create_gist.side_effect = GistCreationError("HTTP 422: bad", status_code=422)
        local_file = LocalFile(temp_file)

        with pytest.raises(GistCreationError):
            local_file.upload(client)
        assert local_file.status == FAILED

    def test_upload_without_name_fails(self, tmp_path, client):
        """A path without a display name can't become a gist."""
        local_file = LocalFile(str(tmp_path) + os.sep)
        with pytest.raises(ValueError):
            local_file.upload(client)
        assert local_file.status == FAILED
        client.create_gist.assert_not_called()


class TestDescribe:
    """Tests for dry-run descriptions."""

    def test_describe(self, temp_file):
        """Should describe name, path and formatted size."""
        row = LocalFile(temp_file, dry_run=True).describe()
        assert row["name"] == os.path.basename(temp_file)
        assert row["path"] == temp_file
        assert row["size"].endswith(" B")
