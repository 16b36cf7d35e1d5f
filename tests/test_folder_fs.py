"""Tests for the host folder filesystem"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from layerfs import FolderFS, get_os_fs
from layerfs.core.exceptions import (
    BackendError,
    InvalidRootError,
    IsADirError,
    NotADirError,
    NotFoundError,
    SecurityViolationError,
)
from layerfs.core.types import FileKind


class TestFolderFSConstruction:
    """Test root validation"""

    def test_root_is_normalized_absolute(self, host_tree: Path):
        fs = FolderFS(str(host_tree / "docs" / ".." / "."))

        assert fs.path == str(host_tree)

    def test_missing_root_rejected(self, tmp_path: Path):
        with pytest.raises(InvalidRootError) as exc_info:
            FolderFS(str(tmp_path / "missing"))

        assert "does not exist" in exc_info.value.reason

    def test_file_root_rejected(self, host_tree: Path):
        with pytest.raises(InvalidRootError) as exc_info:
            FolderFS(str(host_tree / "hello.txt"))

        assert exc_info.value.reason == "not a directory"

    def test_get_os_fs_defaults_to_working_directory(self, host_tree: Path, monkeypatch):
        monkeypatch.chdir(host_tree)

        fs = get_os_fs()

        assert fs.read_file("hello.txt") == b"Hello, layerfs!"


class TestFolderFSRead:
    """Test reading files"""

    def test_read_file(self, folder_fs: FolderFS):
        assert folder_fs.read_file("/hello.txt") == b"Hello, layerfs!"
        assert folder_fs.read_file("docs/guide.md") == b"# Guide\n"

    def test_open_matches_read_file(self, folder_fs: FolderFS):
        size = len(folder_fs.read_file("/hello.txt"))

        with folder_fs.open("/hello.txt") as f:
            assert f.read(size) == folder_fs.read_file("/hello.txt")

    def test_missing_file(self, folder_fs: FolderFS):
        with pytest.raises(NotFoundError):
            folder_fs.read_file("/nope.txt")

        with pytest.raises(NotFoundError):
            folder_fs.open("/nope.txt")

    def test_read_directory_as_file(self, folder_fs: FolderFS):
        with pytest.raises(IsADirError):
            folder_fs.read_file("/docs")

    def test_escape_rejected(self, folder_fs: FolderFS):
        """Test that the file next to the root cannot be reached"""
        with pytest.raises(SecurityViolationError):
            folder_fs.read_file("../secret.txt")

        with pytest.raises(SecurityViolationError):
            folder_fs.read_file("docs/../../secret.txt")

    def test_absolute_path_stays_in_root(self, folder_fs: FolderFS):
        with pytest.raises(NotFoundError):
            folder_fs.read_file("/etc/passwd")

    def test_permission_error_is_backend_error(self, folder_fs: FolderFS):
        with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(BackendError) as exc_info:
                folder_fs.read_file("/hello.txt")

        assert exc_info.value.reason == "Permission denied"
        assert isinstance(exc_info.value.__cause__, PermissionError)


class TestFolderFSReadDir:
    """Test listing directories"""

    def test_lists_direct_children_only(self, folder_fs: FolderFS):
        entries = {entry.name: entry for entry in folder_fs.read_dir("/")}

        assert set(entries) == {"hello.txt", "docs", "empty"}
        assert entries["hello.txt"].kind is FileKind.FILE
        assert entries["hello.txt"].size == len(b"Hello, layerfs!")
        assert entries["docs"].kind is FileKind.DIR

    def test_names_are_relative_to_listed_directory(self, folder_fs: FolderFS):
        names = [entry.name for entry in folder_fs.read_dir("/docs")]

        assert sorted(names) == ["api", "guide.md"]

    def test_empty_directory(self, folder_fs: FolderFS):
        assert folder_fs.read_dir("/empty") == []

    def test_missing_directory(self, folder_fs: FolderFS):
        with pytest.raises(NotFoundError):
            folder_fs.read_dir("/missing")

    def test_file_is_not_a_directory(self, folder_fs: FolderFS):
        with pytest.raises(NotADirError):
            folder_fs.read_dir("/hello.txt")

    def test_escape_rejected(self, folder_fs: FolderFS):
        with pytest.raises(SecurityViolationError):
            folder_fs.read_dir("..")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_symlink_reported_as_symlink(self, host_tree: Path):
        try:
            (host_tree / "link").symlink_to(host_tree / "docs")
        except OSError:
            pytest.skip("cannot create symlinks")

        entries = {entry.name: entry for entry in FolderFS(str(host_tree)).read_dir("/")}

        assert entries["link"].kind is FileKind.SYMLINK


class TestFolderFSSub:
    """Test sub-rooting"""

    def test_sub_is_folder_fs(self, folder_fs: FolderFS, host_tree: Path):
        sub = folder_fs.sub("docs")

        assert isinstance(sub, FolderFS)
        assert sub.path == str(host_tree / "docs")
        assert sub.read_file("/api/index.md") == b"# API\n"

    def test_sub_cannot_escape(self, folder_fs: FolderFS):
        sub = folder_fs.sub("docs")

        with pytest.raises(SecurityViolationError):
            sub.read_file("../hello.txt")

    def test_sub_of_missing_directory(self, folder_fs: FolderFS):
        with pytest.raises(NotFoundError):
            folder_fs.sub("missing")

    def test_sub_of_file_rejected(self, folder_fs: FolderFS):
        with pytest.raises(InvalidRootError):
            folder_fs.sub("hello.txt")

    def test_sub_escape_rejected(self, folder_fs: FolderFS):
        with pytest.raises(SecurityViolationError):
            folder_fs.sub("..")
