"""Tests for path confinement"""

import os

import pytest

from layerfs.core.exceptions import SecurityViolationError
from layerfs.infrastructure.filesystem.path_security import (
    is_within,
    normalize_virtual,
    secure_path,
)


class TestSecurePath:
    """Test joining and confining paths"""

    def test_simple_join(self):
        assert secure_path("/a", "b/c.txt") == "/a/b/c.txt"

    def test_leading_separator_is_relative_to_base(self):
        """Test that an absolute child path is rooted at the base"""
        assert secure_path("/a", "/b.txt") == "/a/b.txt"
        assert secure_path("/a", "//b//c.txt") == "/a/b/c.txt"

    def test_normalizes_dots(self):
        assert secure_path("/a", "./b/../c/./d") == "/a/c/d"

    def test_base_itself_is_allowed(self):
        assert secure_path("/a", "") == "/a"
        assert secure_path("/a", ".") == "/a"
        assert secure_path("/a", "b/..") == "/a"

    def test_parent_escape_rejected(self):
        """Test that normalization happens before the prefix check"""
        with pytest.raises(SecurityViolationError) as exc_info:
            secure_path("/a", "../../etc/passwd")

        assert exc_info.value.base == "/a"
        assert exc_info.value.path == "../../etc/passwd"

    def test_escape_hidden_behind_subdirectory_rejected(self):
        with pytest.raises(SecurityViolationError):
            secure_path("/a", "b/../../c")

    def test_sibling_with_common_prefix_rejected(self):
        """Test that '/ab' is not considered inside '/a'"""
        with pytest.raises(SecurityViolationError):
            secure_path("/a", "../ab/file")

    def test_virtual_root_cannot_be_escaped(self):
        assert secure_path("/", "../../etc/passwd") == "/etc/passwd"

    def test_relative_base(self):
        assert secure_path("a", "b") == "a/b"

        with pytest.raises(SecurityViolationError):
            secure_path("a", "../b")

    def test_current_directory_base(self):
        assert secure_path(".", "b/c") == "b/c"

        with pytest.raises(SecurityViolationError):
            secure_path(".", "../b")

    def test_host_paths(self, tmp_path):
        base = str(tmp_path)

        assert secure_path(base, "x/y", pathmod=os.path) == os.path.join(base, "x", "y")

        with pytest.raises(SecurityViolationError):
            secure_path(base, "../outside", pathmod=os.path)


class TestIsWithin:
    """Test the prefix check"""

    @pytest.mark.parametrize("base,path,expected", [
        ("/a", "/a", True),
        ("/a", "/a/b", True),
        ("/a", "/ab", False),
        ("/a", "/", False),
        ("/", "/anything", True),
    ])
    def test_is_within(self, base, path, expected):
        assert is_within(base, path) is expected


class TestNormalizeVirtual:
    """Test canonical virtual paths"""

    @pytest.mark.parametrize("path,expected", [
        ("", "/"),
        (".", "/"),
        ("./test.txt", "/test.txt"),
        ("folder//a.txt", "/folder/a.txt"),
        ("/folder/", "/folder"),
        ("/folder/../test.txt", "/test.txt"),
    ])
    def test_normalize(self, path, expected):
        assert normalize_virtual(path) == expected
