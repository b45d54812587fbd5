"""
Tests for the virtual path resolver.
"""

import pytest

from jailfs.utils import path_resolver


class TestNormalize:
    """Test cases for normalize()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("", "/"),
            ("/", "/"),
            ("a/b", "/a/b"),
            ("/a//b/", "/a/b"),
            ("/a/./b/.", "/a/b"),
            ("/a/b/../c", "/a/c"),
            ("..", "/"),
            ("/../../etc", "/etc"),
            ("a/../../..", "/"),
            ("./././", "/"),
        ],
    )
    def test_normalize(self, raw, expected):
        """Test normalization of representative inputs."""
        assert path_resolver.normalize(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "..", "../../../../etc", "a//./b/../c/", "/x/y/z/../../..", "...", "a/.../b"],
    )
    def test_normalize_invariants(self, raw):
        """Test that results are rooted, clean and idempotent."""
        result = path_resolver.normalize(raw)

        assert result.startswith("/")
        components = result.split("/")[1:]
        if result != "/":
            assert all(c not in ("", ".", "..") for c in components)
        assert path_resolver.normalize(result) == result

    def test_triple_dot_is_a_name(self):
        """Test that '...' is an ordinary component."""
        assert path_resolver.normalize("/a/...") == "/a/..."


class TestResolve:
    """Test cases for resolve()."""

    def test_empty_path_returns_current(self):
        """Test that an empty path keeps the current directory."""
        assert path_resolver.resolve("", "/a/b") == "/a/b"

    def test_absolute_path_ignores_current(self):
        """Test that absolute paths are relative to the jail root."""
        assert path_resolver.resolve("/etc/passwd", "/a/b") == "/etc/passwd"

    def test_relative_path_from_root(self):
        """Test that no double separator is produced at the root."""
        assert path_resolver.resolve("docs", "/") == "/docs"

    def test_relative_path_from_subdirectory(self):
        """Test appending to a nested current directory."""
        assert path_resolver.resolve("../c", "/a/b") == "/a/c"

    def test_dot_resolves_to_current(self):
        """Test that '.' resolves to the current directory."""
        assert path_resolver.resolve(".", "/a") == "/a"


class TestToRealPath:
    """Test cases for to_real_path()."""

    def test_root_maps_to_real_root(self):
        """Test mapping of the virtual root."""
        assert path_resolver.to_real_path("/", "/data/") == "/data/"

    def test_nested_path(self):
        """Test mapping of a nested path."""
        assert path_resolver.to_real_path("/a/b.txt", "/data/") == "/data/a/b.txt"

    def test_escape_attempt_stays_under_root(self):
        """Test that '..' cannot lead out of the real root."""
        real = path_resolver.to_real_path("/../../etc/passwd", "/data/")

        assert real == "/data/etc/passwd"
        assert real.startswith("/data/")


class TestIsSafe:
    """Test cases for is_safe()."""

    @pytest.mark.parametrize("raw", ["", "/", "../..", "a/b"])
    def test_always_safe_after_normalization(self, raw):
        """Test that any normalized path is considered safe."""
        assert path_resolver.is_safe(raw) is True


class TestEscapesRoot:
    """Test cases for escapes_root()."""

    def test_parent_of_root(self):
        """Test '..' at the root."""
        assert path_resolver.escapes_root("..", "/") is True

    def test_parent_within_depth(self):
        """Test '..' that stays inside the jail."""
        assert path_resolver.escapes_root("..", "/a") is False

    def test_deep_relative_escape(self):
        """Test a relative path climbing past the root."""
        assert path_resolver.escapes_root("../../../../etc", "/a/b") is True

    def test_absolute_escape(self):
        """Test an absolute path climbing past the root."""
        assert path_resolver.escapes_root("/a/../../etc", "/a/b/c") is True

    def test_descend_then_climb(self):
        """Test that climbing back to the root is not an escape."""
        assert path_resolver.escapes_root("x/y/../../", "/") is False

    def test_empty_and_dot(self):
        """Test inputs without '..'."""
        assert path_resolver.escapes_root("", "/") is False
        assert path_resolver.escapes_root("./.", "/") is False


class TestChangeDirectory:
    """Test cases for change_directory()."""

    def test_success_returns_new_path(self):
        """Test that a directory target is returned."""
        result = path_resolver.change_directory("docs", "/", lambda p: p == "/docs")

        assert result == "/docs"

    def test_not_a_directory(self):
        """Test that a non-directory target yields None."""
        assert path_resolver.change_directory("file.txt", "/", lambda p: False) is None

    def test_predicate_receives_resolved_path(self):
        """Test that the predicate sees the normalized virtual path."""
        seen = []

        path_resolver.change_directory("../x/./y", "/a", lambda p: seen.append(p) or True)

        assert seen == ["/x/y"]

    def test_sequence_of_escapes_stays_rooted(self):
        """Test that repeated escape attempts keep the path rooted."""
        current = "/"
        for requested in ["../../../../etc", "..", "/../..", "a/../../b"]:
            result = path_resolver.change_directory(requested, current, lambda p: True)
            current = result or current
            assert current.startswith("/")
        assert current == "/b"
