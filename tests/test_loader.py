"""Tests for lock file loading."""

import pytest

from loader import (
    LockfileError,
    LockfileParseError,
    LockfileReadError,
    LockfileShapeError,
    extract_package_records,
    load_lockfile,
    read_package_records,
    resolve_lockfile_path,
)

CARGO_LOCK = """# This file is automatically @generated by Cargo.
version = 3

[[package]]
name = "a"
version = "1.0"
dependencies = [
 "b 1.0",
]

[[package]]
name = "b"
version = "1.0"
source = "registry+https://github.com/rust-lang/crates.io-index"
"""


class TestResolveLockfilePath:
    """Lock file path resolution."""

    def test_directory_gets_default_name(self, tmp_path):
        """Test a directory gets Cargo.lock appended."""
        assert resolve_lockfile_path(str(tmp_path)) == str(tmp_path / "Cargo.lock")

    def test_custom_default_name(self, tmp_path):
        """Test a custom default file name is appended."""
        assert resolve_lockfile_path(str(tmp_path), "other.lock") == str(tmp_path / "other.lock")

    def test_file_path_is_kept(self, tmp_path):
        """Test an existing file path is used as-is."""
        lock = tmp_path / "custom.lock"
        lock.write_text("", encoding="utf-8")
        assert resolve_lockfile_path(str(lock)) == str(lock)

    def test_missing_path_is_kept(self, tmp_path):
        """Test a non-existent path is returned unchanged."""
        missing = str(tmp_path / "nope" / "Cargo.lock")
        assert resolve_lockfile_path(missing) == missing


class TestLoadLockfile:
    """TOML loading."""

    def test_load_basic(self, tmp_path):
        """Test parsing a basic Cargo.lock file."""
        lock = tmp_path / "Cargo.lock"
        lock.write_text(CARGO_LOCK, encoding="utf-8")
        doc = load_lockfile(str(lock))
        assert doc["version"] == 3
        assert [p["name"] for p in doc["package"]] == ["a", "b"]

    def test_missing_file(self, tmp_path):
        """Test a missing file raises a read error with its cause."""
        with pytest.raises(LockfileReadError) as exc_info:
            load_lockfile(str(tmp_path / "Cargo.lock"))
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_invalid_toml(self, tmp_path):
        """Test invalid TOML raises a parse error."""
        lock = tmp_path / "Cargo.lock"
        lock.write_text("invalid toml {", encoding="utf-8")
        with pytest.raises(LockfileParseError):
            load_lockfile(str(lock))

    def test_errors_share_a_base(self):
        """Test all loader errors derive from LockfileError."""
        assert issubclass(LockfileReadError, LockfileError)
        assert issubclass(LockfileParseError, LockfileError)
        assert issubclass(LockfileShapeError, LockfileError)


class TestExtractPackageRecords:
    """Document shape validation."""

    def test_returns_entries(self):
        """Test package entries are returned unchanged."""
        doc = {"package": [{"name": "a"}, "junk"]}
        assert extract_package_records(doc) == [{"name": "a"}, "junk"]

    def test_root_not_a_table(self):
        """Test a non-table root is rejected."""
        with pytest.raises(LockfileShapeError):
            extract_package_records(["package"])

    def test_missing_section(self):
        """Test a document without [[package]] is rejected."""
        with pytest.raises(LockfileShapeError, match=r"No \[\[package\]\] section found"):
            extract_package_records({"version": 3})

    def test_section_not_an_array(self):
        """Test a non-array package section is rejected."""
        with pytest.raises(LockfileShapeError):
            extract_package_records({"package": "a"})


class TestReadPackageRecords:
    """End-to-end loading."""

    def test_from_directory(self, tmp_path):
        """Test loading records from a project directory."""
        (tmp_path / "Cargo.lock").write_text(CARGO_LOCK, encoding="utf-8")
        records = read_package_records(str(tmp_path))
        assert len(records) == 2
        assert records[0]["dependencies"] == ["b 1.0"]

    def test_shape_error_from_file(self, tmp_path):
        """Test shape errors surface from a real file."""
        lock = tmp_path / "Cargo.lock"
        lock.write_text("version = 3\n", encoding="utf-8")
        with pytest.raises(LockfileShapeError):
            read_package_records(str(lock))
