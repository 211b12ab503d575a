"""
Tests for whole-file JSON snapshots.
"""

import json

import pytest

from wordbank.errors import SnapshotError
from wordbank.snapshot import read_json, write_json_atomic


class TestSnapshot:
    """Reading and atomically writing snapshot files."""

    def test_missing_file_reads_as_none(self, tmp_path):
        """An absent file is not an error."""
        assert read_json(tmp_path / "absent.json") is None

    def test_write_then_read_keeps_unicode_readable(self, tmp_path):
        """Korean text is written unescaped."""
        path = tmp_path / "data.json"
        write_json_atomic(path, {"food": ["피자"]})
        assert "피자" in path.read_text(encoding="utf-8")
        assert read_json(path) == {"food": ["피자"]}

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        """Only the target file remains after a rewrite."""
        path = tmp_path / "data.json"
        write_json_atomic(path, {"a": []})
        write_json_atomic(path, {"b": []})
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]
        assert json.loads(path.read_text(encoding="utf-8")) == {"b": []}

    def test_creates_parent_directory(self, tmp_path):
        """Missing parent directories are created."""
        path = tmp_path / "nested" / "dir" / "codes.json"
        write_json_atomic(path, {"codes": []})
        assert read_json(path) == {"codes": []}

    def test_failed_serialization_keeps_previous_snapshot(self, tmp_path):
        """A failed write leaves the old file and no temp file."""
        path = tmp_path / "data.json"
        write_json_atomic(path, {"ok": ["1"]})
        with pytest.raises(TypeError):
            write_json_atomic(path, {"bad": {1, 2}})
        assert read_json(path) == {"ok": ["1"]}
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_invalid_json(self, tmp_path):
        """Unparseable content raises SnapshotError."""
        path = tmp_path / "data.json"
        path.write_text("[1,", encoding="utf-8")
        with pytest.raises(SnapshotError):
            read_json(path)

    def test_invalid_utf8(self, tmp_path):
        """Undecodable bytes raise SnapshotError."""
        path = tmp_path / "data.json"
        path.write_bytes(b'["\xff"]')
        with pytest.raises(SnapshotError, match="UTF-8"):
            read_json(path)
