"""Tests for the local filesystem adapter."""

from pathlib import Path

import pytest

from aem_workflow_skill.infrastructure.filesystem import FileSystem, LocalFileSystem


class TestLocalFileSystem:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(LocalFileSystem(), FileSystem)

    def test_write_then_read(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "out.md"
        fs.write_text(path, "héllo\nworld")
        assert fs.read_text(path) == "héllo\nworld"
        assert path.read_bytes() == "héllo\nworld".encode()

    def test_write_overwrites(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "out.md"
        fs.write_text(path, "first")
        fs.write_text(path, "second")
        assert path.read_text(encoding="utf-8") == "second"

    def test_exists(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "a.md"
        assert not fs.exists(path)
        path.write_text("x")
        assert fs.exists(path)

    def test_delete(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "a.md"
        path.write_text("x")
        fs.delete(path)
        assert not path.exists()

    def test_delete_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            LocalFileSystem().delete(tmp_path / "missing.md")

    def test_mkdir_recursive_and_idempotent(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        target = tmp_path / "a" / "b" / "c"
        fs.mkdir(target)
        fs.mkdir(target)
        assert target.is_dir()
