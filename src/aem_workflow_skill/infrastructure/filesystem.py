"""Filesystem port used by the installer.

The installer only needs five primitives: read, write, exists, delete,
and recursive mkdir. Anything exposing them can back an install, which
keeps the service testable with an in-memory or failing fake.

Failures surface as :class:`OSError` from the underlying call.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Storage primitives consumed by :class:`InstallService`."""

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def exists(self, path: Path) -> bool: ...

    def delete(self, path: Path) -> None: ...

    def mkdir(self, path: Path) -> None: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the local disk via :mod:`pathlib`."""

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Create or overwrite *path* with UTF-8 *content*."""
        path.write_text(content, encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return path.exists()

    def delete(self, path: Path) -> None:
        path.unlink()

    def mkdir(self, path: Path) -> None:
        """Create *path* and any missing parents. No-op if it exists."""
        path.mkdir(parents=True, exist_ok=True)
