"""Installation targets — derived destination paths, never stored."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from aem_workflow_skill.domain.platforms import ROOT_DIRECTORY, PlatformDescriptor, Scope


@dataclass(frozen=True)
class InstallTarget:
    """Where one platform's file lands for a given scope.

    ``downgraded`` is set when global scope was requested but the
    platform only supports project scope.
    """

    platform: str
    base_dir: Path
    directory: str
    filename: str
    scope: Scope
    downgraded: bool = False

    @property
    def parent(self) -> Path:
        if self.directory == ROOT_DIRECTORY:
            return self.base_dir
        return self.base_dir / self.directory

    @property
    def path(self) -> Path:
        return self.parent / self.filename


def resolve_target(
    descriptor: PlatformDescriptor,
    scope: Scope,
    *,
    working_dir: Path,
    home_dir: Path,
) -> InstallTarget:
    """Compute the destination for *descriptor* under *scope*.

    - Project: ``{working_dir}/{directory}/{filename}``
    - Global: ``{home_dir}/{global_directory}/{directory}/{filename}``

    Global scope on a platform without a global directory falls back to
    the project location with ``downgraded=True``.
    """
    if scope == Scope.GLOBAL and descriptor.global_directory is not None:
        base = home_dir
        if descriptor.global_directory != ROOT_DIRECTORY:
            base = home_dir / descriptor.global_directory
        return InstallTarget(
            platform=descriptor.id,
            base_dir=base,
            directory=descriptor.directory,
            filename=descriptor.filename,
            scope=Scope.GLOBAL,
        )

    return InstallTarget(
        platform=descriptor.id,
        base_dir=working_dir,
        directory=descriptor.directory,
        filename=descriptor.filename,
        scope=Scope.PROJECT,
        downgraded=scope == Scope.GLOBAL,
    )


def legacy_path(descriptor: PlatformDescriptor, working_dir: Path) -> Path | None:
    """Project-root path of the platform's legacy file, if it has one."""
    if descriptor.legacy_filename is None:
        return None
    return working_dir / descriptor.legacy_filename
