"""InstallService — install, uninstall, and list platform skill files.

Each operation validates the full platform selection before touching
the filesystem, then processes platforms in the order requested.

INVARIANT: One platform failing never aborts its siblings. Install and
uninstall collect per-platform outcomes and report them together.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from aem_workflow_skill import __version__
from aem_workflow_skill.domain.document import Document
from aem_workflow_skill.domain.platforms import (
    PLATFORMS,
    Platform,
    PlatformDescriptor,
    Scope,
    UnknownPlatformError,
    all_platforms,
    apply_transform,
    platform_ids,
    resolve_platform_ids,
)
from aem_workflow_skill.domain.targets import InstallTarget, legacy_path, resolve_target
from aem_workflow_skill.domain.transforms import TOOL_MARKER
from aem_workflow_skill.infrastructure.filesystem import FileSystem
from aem_workflow_skill.infrastructure.source import SourceNotFoundError, load_skill_document
from aem_workflow_skill.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class InstallService:
    """Places the transformed skill document for each requested platform.

    Usage::

        svc = InstallService(LocalFileSystem(), working_dir=Path.cwd(), home_dir=Path.home())
        result = svc.install(["all"])
    """

    def __init__(
        self,
        fs: FileSystem,
        *,
        working_dir: Path,
        home_dir: Path,
        source_path: Path | None = None,
        strict_frontmatter: bool = False,
        version: str = __version__,
    ) -> None:
        self._fs = fs
        self._working_dir = working_dir
        self._home_dir = home_dir
        self._source_path = source_path
        self._strict = strict_frontmatter
        self._version = version

    # ── Operations ────────────────────────────────────────────────────

    def install(
        self,
        requested: Iterable[str],
        *,
        scope: Scope = Scope.PROJECT,
    ) -> ServiceResult:
        """Write the skill file for every requested platform.

        The source document is read once and shared by all platforms.
        Existing destination files are overwritten without backup.
        """
        op = "install"
        scope = Scope(scope)
        try:
            selected = resolve_platform_ids(requested)
        except UnknownPlatformError as exc:
            return _unknown_platform(op, exc)

        try:
            document = load_skill_document(self._fs, self._source_path)
        except SourceNotFoundError as exc:
            logger.debug("Skill source not found: %s", exc)
            return ServiceResult.failure(
                op,
                ErrorCode.SOURCE_NOT_FOUND,
                str(exc),
                searched=[str(p) for p in exc.searched],
            )
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skill source unreadable", exc_info=True)
            return ServiceResult.failure(
                op,
                ErrorCode.SOURCE_UNREADABLE,
                f"Cannot read skill source: {exc}",
                source=str(self._source_path or "packaged"),
            )

        installed: list[dict[str, Any]] = []
        failed: list[dict[str, str]] = []
        warnings: list[str] = []

        for platform_id in selected:
            descriptor = PLATFORMS[Platform(platform_id)]
            target = self._target(descriptor, scope)
            if target.downgraded:
                warnings.append(_downgrade_notice(descriptor))
            try:
                path = self._write(descriptor, target, document)
            except Exception as exc:
                logger.debug("Install failed for %s", platform_id, exc_info=True)
                failed.append({"platform": platform_id, "reason": str(exc)})
                continue
            installed.append(
                {
                    "platform": platform_id,
                    "name": descriptor.name,
                    "path": str(path),
                    "scope": target.scope.value,
                    "downgraded": target.downgraded,
                }
            )

        data = {"scope": scope.value, "installed": installed, "failed": failed}
        if failed:
            return ServiceResult.failure(
                op,
                ErrorCode.INSTALL_FAILED,
                _failure_message("install", failed),
                data=data,
                warnings=warnings,
                failed=failed,
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def uninstall(
        self,
        requested: Iterable[str],
        *,
        scope: Scope = Scope.PROJECT,
    ) -> ServiceResult:
        """Remove installed skill files. Missing files are not an error.

        Legacy project-root files (``.cursorrules``, ``.windsurfrules``)
        are removed only when their content carries the tool marker, so a
        hand-written file with the same name is never deleted.
        """
        op = "uninstall"
        scope = Scope(scope)
        try:
            selected = resolve_platform_ids(requested)
        except UnknownPlatformError as exc:
            return _unknown_platform(op, exc)

        removed: list[dict[str, str]] = []
        missing: list[dict[str, str]] = []
        legacy_removed: list[dict[str, str]] = []
        legacy_skipped: list[dict[str, str]] = []
        failed: list[dict[str, str]] = []
        warnings: list[str] = []

        for platform_id in selected:
            descriptor = PLATFORMS[Platform(platform_id)]
            target = self._target(descriptor, scope)
            if target.downgraded:
                warnings.append(_downgrade_notice(descriptor))
            try:
                entry = {"platform": platform_id, "path": str(target.path)}
                if self._fs.exists(target.path):
                    self._fs.delete(target.path)
                    logger.debug("Removed %s", target.path)
                    removed.append(entry)
                else:
                    missing.append(entry)

                legacy = legacy_path(descriptor, self._working_dir)
                if legacy is not None and self._fs.exists(legacy):
                    legacy_entry = {"platform": platform_id, "path": str(legacy)}
                    if self._owned_by_tool(legacy):
                        self._fs.delete(legacy)
                        logger.debug("Removed legacy file %s", legacy)
                        legacy_removed.append(legacy_entry)
                    else:
                        legacy_skipped.append(legacy_entry)
            except (OSError, UnicodeError) as exc:
                logger.debug("Uninstall failed for %s", platform_id, exc_info=True)
                failed.append({"platform": platform_id, "reason": str(exc)})

        data = {
            "scope": scope.value,
            "removed": removed,
            "missing": missing,
            "legacy_removed": legacy_removed,
            "legacy_skipped": legacy_skipped,
            "failed": failed,
        }
        if failed:
            return ServiceResult.failure(
                op,
                ErrorCode.UNINSTALL_FAILED,
                _failure_message("uninstall", failed),
                data=data,
                warnings=warnings,
                failed=failed,
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def list_platforms(self) -> ServiceResult:
        """Describe every registered platform and where it installs."""
        items: list[dict[str, Any]] = []
        for descriptor in all_platforms():
            project = resolve_target(
                descriptor,
                Scope.PROJECT,
                working_dir=Path("."),
                home_dir=Path("~"),
            )
            global_path: str | None = None
            if descriptor.supports_global:
                global_path = str(
                    resolve_target(
                        descriptor,
                        Scope.GLOBAL,
                        working_dir=Path("."),
                        home_dir=Path("~"),
                    ).path
                )
            items.append(
                {
                    "id": descriptor.id,
                    "name": descriptor.name,
                    "path": str(project.path),
                    "global_path": global_path,
                    "legacy": descriptor.legacy_filename,
                }
            )
        return ServiceResult(
            ok=True,
            op="list_platforms",
            data={"items": items},
            meta={"count": len(platform_ids())},
        )

    # ── Helpers ───────────────────────────────────────────────────────

    def _target(self, descriptor: PlatformDescriptor, scope: Scope) -> InstallTarget:
        return resolve_target(
            descriptor,
            scope,
            working_dir=self._working_dir,
            home_dir=self._home_dir,
        )

    def _owned_by_tool(self, path: Path) -> bool:
        """True when *path* carries the tool marker.

        Files this tool writes are UTF-8, so one that does not decode was
        written by someone else.
        """
        try:
            return TOOL_MARKER in self._fs.read_text(path)
        except UnicodeDecodeError:
            logger.debug("Legacy file %s is not UTF-8; keeping it", path)
            return False

    def _write(
        self,
        descriptor: PlatformDescriptor,
        target: InstallTarget,
        document: Document,
    ) -> Path:
        content = apply_transform(
            descriptor,
            document,
            version=self._version,
            strict=self._strict,
        )
        self._fs.mkdir(target.parent)
        self._fs.write_text(target.path, content.text)
        logger.debug("Installed %s to %s", descriptor.id, target.path)
        return target.path


def _unknown_platform(op: str, exc: UnknownPlatformError) -> ServiceResult:
    return ServiceResult.failure(
        op,
        ErrorCode.UNKNOWN_PLATFORM,
        f"{exc}. Available: {', '.join(platform_ids())}, all",
        unknown=exc.unknown,
        available=platform_ids(),
    )


def _downgrade_notice(descriptor: PlatformDescriptor) -> str:
    return (
        f"{descriptor.name} does not support global install; "
        f"using project scope for {descriptor.id}"
    )


def _failure_message(action: str, failed: list[dict[str, str]]) -> str:
    names = ", ".join(f["platform"] for f in failed)
    return f"Failed to {action} {len(failed)} platform(s): {names}"
