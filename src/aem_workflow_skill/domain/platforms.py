"""Platform registry — where each assistant reads its instructions from.

The registry is a constant table built once at import. Each entry names
the install directory (``"."`` for the project root), the destination
filename, an optional legacy filename cleaned up on uninstall, an
optional home-relative global directory, and the transform to apply.
A platform without a global directory only supports project scope.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from aem_workflow_skill import __version__
from aem_workflow_skill.domain.document import Document
from aem_workflow_skill.domain.transforms import (
    Transform,
    transform_for_claude,
    transform_for_copilot,
    transform_for_cursor,
    transform_for_gemini,
    transform_for_windsurf,
)

ALL_PLATFORMS = "all"
DEFAULT_PLATFORM = "claude"
ROOT_DIRECTORY = "."


class Platform(StrEnum):
    """Supported AI assistant platforms, in install order."""

    CLAUDE = "claude"
    COPILOT = "copilot"
    GEMINI = "gemini"
    CURSOR = "cursor"
    WINDSURF = "windsurf"


class Scope(StrEnum):
    """Install location: the working directory or the user's home."""

    PROJECT = "project"
    GLOBAL = "global"


class UnknownPlatformError(ValueError):
    """One or more requested platform identifiers are not registered."""

    def __init__(self, unknown: list[str]) -> None:
        self.unknown = unknown
        names = ", ".join(repr(p) for p in unknown)
        super().__init__(f"Unknown platform(s): {names}")


@dataclass(frozen=True)
class PlatformDescriptor:
    """Install policy for one platform."""

    platform: Platform
    name: str
    directory: str
    filename: str
    transform: Transform
    legacy_filename: str | None = None
    global_directory: str | None = None

    @property
    def id(self) -> str:
        return self.platform.value

    @property
    def supports_global(self) -> bool:
        return self.global_directory is not None


PLATFORMS: dict[Platform, PlatformDescriptor] = {
    Platform.CLAUDE: PlatformDescriptor(
        platform=Platform.CLAUDE,
        name="Claude Code",
        directory=".claude/skills",
        filename="aem-workflow.md",
        transform=transform_for_claude,
        global_directory=ROOT_DIRECTORY,
    ),
    Platform.COPILOT: PlatformDescriptor(
        platform=Platform.COPILOT,
        name="GitHub Copilot",
        directory=".github",
        filename="copilot-instructions.md",
        transform=transform_for_copilot,
    ),
    Platform.GEMINI: PlatformDescriptor(
        platform=Platform.GEMINI,
        name="Gemini CLI",
        directory=ROOT_DIRECTORY,
        filename="GEMINI.md",
        transform=transform_for_gemini,
        global_directory=".gemini",
    ),
    Platform.CURSOR: PlatformDescriptor(
        platform=Platform.CURSOR,
        name="Cursor",
        directory=".cursor/rules",
        filename="aem-workflow.mdc",
        transform=transform_for_cursor,
        legacy_filename=".cursorrules",
    ),
    Platform.WINDSURF: PlatformDescriptor(
        platform=Platform.WINDSURF,
        name="Windsurf",
        directory=".windsurf/rules",
        filename="aem-workflow.md",
        transform=transform_for_windsurf,
        legacy_filename=".windsurfrules",
    ),
}


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def get_platform(platform_id: str) -> PlatformDescriptor | None:
    """Return the descriptor for *platform_id*, or None if unregistered."""
    try:
        return PLATFORMS[Platform(platform_id)]
    except ValueError:
        return None


def is_platform(platform_id: str) -> bool:
    return get_platform(platform_id) is not None


def platform_ids() -> list[str]:
    """All registered identifiers in install order."""
    return [p.value for p in Platform]


def all_platforms() -> list[PlatformDescriptor]:
    return [PLATFORMS[p] for p in Platform]


def apply_transform(
    descriptor: PlatformDescriptor,
    document: Document,
    *,
    version: str = __version__,
    strict: bool = False,
) -> Document:
    """Run the descriptor's transform over *document*."""
    return descriptor.transform(document, version=version, strict=strict)


def resolve_platform_ids(requested: Iterable[str]) -> list[str]:
    """Normalize a platform selection into registered identifiers.

    Accepts repeated and comma-separated values. ``all`` expands to every
    registered platform. Duplicates are dropped, first occurrence wins.
    A selection that names nothing (``""``, ``","``) means
    :data:`DEFAULT_PLATFORM`.

    Raises:
        UnknownPlatformError: If any identifier is unregistered. The whole
            selection is rejected so a typo never causes a partial install.
    """
    resolved: list[str] = []
    unknown: list[str] = []
    for value in requested:
        for raw in value.split(","):
            platform_id = raw.strip().lower()
            if not platform_id:
                continue
            if platform_id == ALL_PLATFORMS:
                candidates = platform_ids()
            elif is_platform(platform_id):
                candidates = [platform_id]
            else:
                if platform_id not in unknown:
                    unknown.append(platform_id)
                continue
            for candidate in candidates:
                if candidate not in resolved:
                    resolved.append(candidate)

    if unknown:
        raise UnknownPlatformError(unknown)
    return resolved or [DEFAULT_PLATFORM]
