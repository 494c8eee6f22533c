"""Skill source discovery.

The skill document ships inside the package. Two packaged locations are
checked in order:

1. ``skills/aem-workflow/SKILL.md``
2. ``docs/SKILL.md``

An explicit path (``--source`` or ``AEM_SKILL_SOURCE_PATH``) replaces the
packaged candidates entirely; a missing explicit path is an error rather
than a silent fallback.
"""

from __future__ import annotations

from pathlib import Path

from aem_workflow_skill.domain.document import Document
from aem_workflow_skill.infrastructure.filesystem import FileSystem

SKILL_NAME = "aem-workflow"
SKILL_FILENAME = "SKILL.md"

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class SourceNotFoundError(FileNotFoundError):
    """The skill document was not found at any candidate location."""

    def __init__(self, searched: list[Path]) -> None:
        self.searched = searched
        locations = ", ".join(str(p) for p in searched)
        super().__init__(f"{SKILL_FILENAME} not found (searched: {locations})")


def candidate_paths(explicit: Path | None = None) -> list[Path]:
    """Locations checked for the skill document, in priority order."""
    if explicit is not None:
        return [explicit]
    return [
        _PACKAGE_ROOT / "skills" / SKILL_NAME / SKILL_FILENAME,
        _PACKAGE_ROOT / "docs" / SKILL_FILENAME,
    ]


def find_skill_source(fs: FileSystem, explicit: Path | None = None) -> Path | None:
    """Return the first candidate that exists, or None."""
    for candidate in candidate_paths(explicit):
        if fs.exists(candidate):
            return candidate
    return None


def load_skill_document(fs: FileSystem, explicit: Path | None = None) -> Document:
    """Read the skill document.

    Raises:
        SourceNotFoundError: If no candidate location exists.
        OSError: If the located file cannot be read.
        UnicodeDecodeError: If the located file is not UTF-8.
    """
    path = find_skill_source(fs, explicit)
    if path is None:
        raise SourceNotFoundError(candidate_paths(explicit))
    return Document.from_text(fs.read_text(path))
