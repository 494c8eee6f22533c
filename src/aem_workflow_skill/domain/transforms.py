"""Per-platform content transforms.

Each transform is a pure function ``(Document, *, version, strict) ->
Document``: strip the source frontmatter, prepend the platform header,
trim. The only interpolated value is the installer version, so an
installed file can be traced back to the release that wrote it.

Claude reads the skill format natively, so its transform passes the
document through untouched (frontmatter included).
"""

from __future__ import annotations

from typing import Protocol

from aem_workflow_skill import __version__
from aem_workflow_skill.domain.document import Document, strip_frontmatter, trim

# Every generated header carries this string. Uninstall uses it to
# recognize legacy files this tool wrote.
TOOL_MARKER = "AEM Workflow Development"

CURSOR_DESCRIPTION = (
    "Expert guidance for Adobe Experience Manager (AEM) workflow development: "
    "process steps, participant choosers, launchers, and workflow APIs"
)
CURSOR_GLOBS: tuple[str, ...] = ("**/*.java", "**/*.xml", "**/*.json")


class Transform(Protocol):
    """Callable shape shared by every platform transform."""

    def __call__(self, document: Document, *, version: str = ..., strict: bool = ...) -> Document:
        ...


def _attribution(version: str) -> str:
    return (
        f"> {TOOL_MARKER} skill, installed by aem-workflow-skill v{version}.\n"
        "> Expert guidance for Adobe Experience Manager workflow development."
    )


def _with_header(document: Document, header: str, *, strict: bool) -> Document:
    body = strip_frontmatter(document, strict=strict)
    return trim(body.prepend(header))


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


def transform_for_claude(
    document: Document, *, version: str = __version__, strict: bool = False
) -> Document:
    """Identity transform — Claude skills keep their original frontmatter."""
    return document


def transform_for_copilot(
    document: Document, *, version: str = __version__, strict: bool = False
) -> Document:
    """Repository custom instructions for GitHub Copilot."""
    header = f"# {TOOL_MARKER} Instructions\n\n{_attribution(version)}\n\n"
    return _with_header(document, header, strict=strict)


def transform_for_gemini(
    document: Document, *, version: str = __version__, strict: bool = False
) -> Document:
    """GEMINI.md context file for Gemini CLI."""
    header = (
        f"# {TOOL_MARKER} Context\n\n"
        f"{_attribution(version)}\n\n"
        "Use this context when answering questions about AEM workflow models, "
        "custom process steps, participant steps, and workflow launchers.\n\n"
    )
    return _with_header(document, header, strict=strict)


def transform_for_cursor(
    document: Document, *, version: str = __version__, strict: bool = False
) -> Document:
    """Cursor ``.mdc`` project rule with its own scoping frontmatter."""
    globs = ", ".join(f'"{pattern}"' for pattern in CURSOR_GLOBS)
    header = (
        "---\n"
        f"description: {CURSOR_DESCRIPTION}\n"
        f"globs: [{globs}]\n"
        "alwaysApply: false\n"
        "---\n\n"
        f"# {TOOL_MARKER} Rules\n\n"
        f"{_attribution(version)}\n\n"
    )
    return _with_header(document, header, strict=strict)


def transform_for_windsurf(
    document: Document, *, version: str = __version__, strict: bool = False
) -> Document:
    """Workspace rule file for Windsurf's Cascade agent."""
    header = (
        f"# {TOOL_MARKER} Rules\n\n"
        f"{_attribution(version)}\n\n"
        "These Cascade rules apply when working on AEM workflow code in this "
        "workspace.\n\n"
    )
    return _with_header(document, header, strict=strict)
