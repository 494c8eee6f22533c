"""Document model and the frontmatter stripper.

A Document is an immutable sequence of lines. Every operation here
returns a new Document; nothing is edited in place.

Frontmatter is the block delimited by ``---`` lines at the very start
of the document. Only the first non-blank line can open it. Lines after
the closing delimiter are kept verbatim, so a later ``---`` (a markdown
horizontal rule) is body content.

An opener with no matching closer is ambiguous. By default the rest of
the document is treated as still inside frontmatter and discarded. ``strict=True``
treats the unmatched opener as "no frontmatter" instead.
"""

from __future__ import annotations

from dataclasses import dataclass

FRONTMATTER_DELIMITER = "---"


@dataclass(frozen=True)
class Document:
    """An ordered, immutable sequence of text lines."""

    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> Document:
        """Split *text* into lines, normalizing ``\\r\\n`` to ``\\n``."""
        normalized = text.replace("\r\n", "\n")
        return cls(tuple(normalized.split("\n")))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def prepend(self, header: str) -> Document:
        """Return a new Document with *header* placed before the content."""
        return Document.from_text(header + self.text)

    def __str__(self) -> str:
        return self.text


def _is_delimiter(line: str) -> bool:
    return line.strip() == FRONTMATTER_DELIMITER


def _first_content_index(lines: tuple[str, ...]) -> int | None:
    for i, line in enumerate(lines):
        if line.strip():
            return i
    return None


def trim(document: Document) -> Document:
    """Drop leading and trailing blank content."""
    return Document.from_text(document.text.strip())


def has_frontmatter(document: Document) -> bool:
    """True when the document opens with a closed ``---`` block."""
    start = _first_content_index(document.lines)
    if start is None or not _is_delimiter(document.lines[start]):
        return False
    return any(_is_delimiter(line) for line in document.lines[start + 1 :])


def strip_frontmatter(document: Document, *, strict: bool = False) -> Document:
    """Remove the leading frontmatter block and trim the result.

    Args:
        document: Source document.
        strict: When True, an opening ``---`` without a closer leaves
            the document untouched. When False (default), everything
            after the unmatched opener is discarded.
    """
    start = _first_content_index(document.lines)
    if start is None or not _is_delimiter(document.lines[start]):
        return trim(document)

    if strict and not has_frontmatter(document):
        return trim(document)

    kept: list[str] = list(document.lines[:start])
    inside = False
    closed = False
    for line in document.lines[start:]:
        if not closed and _is_delimiter(line):
            if inside:
                closed = True
            inside = not inside
            continue
        if not inside:
            kept.append(line)

    return trim(Document(tuple(kept)))
