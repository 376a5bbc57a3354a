# reqlix:header:start
#
#   project      : Reqlix
#   file         : model.py
#   file_relpath : src/reqlix/markdown/model.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""In-memory document model for a category file.

A `Document` is a preamble followed by ordered `Chapter`s; each chapter holds an
introduction and ordered `Requirement`s. `build_document` consumes scanner
events and `Document.to_text` serializes back to the canonical layout:

```markdown
# {chapter}

{intro}

## {index}: {title}

{text}
```

Every heading and every block is separated by exactly one blank line, and
non-empty output ends with a single newline. Blocks are stored with their
leading and trailing blank lines removed, so ``to_text`` is stable under
re-parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from reqlix.config.logging import get_logger
from reqlix.markdown.scanner import (
    BodyLine,
    ChapterHeading,
    FenceToggle,
    RequirementHeading,
    scan,
    split_lines,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from reqlix.config.logging import ReqlixLogger
    from reqlix.markdown.scanner import ParseEvent

logger: ReqlixLogger = get_logger(__name__)


def trim_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing whitespace-only lines.

    Args:
        lines (list[str]): Lines without terminators.

    Returns:
        list[str]: The trimmed slice (inner lines untouched).
    """
    start: int = 0
    end: int = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def normalize_block(text: str) -> str:
    r"""Normalize a text block for storage.

    Line endings become ``\n`` and leading/trailing blank lines are removed.

    Args:
        text (str): Raw block text.

    Returns:
        str: The normalized block (may be empty).
    """
    return "\n".join(trim_blank_lines(split_lines(text)))


@dataclass
class Requirement:
    """A level-2 section.

    Attributes:
        index (str): Requirement index (opaque heading content when malformed).
        title (str): Requirement title.
        text (str): Body text, normalized.
        well_formed (bool): False for headings that did not parse as ``index: title``.
    """

    index: str
    title: str
    text: str = ""
    well_formed: bool = True

    @property
    def heading(self) -> str:
        """Render the level-2 heading line."""
        if not self.well_formed:
            return f"## {self.index}"
        return f"## {self.index}: {self.title}"


@dataclass
class Chapter:
    """A level-1 section.

    Attributes:
        name (str): Heading text, matched exactly.
        intro (str): Free text between the heading and the first requirement.
        requirements (list[Requirement]): Requirements in file order.
    """

    name: str
    intro: str = ""
    requirements: list[Requirement] = field(default_factory=lambda: [])

    def addressable(self) -> Iterator[Requirement]:
        """Yield well-formed requirements only."""
        return (r for r in self.requirements if r.well_formed)

    def find(self, index: str) -> Requirement | None:
        """Return the well-formed requirement with ``index``, if any."""
        return next((r for r in self.addressable() if r.index == index), None)

    def has_title(self, title: str, *, exclude_index: str | None = None) -> bool:
        """Return True when a requirement other than ``exclude_index`` has ``title``.

        Comparison is case-sensitive and exact.

        Args:
            title (str): Title to look for.
            exclude_index (str | None): Index to skip (the requirement being updated).

        Returns:
            bool: Whether the title is taken.
        """
        return any(
            r.title == title and r.index != exclude_index for r in self.addressable()
        )


@dataclass
class Document:
    """A parsed category file.

    Attributes:
        preamble (str): Text before the first chapter heading; never addressable.
        chapters (list[Chapter]): Chapters in file order.
    """

    preamble: str = ""
    chapters: list[Chapter] = field(default_factory=lambda: [])

    def find_chapter(self, name: str) -> Chapter | None:
        """Return the first chapter named exactly ``name``."""
        return next((c for c in self.chapters if c.name == name), None)

    def chapter_names(self) -> list[str]:
        """Return chapter names in file order."""
        return [c.name for c in self.chapters]

    def to_text(self) -> str:
        """Serialize to canonical markdown.

        Returns:
            str: File text with ``\\n`` line endings; empty for an empty document.
        """
        blocks: list[str] = []
        if self.preamble:
            blocks.append(self.preamble)
        for chapter in self.chapters:
            blocks.append(f"# {chapter.name}")
            if chapter.intro:
                blocks.append(chapter.intro)
            for requirement in chapter.requirements:
                blocks.append(requirement.heading)
                if requirement.text:
                    blocks.append(requirement.text)
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"


def build_document(events: Iterable[ParseEvent]) -> Document:
    """Build a `Document` from scanner events.

    A chapter heading opens a new chapter; a requirement heading opens a new
    requirement in the current chapter. Body and fence lines belong to the
    current requirement, else the current chapter's intro, else the preamble.
    Requirement headings before the first chapter stay in the preamble.

    Args:
        events (Iterable[ParseEvent]): Events from `reqlix.markdown.scanner.scan`.

    Returns:
        Document: The parsed document.
    """
    preamble: list[str] = []
    chapters: list[tuple[Chapter, list[str]]] = []
    requirements: list[tuple[Requirement, list[str]]] = []
    buffer: list[str] = preamble

    def _close_requirements() -> None:
        for req, lines in requirements:
            req.text = "\n".join(trim_blank_lines(lines))
        requirements.clear()

    for event in events:
        if isinstance(event, ChapterHeading):
            _close_requirements()
            chapter = Chapter(name=event.name)
            buffer = []
            chapters.append((chapter, buffer))
        elif isinstance(event, RequirementHeading) and chapters:
            req = Requirement(
                index=event.index,
                title=event.title,
                well_formed=event.well_formed,
            )
            chapters[-1][0].requirements.append(req)
            buffer = []
            requirements.append((req, buffer))
        elif isinstance(event, (RequirementHeading, BodyLine, FenceToggle)):
            buffer.append(event.line)
    _close_requirements()

    for chapter, intro_lines in chapters:
        chapter.intro = "\n".join(trim_blank_lines(intro_lines))

    doc = Document(
        preamble="\n".join(trim_blank_lines(preamble)),
        chapters=[c for c, _ in chapters],
    )
    logger.trace(
        "Built document: %d chapter(s), %d requirement(s)",
        len(doc.chapters),
        sum(len(c.requirements) for c in doc.chapters),
    )
    return doc


def parse_document(text: str) -> Document:
    """Scan and build a `Document` from text.

    Args:
        text (str): Category file content (BOM already removed).

    Returns:
        Document: The parsed document.
    """
    return build_document(scan(text))
