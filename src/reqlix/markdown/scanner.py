# reqlix:header:start
#
#   project      : Reqlix
#   file         : scanner.py
#   file_relpath : src/reqlix/markdown/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Line scanner for category files.

The scanner turns markdown text into an ordered list of structural events:

- `ChapterHeading` for a level-1 ATX heading (``# name``),
- `RequirementHeading` for a level-2 ATX heading (``## index: title``),
- `FenceToggle` for a code-fence line (three backticks, any info string),
- `BodyLine` for everything else, including level-3+ headings.

Heading recognition:
    Up to three leading spaces, exactly N ``#`` characters, a mandatory space,
    then the heading text. Surrounding whitespace of the text is trimmed; trailing
    ``#`` characters are kept as text.

Fences:
    A fence toggles on any line whose stripped content starts with three
    backticks. Lines inside an open fence are never headings. Tilde fences are
    plain text here.

Malformed requirement headings:
    Level-2 content that does not split into a non-empty index and a non-empty
    title on the first ``": "`` yields a `RequirementHeading` with
    ``well_formed=False``; the full content becomes its opaque index and its
    title is empty.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from reqlix.config.logging import get_logger

if TYPE_CHECKING:
    from re import Pattern

    from reqlix.config.logging import ReqlixLogger

logger: ReqlixLogger = get_logger(__name__)

HEADING_RE: Final[Pattern[str]] = re.compile(r"^ {0,3}(#+) (.*)$")
FENCE_MARKER: Final[str] = "```"
REQUIREMENT_SEPARATOR: Final[str] = ": "

CHAPTER_LEVEL: Final[int] = 1
REQUIREMENT_LEVEL: Final[int] = 2


@dataclass(frozen=True, slots=True)
class ChapterHeading:
    """Level-1 heading.

    Attributes:
        line_no (int): 0-based line number.
        line (str): Raw line, without line terminator.
        name (str): Trimmed heading text.
    """

    line_no: int
    line: str
    name: str


@dataclass(frozen=True, slots=True)
class RequirementHeading:
    """Level-2 heading.

    Attributes:
        line_no (int): 0-based line number.
        line (str): Raw line, without line terminator.
        index (str): Requirement index, or the full heading content when malformed.
        title (str): Requirement title; empty when malformed.
        well_formed (bool): Whether the content parsed as ``{index}: {title}``.
    """

    line_no: int
    line: str
    index: str
    title: str
    well_formed: bool = True


@dataclass(frozen=True, slots=True)
class FenceToggle:
    """Code-fence delimiter line.

    Attributes:
        line_no (int): 0-based line number.
        line (str): Raw line, without line terminator.
        opening (bool): True when this line opens a fence, False when it closes one.
    """

    line_no: int
    line: str
    opening: bool


@dataclass(frozen=True, slots=True)
class BodyLine:
    """Any other line.

    Attributes:
        line_no (int): 0-based line number.
        line (str): Raw line, without line terminator.
        in_fence (bool): Whether the line sits inside an open code fence.
    """

    line_no: int
    line: str
    in_fence: bool = False


ParseEvent = Union[ChapterHeading, RequirementHeading, FenceToggle, BodyLine]


def split_lines(text: str) -> list[str]:
    r"""Split text into lines without terminators.

    ``\r\n`` and lone ``\r`` are normalized to ``\n`` first. A trailing newline
    does not produce a trailing empty line.

    Args:
        text (str): Raw text.

    Returns:
        list[str]: The lines.
    """
    normalized: str = text.replace("\r\n", "\n").replace("\r", "\n")
    if not normalized:
        return []
    lines: list[str] = normalized.split("\n")
    if normalized.endswith("\n"):
        lines.pop()
    return lines


def parse_heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, text)`` when ``line`` is an ATX heading.

    Fence state is not considered here.

    Args:
        line (str): A single line without terminator.

    Returns:
        tuple[int, str] | None: Heading level and trimmed text, or None.
    """
    m: re.Match[str] | None = HEADING_RE.match(line)
    if m is None:
        return None
    return len(m.group(1)), m.group(2).strip()


def split_requirement_heading(content: str) -> tuple[str, str, bool]:
    """Split level-2 heading content into ``(index, title, well_formed)``.

    Args:
        content (str): Trimmed heading text.

    Returns:
        tuple[str, str, bool]: Index, title and whether the content was well formed.
    """
    index, sep, title = content.partition(REQUIREMENT_SEPARATOR)
    index = index.strip()
    title = title.strip()
    if not sep or not index or not title:
        return content, "", False
    return index, title, True


def is_fence_line(line: str) -> bool:
    """Return True when ``line`` opens or closes a code fence."""
    return line.strip().startswith(FENCE_MARKER)


def scan(text: str) -> list[ParseEvent]:
    """Scan markdown text into structural events, in line order.

    Args:
        text (str): Category file content (BOM already removed).

    Returns:
        list[ParseEvent]: One event per line.
    """
    events: list[ParseEvent] = []
    in_fence: bool = False
    for line_no, line in enumerate(split_lines(text)):
        if is_fence_line(line):
            in_fence = not in_fence
            events.append(FenceToggle(line_no=line_no, line=line, opening=in_fence))
            continue
        if in_fence:
            events.append(BodyLine(line_no=line_no, line=line, in_fence=True))
            continue

        heading: tuple[int, str] | None = parse_heading(line)
        if heading is not None and heading[0] == CHAPTER_LEVEL:
            events.append(ChapterHeading(line_no=line_no, line=line, name=heading[1]))
        elif heading is not None and heading[0] == REQUIREMENT_LEVEL:
            index, title, ok = split_requirement_heading(heading[1])
            if not ok:
                logger.debug("Malformed requirement heading at line %d: %r", line_no + 1, line)
            events.append(
                RequirementHeading(
                    line_no=line_no,
                    line=line,
                    index=index,
                    title=title,
                    well_formed=ok,
                )
            )
        else:
            events.append(BodyLine(line_no=line_no, line=line))

    logger.trace("Scanned %d lines (fence open at EOF: %s)", len(events), in_fence)
    return events


def ends_inside_fence(events: list[ParseEvent]) -> bool:
    """Return True when the last fence toggle leaves a fence open.

    Args:
        events (list[ParseEvent]): Events returned by `scan`.

    Returns:
        bool: Whether a code fence is still open at the end of the text.
    """
    for event in reversed(events):
        if isinstance(event, FenceToggle):
            return event.opening
    return False
