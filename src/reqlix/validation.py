# reqlix:header:start
#
#   project      : Reqlix
#   file         : validation.py
#   file_relpath : src/reqlix/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Parameter validation.

Every validator raises `ReqlixValidationError` with the user-facing message on
failure and returns the (possibly normalized) value on success. Store operations
validate all parameters before touching the filesystem.

Lengths are counted in characters.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

from reqlix.constants import (
    MAX_BATCH_SIZE,
    MAX_CATEGORY_LEN,
    MAX_CHAPTER_LEN,
    MAX_INDEX_LEN,
    MAX_KEYWORD_LEN,
    MAX_TEXT_LEN,
    MAX_TITLE_LEN,
    RESERVED_CATEGORY_NAME,
)
from reqlix.core.errors import ReqlixStructuralError, ReqlixValidationError
from reqlix.markdown.model import normalize_block
from reqlix.markdown.scanner import (
    ChapterHeading,
    RequirementHeading,
    ends_inside_fence,
    scan,
)

if TYPE_CHECKING:
    from re import Pattern


CATEGORY_RE: Final[Pattern[str]] = re.compile(r"^[a-z_]+$")
CHAPTER_RE: Final[Pattern[str]] = re.compile(r"^[A-Za-z :_-]+$")
_HAS_LETTER_RE: Final[Pattern[str]] = re.compile(r"[A-Za-z]")


def _require(value: str | None, name: str) -> str:
    if value is None or value == "":
        raise ReqlixValidationError(f"{name} is required")
    if not isinstance(value, str):
        raise ReqlixValidationError(f"{name} must be a string")
    return value


def _max_len(value: str, name: str, limit: int) -> None:
    if len(value) > limit:
        raise ReqlixValidationError(f"{name} exceeds maximum length of {limit} characters")


def validate_category(value: str | None) -> str:
    """Validate a category name.

    Args:
        value (str | None): Category name, e.g. ``"general"``.

    Returns:
        str: The category name.

    Raises:
        ReqlixValidationError: If the name is missing, too long, padded, uses
            characters outside ``[a-z_]``, has no letter, or is reserved.
    """
    category: str = _require(value, "category")
    _max_len(category, "category", MAX_CATEGORY_LEN)
    if category.strip() != category:
        raise ReqlixValidationError("category name must not start or end with whitespace")
    if not CATEGORY_RE.match(category):
        raise ReqlixValidationError(
            "category name must contain only lowercase English letters (a-z) and underscore (_)"
        )
    if not _HAS_LETTER_RE.search(category):
        raise ReqlixValidationError("category name must contain at least one letter")
    if category == RESERVED_CATEGORY_NAME:
        raise ReqlixValidationError(f"category name '{RESERVED_CATEGORY_NAME}' is reserved")
    return category


def validate_chapter(value: str | None) -> str:
    """Validate a chapter name.

    Args:
        value (str | None): Chapter name, e.g. ``"Security"``.

    Returns:
        str: The chapter name.

    Raises:
        ReqlixValidationError: If the name is missing, too long, padded, uses
            characters outside letters/space/colon/hyphen/underscore, or has no letter.
    """
    chapter: str = _require(value, "chapter")
    _max_len(chapter, "chapter", MAX_CHAPTER_LEN)
    if chapter.strip() != chapter:
        raise ReqlixValidationError("chapter name must not start or end with whitespace")
    if not CHAPTER_RE.match(chapter):
        raise ReqlixValidationError(
            "chapter name must contain only uppercase and lowercase English letters "
            "(A-Z, a-z), spaces, colons (:), hyphens (-), and underscores (_)"
        )
    if not _HAS_LETTER_RE.search(chapter):
        raise ReqlixValidationError("chapter name must contain at least one letter")
    return chapter


def validate_index(value: str | None) -> str:
    """Validate the length of an index (its format is checked on lookup).

    Args:
        value (str | None): Index text.

    Returns:
        str: The index.

    Raises:
        ReqlixValidationError: If the index is missing or too long.
    """
    index: str = _require(value, "index")
    _max_len(index, "index", MAX_INDEX_LEN)
    return index


def validate_title(value: str | None) -> str:
    """Validate a requirement title.

    Args:
        value (str | None): Title text.

    Returns:
        str: The title.

    Raises:
        ReqlixValidationError: If the title is missing, too long, spans several
            lines, or cannot round-trip through a heading.
    """
    title: str = _require(value, "title")
    _max_len(title, "title", MAX_TITLE_LEN)
    if "\n" in title or "\r" in title:
        raise ReqlixValidationError(
            "title must not contain newlines (invalid for markdown heading)"
        )
    if title.strip() != title:
        raise ReqlixValidationError("title is not valid markdown heading content")
    return title


def validate_optional_title(value: str | None) -> str | None:
    """Validate a title that may be omitted (update keeps the current title).

    Args:
        value (str | None): Title text, None or empty.

    Returns:
        str | None: The title, or None when not given.
    """
    if value is None or value == "":
        return None
    return validate_title(value)


def validate_text(value: str | None) -> str:
    """Validate and normalize a requirement body.

    Line endings are normalized to ``\\n`` and surrounding blank lines removed.

    Args:
        value (str | None): Body text.

    Returns:
        str: The normalized body.

    Raises:
        ReqlixValidationError: If the text is missing, blank, too long, contains a
            level-1/level-2 heading outside a code fence, or leaves a fence open.
    """
    raw: str = _require(value, "text")
    _max_len(raw, "text", MAX_TEXT_LEN)
    text: str = normalize_block(raw)
    if not text:
        raise ReqlixValidationError("text must not be blank")

    events = scan(text)
    if any(isinstance(e, (ChapterHeading, RequirementHeading)) for e in events):
        raise ReqlixValidationError(
            "text must not contain level-1 or level-2 headings outside code blocks"
        )
    if ends_inside_fence(events):
        raise ReqlixValidationError("text must not leave a code block open")
    return text


def validate_batch(items: Sequence[object], message: str) -> None:
    """Reject oversized batches.

    Args:
        items (Sequence[object]): Batch elements.
        message (str): Error message for an oversized batch.

    Raises:
        ReqlixStructuralError: If the batch exceeds the maximum size.
    """
    if len(items) > MAX_BATCH_SIZE:
        raise ReqlixStructuralError(message)


def validate_keywords(keywords: str | Sequence[str]) -> list[str]:
    """Validate search keywords and drop empty ones.

    A single string counts as a one-element list. Keywords are trimmed.

    Args:
        keywords (str | Sequence[str]): Keyword or keywords.

    Returns:
        list[str]: Trimmed, non-empty keywords in input order.

    Raises:
        ReqlixValidationError: If ``keywords`` is not a string or a sequence of
            strings, there are too many keywords, or one is too long.
    """
    if isinstance(keywords, str):
        items: list[str] = [keywords]
    elif isinstance(keywords, Sequence) and all(isinstance(k, str) for k in keywords):
        items = list(keywords)
    else:
        raise ReqlixValidationError("keywords must be a string or an array of strings")
    if len(items) > MAX_BATCH_SIZE:
        raise ReqlixValidationError(
            f"Keywords count exceeds maximum limit of {MAX_BATCH_SIZE}"
        )
    filtered: list[str] = []
    for keyword in items:
        if len(keyword) > MAX_KEYWORD_LEN:
            raise ReqlixValidationError(
                f"Keyword exceeds maximum length of {MAX_KEYWORD_LEN} characters"
            )
        trimmed: str = keyword.strip()
        if trimmed:
            filtered.append(trimmed)
    return filtered
