# reqlix:header:start
#
#   project      : Reqlix
#   file         : search.py
#   file_relpath : src/reqlix/store/search.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Keyword search over loaded category files.

A requirement matches when any keyword is a case-insensitive substring of its
title or its text. Only well-formed requirements are searched. Results follow
category, chapter and file order, which callers must not rely on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from reqlix.config.logging import get_logger
from reqlix.core.models import RequirementFull

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from reqlix.config.logging import ReqlixLogger
    from reqlix.markdown.model import Requirement
    from reqlix.store.files import CategoryFile

logger: ReqlixLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Search outcome.

    Attributes:
        keywords (list[str]): Effective keywords (trimmed, empty ones dropped).
        results (list[RequirementFull]): Matching requirements.
    """

    keywords: list[str] = field(default_factory=lambda: [])
    results: list[RequirementFull] = field(default_factory=lambda: [])


def matches(requirement: Requirement, folded_keywords: Sequence[str]) -> bool:
    """Return True when any keyword occurs in the title or text.

    Args:
        requirement (Requirement): Requirement to test.
        folded_keywords (Sequence[str]): Keywords already case-folded.

    Returns:
        bool: Whether the requirement matches.
    """
    title: str = requirement.title.casefold()
    text: str = requirement.text.casefold()
    return any(k in title or k in text for k in folded_keywords)


def search_categories(
    categories: Iterable[CategoryFile],
    keywords: Sequence[str],
) -> SearchResult:
    """Search every requirement of ``categories`` for ``keywords``.

    Args:
        categories (Iterable[CategoryFile]): Loaded categories; consumed lazily.
        keywords (Sequence[str]): Validated, non-empty keywords.

    Returns:
        SearchResult: The keywords and the matching requirements.
    """
    folded: list[str] = [k.casefold() for k in keywords]
    results: list[RequirementFull] = []
    scanned: int = 0
    for loaded in categories:
        scanned += 1
        for chapter in loaded.document.chapters:
            for requirement in chapter.addressable():
                if matches(requirement, folded):
                    results.append(
                        RequirementFull(
                            index=requirement.index,
                            title=requirement.title,
                            text=requirement.text,
                            category=loaded.name,
                            chapter=chapter.name,
                        )
                    )
    logger.debug(
        "Search for %s: %d match(es) in %d categor(ies)", keywords, len(results), scanned
    )
    return SearchResult(keywords=list(keywords), results=results)
