# reqlix:header:start
#
#   project      : Reqlix
#   file         : models.py
#   file_relpath : src/reqlix/core/models.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Requirement records returned by store operations.

All records are frozen dataclasses; `reqlix.core.results` converts them into
JSON-ready dicts with `dataclasses.asdict`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class RequirementSummary:
    """Index and title of a requirement, as listed within a chapter.

    Attributes:
        index (str): Requirement index, e.g. ``"G.S.1"``.
        title (str): Requirement title.
    """

    index: str
    title: str


@dataclass(frozen=True, slots=True)
class RequirementFull:
    """A requirement with its text and location.

    Attributes:
        index (str): Requirement index.
        title (str): Requirement title.
        text (str): Requirement body, as stored.
        category (str): Category name (file stem).
        chapter (str): Chapter name (level-1 heading text).
    """

    index: str
    title: str
    text: str
    category: str
    chapter: str


@dataclass(frozen=True, slots=True)
class DeletedRequirement:
    """Identity of a requirement removed by a delete operation.

    Attributes:
        index (str): Index of the removed requirement.
        title (str): Title of the removed requirement.
        category (str): Category it was removed from.
        chapter (str): Chapter it was removed from.
    """

    index: str
    title: str
    category: str
    chapter: str


@dataclass(frozen=True, slots=True)
class UpdateItem:
    """One element of a batch update.

    Attributes:
        index (str): Index of the requirement to update.
        text (str): New body text.
        title (str | None): New title, or None to keep the current one.
    """

    index: str
    text: str
    title: str | None = None

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any]) -> UpdateItem:
        """Build an item from a JSON object with ``index``, ``text`` and ``title``.

        Missing or null ``index``/``text`` become empty strings, so the update
        fails validation for this element only.

        Args:
            item (Mapping[str, Any]): Decoded JSON object.

        Returns:
            UpdateItem: The batch element.
        """
        title: Any = item.get("title")
        return cls(
            index=str(item.get("index") or ""),
            text=str(item.get("text") or ""),
            title=str(title) if title is not None else None,
        )
