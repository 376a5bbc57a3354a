# reqlix:header:start
#
#   project      : Reqlix
#   file         : engine.py
#   file_relpath : src/reqlix/store/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Requirement store: listing, lookup, insert, update, delete and batches.

Each operation validates its parameters first, then re-reads the category files
it needs, mutates the in-memory `Document` and rewrites the whole file. Nothing
is cached between calls.

Lookup by index:
    ``{category}.{chapter}.{number}`` is resolved by matching the category prefix
    against the prefixes of all categories, then the chapter prefix against the
    prefixes of that category's chapters, then the full index exactly.

Prefixes:
    A category (chapter) owning a well-formed requirement keeps the prefix found
    in that requirement's index. Others are allocated with
    `reqlix.indexing.allocate_prefixes`: categories in sorted order, chapters in
    file order.

Locking:
    Insert holds the directory lock and then the category file lock; update and
    delete hold the category file lock. Lookups and listings are lock-free.

Batches:
    ``get_many``, ``update_many`` and ``delete_many`` accept up to 100 elements,
    process them in order and return one tagged result per element. A failing
    element neither aborts nor rolls back the others.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from reqlix.config.logging import get_logger
from reqlix.core.errors import (
    CATEGORY_NOT_FOUND,
    CHAPTER_NOT_FOUND,
    REQUIREMENT_NOT_FOUND,
    TITLE_EXISTS,
    ReqlixConflictError,
    ReqlixNotFoundError,
)
from reqlix.core.models import DeletedRequirement, RequirementFull, RequirementSummary
from reqlix.core.results import run_operation
from reqlix.indexing import RequirementIndex, allocate_prefixes, generate_index
from reqlix.markdown.model import Chapter, Requirement
from reqlix.store.files import (
    CategoryFile,
    category_path,
    list_categories,
    load_category,
    save_category,
)
from reqlix.store.locks import PathLockTable
from reqlix.store.search import SearchResult, search_categories
from reqlix.validation import (
    validate_batch,
    validate_category,
    validate_chapter,
    validate_index,
    validate_keywords,
    validate_optional_title,
    validate_text,
    validate_title,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from pathlib import Path

    from reqlix.config import Config
    from reqlix.config.logging import ReqlixLogger
    from reqlix.core.models import UpdateItem
    from reqlix.core.results import Outcome
    from reqlix.markdown.model import Document

logger: ReqlixLogger = get_logger(__name__)

BATCH_GET_TOO_LARGE: str = "Batch request exceeds maximum limit of 100 indices"
BATCH_UPDATE_TOO_LARGE: str = "Batch update exceeds maximum limit of 100 items"
BATCH_DELETE_TOO_LARGE: str = "Batch delete exceeds maximum limit of 100 indices"


# --------------------------- Prefix helpers ---------------------------


def _first_index(requirements: Iterable[Requirement]) -> RequirementIndex | None:
    for requirement in requirements:
        if not requirement.well_formed:
            continue
        parsed: RequirementIndex | None = RequirementIndex.try_parse(requirement.index)
        if parsed is not None:
            return parsed
    return None


def reused_category_prefix(document: Document) -> str | None:
    """Return the category prefix recorded in the document's first valid index."""
    for chapter in document.chapters:
        parsed: RequirementIndex | None = _first_index(chapter.requirements)
        if parsed is not None:
            return parsed.category
    return None


def reused_chapter_prefix(chapter: Chapter) -> str | None:
    """Return the chapter prefix recorded in the chapter's first valid index."""
    parsed: RequirementIndex | None = _first_index(chapter.requirements)
    return parsed.chapter if parsed is not None else None


def category_prefixes(categories: Mapping[str, CategoryFile]) -> dict[str, str]:
    """Compute the prefix of every category.

    Args:
        categories (Mapping[str, CategoryFile]): Loaded categories by name.

    Returns:
        dict[str, str]: Prefix by category name.
    """
    reused: dict[str, str] = {}
    for name, loaded in categories.items():
        prefix: str | None = reused_category_prefix(loaded.document)
        if prefix is not None:
            reused[name] = prefix
    return allocate_prefixes(sorted(categories), reused)


def chapter_prefixes(document: Document) -> dict[str, str]:
    """Compute the prefix of every chapter of a category, in file order.

    Args:
        document (Document): Parsed category file.

    Returns:
        dict[str, str]: Prefix by chapter name.
    """
    names: list[str] = []
    reused: dict[str, str] = {}
    for chapter in document.chapters:
        if chapter.name in names:
            continue
        names.append(chapter.name)
        prefix: str | None = reused_chapter_prefix(chapter)
        if prefix is not None:
            reused[chapter.name] = prefix
    return allocate_prefixes(names, reused)


def _find_in_category(
    loaded: CategoryFile, parsed: RequirementIndex, index: str
) -> tuple[Chapter, Requirement] | None:
    prefixes: dict[str, str] = chapter_prefixes(loaded.document)
    for chapter in loaded.document.chapters:
        if prefixes.get(chapter.name) != parsed.chapter:
            continue
        requirement: Requirement | None = chapter.find(index)
        if requirement is not None:
            return chapter, requirement
    return None


def _full(loaded: CategoryFile, chapter: Chapter, requirement: Requirement) -> RequirementFull:
    return RequirementFull(
        index=requirement.index,
        title=requirement.title,
        text=requirement.text,
        category=loaded.name,
        chapter=chapter.name,
    )


# ------------------------------- Store --------------------------------


class RequirementStore:
    """Requirement operations over one requirements directory.

    Args:
        config (Config): Runtime configuration (directory and writer strategy).

    Attributes:
        config (Config): Runtime configuration.
    """

    def __init__(self, config: Config) -> None:
        self.config: Config = config

    @property
    def directory(self) -> Path:
        """Directory holding the category files."""
        return self.config.requirements_dir

    def _load(self, category: str) -> CategoryFile:
        return load_category(self.directory, category)

    def _load_all(self, names: Iterable[str]) -> dict[str, CategoryFile]:
        return {name: self._load(name) for name in names}

    def _save(self, loaded: CategoryFile) -> None:
        save_category(loaded, self.config.file_write_strategy)

    def _load_existing(self, category: str) -> CategoryFile:
        loaded: CategoryFile = self._load(category)
        if not loaded.exists:
            raise ReqlixNotFoundError(CATEGORY_NOT_FOUND)
        return loaded

    def _locate(self, index: str) -> tuple[CategoryFile, Chapter, Requirement]:
        parsed: RequirementIndex = RequirementIndex.parse(index)
        loaded: dict[str, CategoryFile] = self._load_all(list_categories(self.directory))
        prefixes: dict[str, str] = category_prefixes(loaded)
        candidates: list[CategoryFile] = [
            loaded[name] for name in sorted(loaded) if prefixes.get(name) == parsed.category
        ]
        if not candidates:
            raise ReqlixNotFoundError(CATEGORY_NOT_FOUND)
        for candidate in candidates:
            found: tuple[Chapter, Requirement] | None = _find_in_category(candidate, parsed, index)
            if found is not None:
                return candidate, found[0], found[1]
        raise ReqlixNotFoundError(REQUIREMENT_NOT_FOUND)

    def _relocate(self, category: str, index: str) -> tuple[CategoryFile, Chapter, Requirement]:
        # Re-read under the file lock; the index may have been deleted meanwhile.
        loaded: CategoryFile = self._load(category)
        found: tuple[Chapter, Requirement] | None = _find_in_category(
            loaded, RequirementIndex.parse(index), index
        )
        if found is None:
            raise ReqlixNotFoundError(REQUIREMENT_NOT_FOUND)
        return loaded, found[0], found[1]

    # ------------------------------ Listing ------------------------------

    def categories(self) -> list[str]:
        """Return all category names, sorted.

        Returns:
            list[str]: Category names (``AGENTS.md`` excluded).
        """
        return list_categories(self.directory)

    def chapters(self, category: str) -> list[str]:
        """Return the chapter names of ``category`` in file order.

        Args:
            category (str): Category name.

        Returns:
            list[str]: Chapter names.

        Raises:
            ReqlixNotFoundError: If the category file does not exist.
        """
        category = validate_category(category)
        return self._load_existing(category).document.chapter_names()

    def requirements(self, category: str, chapter: str) -> list[RequirementSummary]:
        """Return index and title of every requirement in a chapter.

        Args:
            category (str): Category name.
            chapter (str): Chapter name (exact match).

        Returns:
            list[RequirementSummary]: Requirements in file order.

        Raises:
            ReqlixNotFoundError: If the category or the chapter does not exist.
        """
        category = validate_category(category)
        chapter = validate_chapter(chapter)
        found: Chapter | None = self._load_existing(category).document.find_chapter(chapter)
        if found is None:
            raise ReqlixNotFoundError(CHAPTER_NOT_FOUND)
        return [RequirementSummary(index=r.index, title=r.title) for r in found.addressable()]

    # ------------------------------- Get ---------------------------------

    def get(self, index: str) -> RequirementFull:
        """Return the requirement with ``index``.

        Args:
            index (str): Requirement index.

        Returns:
            RequirementFull: The requirement and its location.

        Raises:
            ReqlixValidationError: If the index is missing, too long or malformed.
            ReqlixNotFoundError: If no category or requirement matches.
        """
        index = validate_index(index)
        loaded, chapter, requirement = self._locate(index)
        return _full(loaded, chapter, requirement)

    def get_many(self, indices: Sequence[str]) -> list[Outcome]:
        """Batch variant of `get`.

        Args:
            indices (Sequence[str]): Up to 100 indices.

        Returns:
            list[Outcome]: One result per index, in input order.

        Raises:
            ReqlixStructuralError: If more than 100 indices are given.
        """
        validate_batch(indices, BATCH_GET_TOO_LARGE)
        return [run_operation(partial(self.get, index)) for index in indices]

    # ------------------------------ Insert -------------------------------

    def insert(self, category: str, chapter: str, title: str, text: str) -> RequirementFull:
        """Append a new requirement, creating the category file and chapter as needed.

        Args:
            category (str): Category name.
            chapter (str): Chapter name; created at the end of the file if absent.
            title (str): Title, unique within the chapter.
            text (str): Body text.

        Returns:
            RequirementFull: The stored requirement with its new index.

        Raises:
            ReqlixValidationError: If a parameter is invalid.
            ReqlixConflictError: If the title already exists in the chapter.
            ReqlixFilesystemError: If reading or writing fails.
        """
        category = validate_category(category)
        chapter = validate_chapter(chapter)
        body: str = validate_text(text)
        heading: str = validate_title(title)

        path: Path = category_path(self.directory, category)
        with PathLockTable.hold(self.directory), PathLockTable.hold(path):
            names: list[str] = list_categories(self.directory)
            if category not in names:
                names.append(category)
            loaded: dict[str, CategoryFile] = self._load_all(names)
            target: CategoryFile = loaded[category]

            section: Chapter | None = target.document.find_chapter(chapter)
            if section is None:
                logger.info("Creating chapter '%s' in category '%s'", chapter, category)
                section = Chapter(name=chapter)
                target.document.chapters.append(section)
            elif section.has_title(heading):
                raise ReqlixConflictError(TITLE_EXISTS)

            index: str = generate_index(
                category_prefixes(loaded)[category],
                chapter_prefixes(target.document)[chapter],
                (r.index for r in section.addressable()),
            )
            requirement = Requirement(index=index, title=heading, text=body)
            section.requirements.append(requirement)
            self._save(target)

        logger.info("Inserted %s into %s/%s", index, category, chapter)
        return _full(target, section, requirement)

    # ------------------------------ Update -------------------------------

    def update(self, index: str, text: str, title: str | None = None) -> RequirementFull:
        """Replace the text (and optionally the title) of a requirement.

        The index never changes.

        Args:
            index (str): Requirement index.
            text (str): New body text.
            title (str | None): New title, or None to keep the current one.

        Returns:
            RequirementFull: The updated requirement.

        Raises:
            ReqlixValidationError: If a parameter is invalid.
            ReqlixNotFoundError: If the requirement does not exist.
            ReqlixConflictError: If the new title is taken by another requirement
                of the same chapter.
            ReqlixFilesystemError: If reading or writing fails.
        """
        index = validate_index(index)
        body: str = validate_text(text)
        new_title: str | None = validate_optional_title(title)

        located, _, _ = self._locate(index)
        with PathLockTable.hold(located.path):
            loaded, chapter, requirement = self._relocate(located.name, index)
            if (
                new_title is not None
                and new_title != requirement.title
                and chapter.has_title(new_title, exclude_index=index)
            ):
                raise ReqlixConflictError(TITLE_EXISTS)
            requirement.text = body
            if new_title is not None:
                requirement.title = new_title
            self._save(loaded)

        logger.info("Updated %s in %s/%s", index, loaded.name, chapter.name)
        return _full(loaded, chapter, requirement)

    def update_many(self, items: Sequence[UpdateItem]) -> list[Outcome]:
        """Batch variant of `update`.

        Args:
            items (Sequence[UpdateItem]): Up to 100 updates.

        Returns:
            list[Outcome]: One result per item, in input order.

        Raises:
            ReqlixStructuralError: If more than 100 items are given.
        """
        validate_batch(items, BATCH_UPDATE_TOO_LARGE)
        return [
            run_operation(partial(self.update, item.index, item.text, item.title))
            for item in items
        ]

    # ------------------------------ Delete -------------------------------

    def delete(self, index: str) -> DeletedRequirement:
        """Remove a requirement; remove its chapter when no requirement is left.

        The category file is kept even when it ends up empty.

        Args:
            index (str): Requirement index.

        Returns:
            DeletedRequirement: Identity of the removed requirement.

        Raises:
            ReqlixValidationError: If the index is invalid.
            ReqlixNotFoundError: If the requirement does not exist.
            ReqlixFilesystemError: If reading or writing fails.
        """
        index = validate_index(index)
        located, _, _ = self._locate(index)
        with PathLockTable.hold(located.path):
            loaded, chapter, requirement = self._relocate(located.name, index)
            chapter.requirements.remove(requirement)
            if not chapter.requirements:
                logger.info("Removing empty chapter '%s' from %s", chapter.name, loaded.name)
                loaded.document.chapters.remove(chapter)
            self._save(loaded)

        logger.info("Deleted %s from %s/%s", index, loaded.name, chapter.name)
        return DeletedRequirement(
            index=requirement.index,
            title=requirement.title,
            category=loaded.name,
            chapter=chapter.name,
        )

    def delete_many(self, indices: Sequence[str]) -> list[Outcome]:
        """Batch variant of `delete`.

        Args:
            indices (Sequence[str]): Up to 100 indices.

        Returns:
            list[Outcome]: One result per index, in input order.

        Raises:
            ReqlixStructuralError: If more than 100 indices are given.
        """
        validate_batch(indices, BATCH_DELETE_TOO_LARGE)
        return [run_operation(partial(self.delete, index)) for index in indices]

    # ------------------------------ Search -------------------------------

    def search(self, keywords: str | Sequence[str]) -> SearchResult:
        """Find requirements whose title or text contains any keyword.

        Args:
            keywords (str | Sequence[str]): Keyword or keywords (case-insensitive).

        Returns:
            SearchResult: The effective keywords and the matches.
        """
        effective: list[str] = validate_keywords(keywords)
        if not effective:
            return SearchResult(keywords=[], results=[])
        names: list[str] = list_categories(self.directory)
        return search_categories(
            (self._load(name) for name in names),
            effective,
        )
