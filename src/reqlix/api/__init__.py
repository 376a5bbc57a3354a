# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Public Reqlix API (stable surface).

Plain functions wrapping `RequirementStore`. Each returns the JSON-ready
envelope of its operation:

- ``{"success": True, "data": ...}`` on success,
- ``{"success": False, "error": "..."}`` on a handled failure.

Batch calls (a list of indices, or ``items`` for updates) succeed as a whole
with ``data`` holding one envelope per element, in input order.

Configuration contract
----------------------
- ``config=None`` performs project discovery below ``root`` (defaults, then
  ``[tool.reqlix]`` in ``pyproject.toml``, then ``reqlix.toml``).
- A plain mapping mirrors the TOML shape and is merged over the defaults
  without discovery:

```python
from reqlix import api

api.insert_requirement(
    "general",
    "Security",
    "Auth",
    "Must use JWT",
    config={"store": {"directory": "docs/requirements"}},
)
```

- A frozen `reqlix.config.Config` is used as is.

Invalid configuration values raise `ValueError`; they are caller errors, not
operation failures.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from reqlix.api.runtime import open_store
from reqlix.config.logging import get_logger
from reqlix.constants import REQLIX_VERSION
from reqlix.core.errors import ReqlixValidationError
from reqlix.core.models import UpdateItem
from reqlix.core.results import SingleIndex, resolve_indices, run_operation

if TYPE_CHECKING:
    from pathlib import Path

    from reqlix.config import Config
    from reqlix.config.logging import ReqlixLogger
    from reqlix.core.results import IndexParam
    from reqlix.store import RequirementStore

logger: ReqlixLogger = get_logger(__name__)

UPDATE_BOTH_MODES: str = (
    "Use either index+text+title for single update OR items for batch update, not both"
)
UPDATE_NO_MODE: str = (
    "Either index (for single update) or items (for batch update) is required"
)
UPDATE_TEXT_REQUIRED: str = "text is required for single update"
UPDATE_ITEMS_TYPE: str = "items must be an array of objects"

__all__: list[str] = [
    "get_categories",
    "get_chapters",
    "get_requirements",
    "get_requirement",
    "insert_requirement",
    "update_requirement",
    "delete_requirement",
    "search_requirements",
    "version",
]


def get_categories(
    *,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """List all categories.

    Args:
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with ``{"categories": [...]}``.
    """
    store: RequirementStore = open_store(config, root=root)
    return run_operation(lambda: {"categories": store.categories()}).to_dict()


def get_chapters(
    category: str,
    *,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """List the chapters of a category, in file order.

    Args:
        category (str): Category name.
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with ``{"category", "chapters"}``.
    """
    store: RequirementStore = open_store(config, root=root)
    return run_operation(
        lambda: {"category": category, "chapters": store.chapters(category)}
    ).to_dict()


def get_requirements(
    category: str,
    chapter: str,
    *,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """List index and title of every requirement in a chapter.

    Args:
        category (str): Category name.
        chapter (str): Chapter name.
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with ``{"category", "chapter", "requirements"}``.
    """
    store: RequirementStore = open_store(config, root=root)
    return run_operation(
        lambda: {
            "category": category,
            "chapter": chapter,
            "requirements": store.requirements(category, chapter),
        }
    ).to_dict()


def get_requirement(
    index: str | Sequence[str],
    *,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """Fetch one requirement, or a batch of up to 100.

    Args:
        index (str | Sequence[str]): An index or a list of indices.
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with the requirement, or with one envelope per index.
    """
    store: RequirementStore = open_store(config, root=root)

    def _op() -> Any:
        param: IndexParam = resolve_indices(index)
        if isinstance(param, SingleIndex):
            return store.get(param.index)
        return store.get_many(param.indices)

    return run_operation(_op).to_dict()


def insert_requirement(
    category: str,
    chapter: str,
    title: str,
    text: str,
    *,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """Insert a requirement, creating its category file and chapter as needed.

    Args:
        category (str): Category name.
        chapter (str): Chapter name.
        title (str): Title, unique within the chapter.
        text (str): Body text.
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with the stored requirement and its new index.
    """
    store: RequirementStore = open_store(config, root=root)
    return run_operation(lambda: store.insert(category, chapter, title, text)).to_dict()


def _update_items(items: object) -> list[UpdateItem]:
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise ReqlixValidationError(UPDATE_ITEMS_TYPE)
    if not all(isinstance(i, (UpdateItem, Mapping)) for i in items):
        raise ReqlixValidationError(UPDATE_ITEMS_TYPE)
    return [i if isinstance(i, UpdateItem) else UpdateItem.from_mapping(i) for i in items]


def update_requirement(
    index: str | None = None,
    text: str | None = None,
    title: str | None = None,
    *,
    items: Sequence[Mapping[str, Any] | UpdateItem] | None = None,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """Update one requirement (``index`` + ``text``) or a batch (``items``).

    Exactly one mode must be used. The index of an updated requirement never
    changes; an omitted title keeps the current one.

    Args:
        index (str | None): Index for a single update.
        text (str | None): New text for a single update.
        title (str | None): Optional new title for a single update.
        items (Sequence[Mapping[str, Any] | UpdateItem] | None): Batch of up to 100
            updates, each with ``index``, ``text`` and an optional ``title``.
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with the updated requirement, or one envelope per item.
    """
    store: RequirementStore = open_store(config, root=root)

    def _op() -> Any:
        if items is not None and (index, text, title) != (None, None, None):
            raise ReqlixValidationError(UPDATE_BOTH_MODES)
        if items is not None:
            return store.update_many(_update_items(items))
        if index is None:
            raise ReqlixValidationError(UPDATE_NO_MODE)
        if text is None:
            raise ReqlixValidationError(UPDATE_TEXT_REQUIRED)
        return store.update(index, text, title)

    return run_operation(_op).to_dict()


def delete_requirement(
    index: str | Sequence[str],
    *,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """Delete one requirement, or a batch of up to 100.

    A chapter left without requirements is removed; the category file is kept.

    Args:
        index (str | Sequence[str]): An index or a list of indices.
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with the deleted requirement, or one envelope per index.
    """
    store: RequirementStore = open_store(config, root=root)

    def _op() -> Any:
        param: IndexParam = resolve_indices(index)
        if isinstance(param, SingleIndex):
            return store.delete(param.index)
        return store.delete_many(param.indices)

    return run_operation(_op).to_dict()


def search_requirements(
    keywords: str | Sequence[str],
    *,
    config: Mapping[str, Any] | Config | None = None,
    root: Path | str | None = None,
) -> dict[str, Any]:
    """Search titles and texts for any of ``keywords`` (case-insensitive).

    Args:
        keywords (str | Sequence[str]): A keyword or up to 100 keywords.
        config (Mapping[str, Any] | Config | None): Optional mapping or frozen `Config`.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        dict[str, Any]: Envelope with ``{"keywords", "results"}``.
    """
    store: RequirementStore = open_store(config, root=root)
    return run_operation(lambda: store.search(keywords)).to_dict()


def version() -> dict[str, Any]:
    """Return the envelope with the installed Reqlix version."""
    return run_operation(lambda: {"version": REQLIX_VERSION}).to_dict()
