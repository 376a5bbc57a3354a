# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/store/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Requirement store: category file I/O, locking, CRUD and search."""

from __future__ import annotations

from reqlix.store.engine import RequirementStore
from reqlix.store.search import SearchResult

__all__ = [
    "RequirementStore",
    "SearchResult",
]
