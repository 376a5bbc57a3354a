# reqlix:header:start
#
#   project      : Reqlix
#   file         : test_locks.py
#   file_relpath : tests/store/test_locks.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Tests for `reqlix.store.locks` and concurrent store mutations."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from reqlix.store.locks import PathLockTable, canonical_path
from tests.conftest import mark_integration

if TYPE_CHECKING:
    from pathlib import Path

    from reqlix.store import RequirementStore


def test_same_path_shares_one_lock(tmp_path: Path) -> None:
    """Equivalent spellings of a path map to the same lock."""
    (tmp_path / "sub").mkdir()
    direct = PathLockTable.lock_for(tmp_path / "general.md")
    indirect = PathLockTable.lock_for(tmp_path / "sub" / ".." / "general.md")
    assert direct is indirect
    assert canonical_path(tmp_path / "sub" / "..") == canonical_path(tmp_path)


def test_hold_is_reentrant(tmp_path: Path) -> None:
    """A thread may nest holds on the same path."""
    path: Path = tmp_path / "general.md"
    with PathLockTable.hold(path), PathLockTable.hold(path):
        assert PathLockTable.size() >= 1


@mark_integration
def test_concurrent_inserts_get_distinct_indices(store: RequirementStore) -> None:
    """Parallel inserts into one chapter never lose or duplicate a requirement."""
    titles: list[str] = [f"Rule {chr(ord('A') + i)}" for i in range(12)]
    with ThreadPoolExecutor(max_workers=6) as pool:
        created = list(
            pool.map(
                lambda t: store.insert("general", "Security", t, f"Body of {t}"),
                titles,
            )
        )
    indices: list[str] = sorted(r.index for r in created)
    assert len(set(indices)) == len(titles)
    assert sorted(r.title for r in store.requirements("general", "Security")) == sorted(titles)
