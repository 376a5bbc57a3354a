# reqlix:header:start
#
#   project      : Reqlix
#   file         : locks.py
#   file_relpath : src/reqlix/store/locks.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Process-local lock table keyed by canonical path.

Mutating operations on a category file hold that file's lock for the whole
read-modify-write cycle. Inserts also hold the requirements-directory lock so
that prefix allocation for new categories cannot race. Lock order is always
directory first, then file. Reads take no lock.

The table itself is guarded by an `RLock`; entries are re-entrant locks so a
thread may nest holds on the same path.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from reqlix.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from reqlix.config.logging import ReqlixLogger

logger: ReqlixLogger = get_logger(__name__)


def canonical_path(path: Path) -> Path:
    """Return the absolute, symlink-resolved form of ``path``.

    Works for paths that do not exist yet.

    Args:
        path (Path): Any path.

    Returns:
        Path: The canonical path used as lock key.
    """
    return Path(os.path.realpath(path))


class PathLockTable:
    """Registry of per-path re-entrant locks.

    Locks are created on first use and kept for the process lifetime; the
    number of distinct category files is small.
    """

    _lock: ClassVar[RLock] = RLock()
    _locks: ClassVar[dict[Path, RLock]] = {}

    @classmethod
    def lock_for(cls, path: Path) -> RLock:
        """Return the lock guarding ``path`` (created on demand).

        Args:
            path (Path): File or directory path.

        Returns:
            RLock: The lock for the canonical form of ``path``.
        """
        key: Path = canonical_path(path)
        with cls._lock:
            lock: RLock | None = cls._locks.get(key)
            if lock is None:
                lock = RLock()
                cls._locks[key] = lock
            return lock

    @classmethod
    @contextmanager
    def hold(cls, path: Path) -> Iterator[None]:
        """Hold the lock for ``path`` for the duration of the ``with`` block.

        Args:
            path (Path): File or directory path.

        Yields:
            None: Control while the lock is held.
        """
        lock: RLock = cls.lock_for(path)
        with lock:
            logger.trace("Acquired lock for %s", path)
            yield
        logger.trace("Released lock for %s", path)

    @classmethod
    def size(cls) -> int:
        """Return the number of paths with a lock entry."""
        with cls._lock:
            return len(cls._locks)
