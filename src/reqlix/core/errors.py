# reqlix:header:start
#
#   project      : Reqlix
#   file         : errors.py
#   file_relpath : src/reqlix/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Error taxonomy for Reqlix operations.

Store operations raise subclasses of `ReqlixError`. Each class carries an
`ErrorKind` and a user-facing message; the message is the exact string that ends
up in the ``error`` field of a failure envelope, so callers can match on it.

Usage:
    ```python
    raise ReqlixNotFoundError(REQUIREMENT_NOT_FOUND)
    ```
"""

from __future__ import annotations

import errno
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Final

if TYPE_CHECKING:
    from pathlib import Path

# Canonical messages
CATEGORY_NOT_FOUND: Final[str] = "Category not found"
CHAPTER_NOT_FOUND: Final[str] = "Chapter not found"
REQUIREMENT_NOT_FOUND: Final[str] = "Requirement not found"
TITLE_EXISTS: Final[str] = "Title already exists in chapter"


class ErrorKind(str, Enum):
    """Classification of operation failures.

    Attributes:
        VALIDATION: Parameter shape, length or charset rejected before any I/O.
        NOT_FOUND: Category, chapter or requirement absent.
        CONFLICT: Duplicate title within a chapter.
        FILESYSTEM: Permission, disk, path or encoding failure.
        STRUCTURAL: Malformed batch container (e.g. size exceeded).
    """

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    FILESYSTEM = "filesystem"
    STRUCTURAL = "structural"


class ReqlixError(Exception):
    """Base class for all Reqlix operation errors.

    Args:
        message (str): User-facing message, returned verbatim in failure envelopes.

    Attributes:
        message (str): User-facing message.
        kind (ErrorKind): Classification of the failure.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:
        return self.message


class ReqlixValidationError(ReqlixError):
    """A parameter failed validation."""

    kind = ErrorKind.VALIDATION


class ReqlixNotFoundError(ReqlixError):
    """A category, chapter or requirement does not exist."""

    kind = ErrorKind.NOT_FOUND


class ReqlixConflictError(ReqlixError):
    """A title already exists in the target chapter."""

    kind = ErrorKind.CONFLICT


class ReqlixFilesystemError(ReqlixError):
    """Reading or writing a category file failed."""

    kind = ErrorKind.FILESYSTEM


class ReqlixStructuralError(ReqlixError):
    """A batch container is malformed."""

    kind = ErrorKind.STRUCTURAL


_PERMISSION_ERRNOS: Final[frozenset[int]] = frozenset({errno.EACCES, errno.EPERM, errno.EROFS})
_INVALID_PATH_ERRNOS: Final[frozenset[int]] = frozenset(
    {errno.EINVAL, errno.ENAMETOOLONG, errno.ENOTDIR, errno.EISDIR, errno.ELOOP}
)
_DISK_FULL_ERRNOS: Final[frozenset[int]] = frozenset({errno.ENOSPC})


def read_error(path: Path, exc: OSError | UnicodeDecodeError) -> ReqlixFilesystemError:
    """Translate a failure while reading ``path``.

    Args:
        path (Path): File being read.
        exc (OSError | UnicodeDecodeError): The underlying error.

    Returns:
        ReqlixFilesystemError: The error to raise, with a path-templated message.
    """
    if isinstance(exc, UnicodeDecodeError):
        return ReqlixFilesystemError(f"Encoding error: file is not valid UTF-8: {path}")
    if exc.errno in _PERMISSION_ERRNOS:
        return ReqlixFilesystemError(f"Permission denied: {path}")
    if exc.errno == errno.ENOENT:
        return ReqlixFilesystemError(f"File not found: {path}")
    if exc.errno in _INVALID_PATH_ERRNOS:
        return ReqlixFilesystemError(f"Invalid path: {path}")
    return ReqlixFilesystemError(f"Failed to read file {path}: {exc.strerror or exc}")


def write_error(path: Path, exc: OSError) -> ReqlixFilesystemError:
    """Translate a failure while writing ``path``.

    Args:
        path (Path): File being written.
        exc (OSError): The underlying error.

    Returns:
        ReqlixFilesystemError: The error to raise, with a path-templated message.
    """
    if exc.errno in _PERMISSION_ERRNOS:
        return ReqlixFilesystemError(f"Permission denied: {path}")
    if exc.errno in _DISK_FULL_ERRNOS:
        return ReqlixFilesystemError(f"Disk full: cannot write to {path}")
    if exc.errno in _INVALID_PATH_ERRNOS or exc.errno == errno.ENOENT:
        return ReqlixFilesystemError(f"Invalid path: {path}")
    return ReqlixFilesystemError(f"Failed to write file {path}: {exc.strerror or exc}")
