# reqlix:header:start
#
#   project      : Reqlix
#   file         : files.py
#   file_relpath : src/reqlix/store/files.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

r"""Category file I/O.

Reading:
    Files are decoded as strict UTF-8. A leading BOM is removed and remembered,
    and the dominant newline convention (LF, CRLF or CR) is detected from a
    newline histogram. Decoding and OS failures become `ReqlixFilesystemError`
    with path-templated messages.

Writing:
    The whole file is rewritten from the serialized document, re-applying the
    remembered BOM and newline convention. Missing parent directories are
    created. Two writers exist, selected by `FileWriteStrategy`:

    - `AtomicFileWriter` writes a temporary sibling, flushes and fsyncs it, then
      moves it over the target with `os.replace`. On failure the temporary file
      is removed and the previous contents stay in place.
    - `InPlaceFileWriter` truncates and writes the target directly.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from reqlix.config.logging import get_logger
from reqlix.config.types import FileWriteStrategy
from reqlix.constants import (
    AGENTS_FILE_NAME,
    CATEGORY_SUFFIX,
    RESERVED_CATEGORY_NAME,
    UTF8_BOM,
)
from reqlix.core.errors import read_error, write_error
from reqlix.markdown.model import Document, parse_document
from reqlix.validation import CATEGORY_RE

if TYPE_CHECKING:
    from reqlix.config.logging import ReqlixLogger

logger: ReqlixLogger = get_logger(__name__)


def _newline_histogram(lines: list[str]) -> dict[str, int]:
    hist: dict[str, int] = {"\n": 0, "\r\n": 0, "\r": 0}
    for ln in lines:
        if ln.endswith("\r\n"):
            hist["\r\n"] += 1
        elif ln.endswith("\n"):
            hist["\n"] += 1
        elif ln.endswith("\r"):
            hist["\r"] += 1
    return hist


def detect_newline(text: str) -> str:
    r"""Return the dominant newline sequence of ``text`` (``\n`` when none or tied).

    Args:
        text (str): Decoded file content.

    Returns:
        str: ``"\n"``, ``"\r\n"`` or ``"\r"``.
    """
    hist: dict[str, int] = _newline_histogram(text.splitlines(keepends=True))
    # Ties resolve to LF (first key).
    return max(hist, key=lambda nl: hist[nl]) if any(hist.values()) else "\n"


def category_path(directory: Path, category: str) -> Path:
    """Return the file path of ``category`` in ``directory``."""
    return directory / f"{category}{CATEGORY_SUFFIX}"


def list_categories(directory: Path) -> list[str]:
    """List category names in ``directory``, sorted.

    ``AGENTS.md`` and files whose stem is not a valid category name are skipped.
    A missing directory has no categories.

    Args:
        directory (Path): Requirements directory.

    Returns:
        list[str]: Sorted category names.

    Raises:
        ReqlixFilesystemError: If the directory exists but cannot be listed.
    """
    if not directory.is_dir():
        logger.debug("Requirements directory %s does not exist", directory)
        return []
    try:
        entries: list[Path] = list(directory.iterdir())
    except OSError as exc:
        raise read_error(directory, exc) from exc

    names: list[str] = []
    for entry in entries:
        if entry.suffix != CATEGORY_SUFFIX or not entry.is_file():
            continue
        stem: str = entry.stem
        if entry.name == AGENTS_FILE_NAME or stem.lower() == RESERVED_CATEGORY_NAME:
            continue
        if not CATEGORY_RE.match(stem):
            logger.debug("Skipping %s: not a valid category name", entry.name)
            continue
        names.append(stem)
    return sorted(names)


@dataclass
class CategoryFile:
    """A category file loaded into memory.

    Attributes:
        name (str): Category name (file stem).
        path (Path): File path.
        document (Document): Parsed content.
        newline (str): Newline sequence to use when writing back.
        bom (bool): Whether the file started with a UTF-8 BOM.
        exists (bool): Whether the file existed when loaded.
    """

    name: str
    path: Path
    document: Document = field(default_factory=Document)
    newline: str = "\n"
    bom: bool = False
    exists: bool = False

    def render(self) -> str:
        """Return the file content to write, with BOM and newline style applied."""
        text: str = self.document.to_text()
        if self.newline != "\n":
            text = text.replace("\n", self.newline)
        if self.bom and text:
            text = UTF8_BOM + text
        return text


def read_text(path: Path) -> str:
    """Read ``path`` as strict UTF-8, keeping BOM and newlines.

    Args:
        path (Path): File to read.

    Returns:
        str: Decoded content.

    Raises:
        ReqlixFilesystemError: On OS or decoding failure.
    """
    try:
        data: bytes = path.read_bytes()
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error("Cannot decode %s as UTF-8: %s", path, exc)
        raise read_error(path, exc) from exc
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        raise read_error(path, exc) from exc


def load_category(directory: Path, category: str) -> CategoryFile:
    """Load a category file; a missing file yields an empty, non-existing one.

    Args:
        directory (Path): Requirements directory.
        category (str): Category name.

    Returns:
        CategoryFile: The loaded category.

    Raises:
        ReqlixFilesystemError: If the file exists but cannot be read or decoded.
    """
    path: Path = category_path(directory, category)
    if not path.exists():
        return CategoryFile(name=category, path=path)

    raw: str = read_text(path)
    bom: bool = raw.startswith(UTF8_BOM)
    if bom:
        raw = raw[len(UTF8_BOM) :]
    loaded = CategoryFile(
        name=category,
        path=path,
        document=parse_document(raw),
        newline=detect_newline(raw),
        bom=bom,
        exists=True,
    )
    logger.debug(
        "Loaded category %s from %s (newline=%r, bom=%s)",
        category,
        path,
        loaded.newline,
        bom,
    )
    return loaded


# ------------------------------ Writers ------------------------------


class FileWriter(Protocol):
    """Protocol for category file writers."""

    def write(self, path: Path, text: str) -> int:
        """Replace the content of ``path`` with ``text``.

        Args:
            path (Path): Target file.
            text (str): Full file content.

        Returns:
            int: Number of UTF-8 bytes written.
        """
        ...


def _ensure_parent(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Cannot create directory %s: %s", path.parent, exc)
        raise write_error(path, exc) from exc


class AtomicFileWriter:
    """Write via a temporary sibling file and `os.replace`."""

    def write(self, path: Path, text: str) -> int:  # type: ignore[override]
        """Atomically replace ``path`` with ``text``.

        Args:
            path (Path): Target file.
            text (str): Full file content.

        Returns:
            int: Number of UTF-8 bytes written.

        Raises:
            ReqlixFilesystemError: If any step fails; the target is left untouched.
        """
        _ensure_parent(path)
        data: bytes = text.encode("utf-8")
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.",
                suffix=".tmp",
                dir=path.parent,
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            if path.exists():
                os.chmod(tmp_name, path.stat().st_mode & 0o7777)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            logger.error("Atomic write to %s failed: %s", path, exc)
            raise write_error(path, exc) from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError as exc:
                    logger.warning("Cannot remove temporary file %s: %s", tmp_name, exc)
        logger.debug("AtomicFileWriter: wrote %d bytes to %s", len(data), path)
        return len(data)


class InPlaceFileWriter:
    """Truncate and write the target file directly."""

    def write(self, path: Path, text: str) -> int:  # type: ignore[override]
        """Overwrite ``path`` with ``text``.

        Args:
            path (Path): Target file.
            text (str): Full file content.

        Returns:
            int: Number of UTF-8 bytes written.

        Raises:
            ReqlixFilesystemError: If writing fails.
        """
        _ensure_parent(path)
        data: bytes = text.encode("utf-8")
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as exc:
            logger.error("In-place write to %s failed: %s", path, exc)
            raise write_error(path, exc) from exc
        logger.debug("InPlaceFileWriter: wrote %d bytes to %s", len(data), path)
        return len(data)


def select_writer(strategy: FileWriteStrategy) -> FileWriter:
    """Return the writer for ``strategy``.

    Args:
        strategy (FileWriteStrategy): Configured strategy.

    Returns:
        FileWriter: `InPlaceFileWriter` for ``IN_PLACE``, else `AtomicFileWriter`.
    """
    if strategy is FileWriteStrategy.IN_PLACE:
        return InPlaceFileWriter()
    return AtomicFileWriter()


def save_category(category: CategoryFile, strategy: FileWriteStrategy) -> int:
    """Serialize and write a category file.

    Args:
        category (CategoryFile): The category to persist.
        strategy (FileWriteStrategy): Writer strategy.

    Returns:
        int: Number of bytes written.

    Raises:
        ReqlixFilesystemError: If writing fails.
    """
    written: int = select_writer(strategy).write(category.path, category.render())
    category.exists = True
    return written
