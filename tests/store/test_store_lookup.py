# reqlix:header:start
#
#   project      : Reqlix
#   file         : test_store_lookup.py
#   file_relpath : tests/store/test_store_lookup.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Tests for listing and lookup operations of `RequirementStore`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from reqlix.core.errors import (
    ReqlixFilesystemError,
    ReqlixNotFoundError,
    ReqlixValidationError,
)
from tests.conftest import parametrize, write_category

if TYPE_CHECKING:
    from pathlib import Path

    from reqlix.store import RequirementStore


def test_no_directory_means_no_categories(store: RequirementStore) -> None:
    """A missing requirements directory is an empty store."""
    assert store.categories() == []


def test_categories_skip_agents_and_invalid_names(
    store: RequirementStore, requirements_dir: Path
) -> None:
    """``AGENTS.md`` and files with invalid stems are not categories."""
    write_category(requirements_dir, "general", "# Security\n")
    write_category(requirements_dir, "AGENTS", "# Agents\n")
    write_category(requirements_dir, "Bad-Name", "# Other\n")
    (requirements_dir / "notes.txt").write_text("plain", encoding="utf-8")
    (requirements_dir / "nested.md").mkdir()
    write_category(requirements_dir, "api", "# Endpoints\n")
    assert store.categories() == ["api", "general"]


def test_chapters_in_file_order(store: RequirementStore, requirements_dir: Path) -> None:
    """Chapters are listed as they appear, including ones without requirements."""
    write_category(requirements_dir, "general", "# Zeta\n\n# Alpha\n\nIntro only.\n")
    assert store.chapters("general") == ["Zeta", "Alpha"]


def test_chapters_of_missing_category(store: RequirementStore) -> None:
    """An unknown category is reported as not found."""
    with pytest.raises(ReqlixNotFoundError) as excinfo:
        store.chapters("general")
    assert excinfo.value.message == "Category not found"


def test_requirements_of_missing_chapter(store: RequirementStore) -> None:
    """Chapter names are matched exactly."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    with pytest.raises(ReqlixNotFoundError) as excinfo:
        store.requirements("general", "security")
    assert excinfo.value.message == "Chapter not found"


@parametrize(
    "index, error, message",
    [
        ("", ReqlixValidationError, "index is required"),
        ("bad", ReqlixValidationError, "Invalid index format: bad"),
        ("G.S.x", ReqlixValidationError, "Invalid index format: G.S.x"),
        ("X.S.1", ReqlixNotFoundError, "Category not found"),
        ("G.X.1", ReqlixNotFoundError, "Requirement not found"),
        ("G.S.9", ReqlixNotFoundError, "Requirement not found"),
    ],
)
def test_get_errors(
    store: RequirementStore, index: str, error: type[Exception], message: str
) -> None:
    """Lookup failures carry their user-facing message."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    with pytest.raises(error) as excinfo:
        store.get(index)
    assert str(excinfo.value) == message


def test_get_with_handwritten_prefix(store: RequirementStore, requirements_dir: Path) -> None:
    """Prefixes recorded in existing indices are honored even when unusual."""
    write_category(requirements_dir, "general", "# Security\n\n## GEN.SEC.7: Auth\n\nJWT\n")
    found = store.get("GEN.SEC.7")
    assert (found.category, found.chapter, found.title) == ("general", "Security", "Auth")
    assert store.insert("general", "Security", "Sessions", "Expire").index == "GEN.SEC.8"


def test_invalid_utf8_is_a_filesystem_error(
    store: RequirementStore, requirements_dir: Path
) -> None:
    """Undecodable category files produce the encoding message with the path."""
    requirements_dir.mkdir(parents=True)
    (requirements_dir / "general.md").write_bytes(b"# Security\n\n\xff\n")
    with pytest.raises(ReqlixFilesystemError) as excinfo:
        store.chapters("general")
    assert excinfo.value.message == (
        f"Encoding error: file is not valid UTF-8: {store.directory / 'general.md'}"
    )
