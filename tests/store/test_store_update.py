# reqlix:header:start
#
#   project      : Reqlix
#   file         : test_store_update.py
#   file_relpath : tests/store/test_store_update.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Tests for `RequirementStore.update`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from reqlix.core.errors import (
    ReqlixConflictError,
    ReqlixNotFoundError,
    ReqlixValidationError,
)
from tests.conftest import read_category, write_category

if TYPE_CHECKING:
    from pathlib import Path

    from reqlix.store import RequirementStore


@pytest.fixture
def seeded(store: RequirementStore) -> RequirementStore:
    """Return a store holding G.S.1 (Auth) and G.S.2 (Sessions)."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    store.insert("general", "Security", "Sessions", "Expire idle sessions")
    return store


def test_update_text_keeps_title_and_index(seeded: RequirementStore) -> None:
    """Omitting the title keeps the current one."""
    updated = seeded.update("G.S.2", "Expire after 30 minutes", None)
    assert (updated.index, updated.title, updated.text) == (
        "G.S.2",
        "Sessions",
        "Expire after 30 minutes",
    )


def test_update_title(seeded: RequirementStore) -> None:
    """A new title is written into the heading; the index is unchanged."""
    seeded.update("G.S.1", "Must use JWT", "Authentication")
    assert "## G.S.1: Authentication\n" in read_category(seeded.directory, "general")


def test_update_same_title_is_not_a_conflict(seeded: RequirementStore) -> None:
    """Re-sending the current title is allowed."""
    assert seeded.update("G.S.1", "Must use JWT", "Auth").title == "Auth"


def test_update_title_conflict(seeded: RequirementStore) -> None:
    """Taking the title of a sibling requirement is rejected without writing."""
    before: str = read_category(seeded.directory, "general")
    with pytest.raises(ReqlixConflictError):
        seeded.update("G.S.1", "Must use JWT", "Sessions")
    assert read_category(seeded.directory, "general") == before


def test_update_missing_requirement(seeded: RequirementStore) -> None:
    """Unknown indices within a known category are reported as not found."""
    with pytest.raises(ReqlixNotFoundError) as excinfo:
        seeded.update("G.S.9", "text")
    assert excinfo.value.message == "Requirement not found"


def test_update_validates_before_lookup(seeded: RequirementStore) -> None:
    """Blank text is rejected even for an unknown index."""
    with pytest.raises(ReqlixValidationError) as excinfo:
        seeded.update("Z.Z.1", "   ")
    assert excinfo.value.message == "text must not be blank"


def test_update_preserves_bom_and_crlf(store: RequirementStore, requirements_dir: Path) -> None:
    """The byte order mark and CRLF line endings are written back."""
    write_category(
        requirements_dir,
        "general",
        "\ufeff# Security\r\n\r\n## G.S.1: Auth\r\n\r\nOld body\r\n",
    )
    store.update("G.S.1", "New body")
    assert read_category(requirements_dir, "general") == (
        "\ufeff# Security\r\n\r\n## G.S.1: Auth\r\n\r\nNew body\r\n"
    )


def test_update_multiline_text_uses_file_newlines(
    store: RequirementStore, requirements_dir: Path
) -> None:
    """Inner newlines of the new text follow the file's convention."""
    write_category(requirements_dir, "general", "# Security\r\n\r\n## G.S.1: Auth\r\n\r\nOld\r\n")
    store.update("G.S.1", "line one\nline two")
    assert read_category(requirements_dir, "general").endswith("line one\r\nline two\r\n")
