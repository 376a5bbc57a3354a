# reqlix:header:start
#
#   project      : Reqlix
#   file         : test_store_insert.py
#   file_relpath : tests/store/test_store_insert.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Tests for `RequirementStore.insert`: index allocation, chapter creation, conflicts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from reqlix.core.errors import ReqlixConflictError, ReqlixValidationError
from tests.conftest import read_category, write_category

if TYPE_CHECKING:
    from pathlib import Path

    from reqlix.store import RequirementStore


def test_insert_creates_directory_and_file(store: RequirementStore) -> None:
    """The requirements directory and category file are created on first insert."""
    assert not store.directory.exists()
    store.insert("general", "Security", "Auth", "Must use JWT")
    assert (store.directory / "general.md").is_file()


def test_insert_appends_new_chapter_at_end(store: RequirementStore) -> None:
    """A new chapter is appended after existing ones and gets its own prefix."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    created = store.insert("general", "Sessions", "Timeout", "Expire idle sessions")
    assert created.index == "G.SE.1"
    assert store.chapters("general") == ["Security", "Sessions"]


def test_second_category_extends_prefix(store: RequirementStore) -> None:
    """A category inserted after ``general`` extends its prefix to stay unique."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    guide = store.insert("guides", "Style", "Tone", "Be concise")
    assert guide.index == "GU.S.1"
    assert store.get("G.S.1").category == "general"
    assert store.get("GU.S.1").category == "guides"


def test_existing_prefix_is_kept_by_first_category(store: RequirementStore) -> None:
    """A category that already owns ``G`` keeps it; a later one takes ``GE``."""
    store.insert("guides", "Style", "Tone", "Be concise")
    general = store.insert("general", "Security", "Auth", "Must use JWT")
    assert general.index == "GE.S.1"
    assert store.get("G.S.1").category == "guides"


def test_numbering_continues_after_delete(store: RequirementStore) -> None:
    """Numbers are never reused below the highest one in the chapter."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    store.insert("general", "Security", "Sessions", "Expire idle sessions")
    store.delete("G.S.1")
    assert store.insert("general", "Security", "Audit", "Log access").index == "G.S.3"


def test_duplicate_title_conflicts_and_writes_nothing(store: RequirementStore) -> None:
    """A title already present in the chapter is rejected; the file is untouched."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    before: str = read_category(store.directory, "general")
    with pytest.raises(ReqlixConflictError) as excinfo:
        store.insert("general", "Security", "Auth", "Another body")
    assert excinfo.value.message == "Title already exists in chapter"
    assert read_category(store.directory, "general") == before


def test_title_uniqueness_is_per_chapter_and_case_sensitive(store: RequirementStore) -> None:
    """The same title may appear in another chapter or with different case."""
    store.insert("general", "Security", "Auth", "Must use JWT")
    assert store.insert("general", "Privacy", "Auth", "Consent first").index == "G.P.1"
    assert store.insert("general", "Security", "auth", "Lowercase twin").index == "G.S.2"


def test_invalid_parameters_touch_nothing(store: RequirementStore) -> None:
    """Validation runs before any filesystem access."""
    with pytest.raises(ReqlixValidationError) as excinfo:
        store.insert("General", "Security", "Auth", "Must use JWT")
    assert excinfo.value.message == (
        "category name must contain only lowercase English letters (a-z) and underscore (_)"
    )
    with pytest.raises(ReqlixValidationError):
        store.insert("general", "Security", "Auth", "## X.Y.1: Injected")
    assert not store.directory.exists()


def test_text_is_normalized_on_insert(store: RequirementStore) -> None:
    """CRLF endings and surrounding blank lines are normalized away."""
    created = store.insert("general", "Security", "Auth", "\r\nline one\r\nline two\r\n\r\n")
    assert created.text == "line one\nline two"


def test_malformed_heading_is_preserved(store: RequirementStore, requirements_dir: Path) -> None:
    """Non-addressable level-2 sections survive a rewrite unchanged."""
    write_category(
        requirements_dir,
        "general",
        "Preamble text.\n"
        "\n"
        "# Security\n"
        "\n"
        "Chapter intro.\n"
        "\n"
        "## Overview\n"
        "\n"
        "Free notes.\n"
        "\n"
        "## G.S.1: Auth\n"
        "\n"
        "Must use JWT\n",
    )
    created = store.insert("general", "Security", "Sessions", "Expire idle sessions")
    assert created.index == "G.S.2"
    assert [r.index for r in store.requirements("general", "Security")] == ["G.S.1", "G.S.2"]
    assert read_category(requirements_dir, "general") == (
        "Preamble text.\n"
        "\n"
        "# Security\n"
        "\n"
        "Chapter intro.\n"
        "\n"
        "## Overview\n"
        "\n"
        "Free notes.\n"
        "\n"
        "## G.S.1: Auth\n"
        "\n"
        "Must use JWT\n"
        "\n"
        "## G.S.2: Sessions\n"
        "\n"
        "Expire idle sessions\n"
    )


def test_fenced_heading_in_text_round_trips(store: RequirementStore) -> None:
    """Headings inside a code fence stay part of the requirement text."""
    text: str = "Example:\n\n```markdown\n# Not a chapter\n## X.Y.1: Not a requirement\n```"
    store.insert("general", "Security", "Example", text)
    assert store.get("G.S.1").text == text
    assert store.chapters("general") == ["Security"]
