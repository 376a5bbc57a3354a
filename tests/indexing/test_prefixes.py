# reqlix:header:start
#
#   project      : Reqlix
#   file         : test_prefixes.py
#   file_relpath : tests/indexing/test_prefixes.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Tests for prefix allocation and index generation in `reqlix.indexing`."""

from __future__ import annotations

import pytest

from reqlix.core.errors import ReqlixValidationError
from reqlix.indexing import (
    RequirementIndex,
    allocate_prefixes,
    compute_prefix,
    generate_index,
    letters_of,
    next_number,
)
from tests.conftest import parametrize


@parametrize(
    "name, existing, expected",
    [
        ("general", set(), "G"),
        ("guides", {"G"}, "GU"),
        ("guidance", {"G", "GU"}, "GUI"),
        ("Security", set(), "S"),
        ("Sessions", {"S"}, "SE"),
        ("Non-functional: UX", set(), "N"),
        ("api_v_two", {"A"}, "AP"),
    ],
)
def test_compute_prefix_extends_until_unique(
    name: str, existing: set[str], expected: str
) -> None:
    """The shortest unused leading slice of the name's letters wins."""
    assert compute_prefix(name, existing) == expected


def test_compute_prefix_appends_digits_when_letters_are_exhausted() -> None:
    """When every slice is taken, a decimal suffix starting at 2 is added."""
    assert compute_prefix("ab", {"A", "AB"}) == "AB2"
    assert compute_prefix("ab", {"A", "AB", "AB2"}) == "AB3"


def test_compute_prefix_requires_letters() -> None:
    """A name without ASCII letters cannot yield a prefix."""
    with pytest.raises(ValueError):
        compute_prefix("___", set())


def test_letters_of_keeps_ascii_letters_uppercased() -> None:
    """Separators, digits and non-ASCII letters are dropped."""
    assert letters_of("api_v2: é-Xy") == "APIVXY"


def test_allocate_prefixes_honors_reused_prefixes_first() -> None:
    """Reused prefixes are reserved before new ones are computed."""
    prefixes: dict[str, str] = allocate_prefixes(["general", "guides"], {"guides": "G"})
    assert prefixes == {"general": "GE", "guides": "G"}


def test_allocate_prefixes_follows_iteration_order() -> None:
    """Without reuse, earlier names get the shorter prefixes."""
    assert allocate_prefixes(["Security", "Sessions", "Storage"], {}) == {
        "Security": "S",
        "Sessions": "SE",
        "Storage": "ST",
    }


def test_allocate_prefixes_skips_names_without_letters() -> None:
    """Names without letters get no entry instead of failing the whole map."""
    assert allocate_prefixes(["__", "general"], {}) == {"general": "G"}


@parametrize(
    "index, expected",
    [
        ("G.S.1", RequirementIndex("G", "S", 1)),
        ("GU.SEC.42", RequirementIndex("GU", "SEC", 42)),
        ("G.S.007", RequirementIndex("G", "S", 7)),
    ],
)
def test_requirement_index_parse(index: str, expected: RequirementIndex) -> None:
    """Well-formed indices parse into their three components."""
    assert RequirementIndex.parse(index) == expected


@parametrize("index", ["G.S", "G.S.1.2", "G..1", ".S.1", "G.S.x", "G.S.", "G.S.-1", "G.S.١"])
def test_requirement_index_parse_rejects_malformed(index: str) -> None:
    """Malformed indices raise the canonical validation message."""
    with pytest.raises(ReqlixValidationError) as excinfo:
        RequirementIndex.parse(index)
    assert excinfo.value.message == f"Invalid index format: {index}"
    assert RequirementIndex.try_parse(index) is None


def test_next_number_ignores_gaps_and_garbage() -> None:
    """The next number is one more than the highest parseable number."""
    assert next_number([]) == 1
    assert next_number(["G.S.1", "G.S.3"]) == 4
    assert next_number(["Overview", "G.S.2"]) == 3


def test_generate_index_formats_components() -> None:
    """Generated indices follow '{category}.{chapter}.{number}'."""
    assert generate_index("G", "S", ["G.S.1", "G.S.2"]) == "G.S.3"
    assert str(RequirementIndex("GU", "P", 1)) == "GU.P.1"
