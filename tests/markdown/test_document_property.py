# reqlix:header:start
#
#   project      : Reqlix
#   file         : test_document_property.py
#   file_relpath : tests/markdown/test_document_property.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

# pyright: strict

"""Property tests for category file parsing and serialization.

Generated canonical files must survive parse/serialize unchanged, CRLF input
must serialize to the LF canonical form, and every generated requirement must
be found again with its title and body intact.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from reqlix.markdown.model import Document, parse_document
from tests.strategies_reqlix import s_category_document

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

Sample = tuple[str, list[tuple[str, list[tuple[str, str]]]]]


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=30,
)
@given(sample=s_category_document())
def test_canonical_text_is_a_fixed_point(sample: Sample) -> None:
    """parse → serialize reproduces canonical text and is idempotent."""
    text, _chapters = sample
    once: str = parse_document(text).to_text()

    assert once == text
    assert parse_document(once).to_text() == once


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=30,
)
@given(sample=s_category_document())
def test_crlf_input_serializes_to_lf(sample: Sample) -> None:
    """CRLF files parse to the same document as their LF form."""
    text, _chapters = sample
    assert parse_document(text.replace("\n", "\r\n")).to_text() == text


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=30,
)
@given(sample=s_category_document())
def test_generated_requirements_are_recovered(sample: Sample) -> None:
    """Chapters and requirements come back in order with their titles and bodies."""
    text, chapters = sample
    doc: Document = parse_document(text)

    assert doc.chapter_names() == [name for name, _ in chapters]
    for chapter, (_name, items) in zip(doc.chapters, chapters):
        assert [(r.title, r.text) for r in chapter.addressable()] == items
