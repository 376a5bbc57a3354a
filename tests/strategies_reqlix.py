# reqlix:header:start
#
#   project      : Reqlix
#   file         : strategies_reqlix.py
#   file_relpath : tests/strategies_reqlix.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

# pyright: strict

"""Hypothesis strategies for generating Reqlix names, titles and category files.

These strategies stay within the validated input space (names, titles and
bodies that the store would accept) so property tests exercise the prefix
allocator and the document model rather than validation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

CATEGORY_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz_"
CHAPTER_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz :_-"
WORD_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

s_word: st.SearchStrategy[str] = st.text(alphabet=WORD_ALPHABET, min_size=1, max_size=8)

s_category: st.SearchStrategy[str] = st.text(
    alphabet=CATEGORY_ALPHABET, min_size=1, max_size=12
).filter(lambda s: any(c.isalpha() for c in s) and s != "agents")

s_chapter: st.SearchStrategy[str] = st.text(
    alphabet=CHAPTER_ALPHABET, min_size=1, max_size=16
).filter(lambda s: s.strip() == s and any(c.isalpha() for c in s))

s_title: st.SearchStrategy[str] = st.lists(s_word, min_size=1, max_size=5).map(" ".join)


@st.composite
def s_body(draw: Draw) -> str:
    """Generate a requirement body: paragraphs, list items and optional code fences."""
    blocks: list[str] = []
    for _ in range(draw(st.integers(min_value=1, max_value=3))):
        kind: str = draw(st.sampled_from(["paragraph", "list", "fence", "h3"]))
        words: list[str] = draw(st.lists(s_word, min_size=1, max_size=6))
        if kind == "list":
            blocks.append("\n".join(f"- {w}" for w in words))
        elif kind == "fence":
            # Headings inside fences are content, not structure.
            blocks.append("```text\n# " + " ".join(words) + "\n## not a requirement\n```")
        elif kind == "h3":
            blocks.append("### " + " ".join(words))
        else:
            blocks.append(" ".join(words))
    return "\n\n".join(blocks)


@st.composite
def s_category_document(draw: Draw) -> tuple[str, list[tuple[str, list[tuple[str, str]]]]]:
    """Generate canonical category file text and the chapters it encodes.

    Returns:
        tuple: ``(text, chapters)`` where ``chapters`` is a list of
        ``(chapter_name, [(title, body), ...])``. Indices follow ``X.C{n}.{m}``.
    """
    names: list[str] = draw(st.lists(s_chapter, min_size=1, max_size=3, unique=True))
    chapters: list[tuple[str, list[tuple[str, str]]]] = []
    blocks: list[str] = []
    for ch_no, name in enumerate(names, start=1):
        items: list[tuple[str, str]] = draw(
            st.lists(st.tuples(s_title, s_body()), min_size=1, max_size=3)
        )
        chapters.append((name, items))
        blocks.append(f"# {name}")
        for req_no, (title, body) in enumerate(items, start=1):
            blocks.append(f"## X.C{ch_no}.{req_no}: {title}")
            blocks.append(body)
    return "\n\n".join(blocks) + "\n", chapters
