# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/markdown/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Markdown scanning and the category document model."""

from __future__ import annotations

from reqlix.markdown.model import (
    Chapter,
    Document,
    Requirement,
    build_document,
    normalize_block,
    parse_document,
)
from reqlix.markdown.scanner import (
    BodyLine,
    ChapterHeading,
    FenceToggle,
    ParseEvent,
    RequirementHeading,
    scan,
)

__all__: list[str] = [
    "BodyLine",
    "Chapter",
    "ChapterHeading",
    "Document",
    "FenceToggle",
    "ParseEvent",
    "Requirement",
    "RequirementHeading",
    "build_document",
    "normalize_block",
    "parse_document",
    "scan",
]
