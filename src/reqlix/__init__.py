# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix package.

Reqlix is a markdown-backed requirement store. Requirements are grouped into
categories (one markdown file each) and chapters (level-1 headings), and are
addressed by stable indices such as ``G.S.1``. The package exposes a typed
API (`reqlix.api`) and a small CLI (``reqlix``).
"""

from __future__ import annotations
