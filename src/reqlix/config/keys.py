# reqlix:header:start
#
#   project      : Reqlix
#   file         : keys.py
#   file_relpath : src/reqlix/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Canonical TOML section and key names for Reqlix configuration.

These constants are the external configuration schema as it appears in
``reqlix.toml`` and in ``[tool.reqlix]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Reqlix configuration.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - CLI option names are defined by the Click commands, not here.
    """

    # pyproject.toml nesting: [tool.reqlix]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_REQLIX: Final[str] = "reqlix"

    # [store]
    SECTION_STORE: Final[str] = "store"

    KEY_DIRECTORY: Final[str] = "directory"

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_STRATEGY: Final[str] = "strategy"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_STORE,
            SECTION_WRITER,
        }
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_STORE: frozenset({KEY_DIRECTORY}),
        SECTION_WRITER: frozenset({KEY_STRATEGY}),
    }
