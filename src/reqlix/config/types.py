# reqlix:header:start
#
#   project      : Reqlix
#   file         : types.py
#   file_relpath : src/reqlix/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Lightweight config types and aliases.

This module stays dependency-free (stdlib only) so that low-level modules such as
the category file writer can import it without cycles.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# Generic mapping accepted by config loaders (CLI option dicts and API dicts alike).
ArgsLike = Mapping[str, Any]


class FileWriteStrategy(str, Enum):
    """Available strategies for rewriting category files."""

    ATOMIC = "Safe atomic writer (default)"
    IN_PLACE = "Fast in-place writer"

    @classmethod
    def from_name(cls, key_name: str | None) -> FileWriteStrategy | None:
        """Find the FileWriteStrategy member by its case-insensitive name.

        Args:
            key_name (str | None): The string name of the member (e.g., 'atomic', 'in_place')
                or None.

        Returns:
            FileWriteStrategy | None: The matching member or None if the key is None
                or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.strip().upper().replace("-", "_"))

    @property
    def key(self) -> str:
        """TOML spelling of this strategy (e.g. ``"in_place"``)."""
        return self.name.lower()
