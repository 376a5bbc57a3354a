# reqlix:header:start
#
#   project      : Reqlix
#   file         : __init__.py
#   file_relpath : src/reqlix/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Configuration handling for Reqlix.

Re-exports the configuration model (`Config`, `MutableConfig`), the writer
strategy enum and the logging helpers so callers can import them from one place.
"""

from __future__ import annotations

from reqlix.config.model import Config, MutableConfig
from reqlix.config.types import ArgsLike, FileWriteStrategy

__all__: list[str] = [
    "ArgsLike",
    "Config",
    "FileWriteStrategy",
    "MutableConfig",
]
