# reqlix:header:start
#
#   project      : Reqlix
#   file         : constants.py
#   file_relpath : src/reqlix/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

REQLIX_VERSION: str = get_version("reqlix")

# Config sources looked up in the project root
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
REQLIX_TOML_NAME: Final[str] = "reqlix.toml"

DEFAULT_REQUIREMENTS_DIR: Final[str] = "docs/development/requirements"

# Category files
CATEGORY_SUFFIX: Final[str] = ".md"
AGENTS_FILE_NAME: Final[str] = "AGENTS.md"
RESERVED_CATEGORY_NAME: Final[str] = "agents"

UTF8_BOM: Final[str] = "\ufeff"

# Parameter limits
MAX_CATEGORY_LEN: Final[int] = 100
MAX_CHAPTER_LEN: Final[int] = 100
MAX_INDEX_LEN: Final[int] = 100
MAX_TITLE_LEN: Final[int] = 100
MAX_TEXT_LEN: Final[int] = 10000
MAX_KEYWORD_LEN: Final[int] = 200
MAX_BATCH_SIZE: Final[int] = 100
