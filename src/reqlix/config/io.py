# reqlix:header:start
#
#   project      : Reqlix
#   file         : io.py
#   file_relpath : src/reqlix/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""TOML I/O helpers for Reqlix configuration.

Parsing and rendering use `tomlkit`. Helpers here never mutate configuration
objects; they return plain ``dict`` structures (``TomlTable``).

Typical flow:
    1. Start from the runtime defaults (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``), extracting ``[tool.reqlix]``
       from ``pyproject.toml`` (``extract_tool_section``).
    3. Read values with the typed getters.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from reqlix.config.keys import Toml
from reqlix.config.logging import get_logger
from reqlix.constants import DEFAULT_REQUIREMENTS_DIR, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from reqlix.config.logging import ReqlixLogger

TomlTable = dict[str, Any]

logger: ReqlixLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Reqlix's runtime defaults as a Python dict.

    This function performs no I/O.

    Returns:
        TomlTable: A new dict containing the runtime defaults, so callers may mutate it.
    """
    return {
        Toml.SECTION_STORE: {
            Toml.KEY_DIRECTORY: DEFAULT_REQUIREMENTS_DIR,
        },
        Toml.SECTION_WRITER: {
            Toml.KEY_STRATEGY: "atomic",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``reqlix.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_tool_section(path: Path, data: TomlTable) -> TomlTable:
    """Return the Reqlix table of a parsed config source.

    ``pyproject.toml`` nests the configuration under ``[tool.reqlix]``; any other
    file is a Reqlix config document at top level.

    Args:
        path (Path): Path the data was read from.
        data (TomlTable): Parsed TOML content.

    Returns:
        TomlTable: The Reqlix table (empty when ``[tool.reqlix]`` is absent).
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_TOOL_REQLIX, {}) if isinstance(tool, dict) else {}
    return cast("TomlTable", section) if isinstance(section, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return a sub-table, or an empty dict when missing or not a table.

    Args:
        table (TomlTable): Table to query.
        key (str): Section name.

    Returns:
        TomlTable: The sub-table or ``{}``.
    """
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Ignoring [%s]: expected a table, got %r", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Ignoring %r for key '%s': expected a string", value, key)
    return None


def unknown_keys(table: TomlTable) -> list[str]:
    """Return dotted names of keys not part of the Reqlix schema.

    Args:
        table (TomlTable): A Reqlix config table.

    Returns:
        list[str]: Unknown keys, e.g. ``["store.dir", "colour"]``.
    """
    unknown: list[str] = []
    for key, value in table.items():
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            unknown.append(key)
            continue
        if isinstance(value, dict):
            allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS.get(key, frozenset())
            unknown.extend(f"{key}.{sub}" for sub in value if sub not in allowed)
    return unknown


def to_toml(toml_dict: TomlTable) -> str:
    """Render a TOML table as a TOML document string.

    ``None`` values are dropped since TOML cannot represent them.

    Args:
        toml_dict (TomlTable): Table to render.

    Returns:
        str: TOML document text.
    """

    def _clean(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: _clean(v) for k, v in value.items() if v is not None}
        if isinstance(value, (list, tuple)):
            return [_clean(v) for v in value if v is not None]
        return value

    return tomlkit.dumps(_clean(toml_dict))
