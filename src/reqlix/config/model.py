# reqlix:header:start
#
#   project      : Reqlix
#   file         : model.py
#   file_relpath : src/reqlix/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by the store.
    - `MutableConfig`: a mutable builder used during discovery/merge; it can be
      frozen into `Config` and thawed back for edits.

Precedence (lowest to highest):
    1. runtime defaults,
    2. ``[tool.reqlix]`` in ``{root}/pyproject.toml``,
    3. ``{root}/reqlix.toml``,
    4. extra config files, in the order given,
    5. explicit overrides (CLI options or API mappings).

Path semantics:
    - A relative ``store.directory`` declared in a config file is resolved against
      that file's directory.
    - A relative directory from defaults or overrides is resolved against the root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from reqlix.config.io import (
    extract_tool_section,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    unknown_keys,
)
from reqlix.config.keys import Toml
from reqlix.config.logging import get_logger
from reqlix.config.types import FileWriteStrategy
from reqlix.constants import PYPROJECT_TOML_NAME, REQLIX_TOML_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from reqlix.config.io import TomlTable
    from reqlix.config.logging import ReqlixLogger
    from reqlix.config.types import ArgsLike

logger: ReqlixLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Reqlix.

    Attributes:
        root (Path): Absolute project root used for config discovery and for
            resolving relative directories from defaults and overrides.
        requirements_dir (Path): Absolute directory holding the category files.
        file_write_strategy (FileWriteStrategy): How category files are rewritten.
        config_files (tuple[Path | str, ...]): Config sources that contributed to
            this snapshot, in merge order.
    """

    root: Path
    requirements_dir: Path
    file_write_strategy: FileWriteStrategy
    config_files: tuple[Path | str, ...]

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration in TOML shape.

        Returns:
            TomlTable: A table that `MutableConfig.from_toml_dict` accepts.
        """
        return {
            Toml.SECTION_STORE: {
                Toml.KEY_DIRECTORY: str(self.requirements_dir),
            },
            Toml.SECTION_WRITER: {
                Toml.KEY_STRATEGY: self.file_write_strategy.key,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            root=self.root,
            directory=str(self.requirements_dir),
            directory_base=None,
            file_write_strategy=self.file_write_strategy,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        root (Path | None): Project root; ``None`` means the current directory.
        directory (str | None): Raw ``store.directory`` value.
        directory_base (Path | None): Directory that a relative ``directory`` is
            resolved against; ``None`` means the root.
        file_write_strategy (FileWriteStrategy | None): Writer strategy.
        config_files (list[Path | str]): Provenance of merged sources.
    """

    root: Path | None = None
    directory: str | None = None
    directory_base: Path | None = None
    file_write_strategy: FileWriteStrategy | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Returns:
            Config: The runtime snapshot.

        Raises:
            ValueError: If no requirements directory is configured.
        """
        root: Path = (self.root or Path.cwd()).resolve()
        if not self.directory:
            raise ValueError("Config invalid: `store.directory` must not be empty.")
        directory = Path(self.directory).expanduser()
        if not directory.is_absolute():
            directory = (self.directory_base or root) / directory
        return Config(
            root=root,
            requirements_dir=directory.resolve(),
            file_write_strategy=self.file_write_strategy or FileWriteStrategy.ATOMIC,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a configuration from the runtime defaults.

        Returns:
            MutableConfig: A builder populated with default values.
        """
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Parse a Reqlix config table into a builder.

        Args:
            data (TomlTable): The Reqlix table (already extracted from ``[tool.reqlix]``).
            config_file (Path | None): Source file; its directory anchors a relative
                ``store.directory``.

        Returns:
            MutableConfig: A builder holding only the values present in ``data``.

        Raises:
            ValueError: If ``writer.strategy`` names an unknown strategy.
        """
        for key in unknown_keys(data):
            logger.warning("Unknown config key '%s' in %s", key, config_file or "<defaults>")

        store: TomlTable = get_table_value(data, Toml.SECTION_STORE)
        writer: TomlTable = get_table_value(data, Toml.SECTION_WRITER)

        strategy_raw: str | None = get_string_value_or_none(writer, Toml.KEY_STRATEGY)
        strategy: FileWriteStrategy | None = FileWriteStrategy.from_name(strategy_raw)
        if strategy_raw is not None and strategy is None:
            raise ValueError(
                f"Config invalid: unknown writer strategy '{strategy_raw}'"
                f" in {config_file or '<defaults>'}"
                f" (expected one of: {', '.join(s.key for s in FileWriteStrategy)})."
            )

        directory: str | None = get_string_value_or_none(store, Toml.KEY_DIRECTORY)
        return cls(
            directory=directory,
            directory_base=(
                config_file.parent.resolve() if (config_file and directory) else None
            ),
            file_write_strategy=strategy,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Args:
            path (Path): Path to ``reqlix.toml``, ``pyproject.toml`` or another
                Reqlix TOML document.

        Returns:
            MutableConfig | None: The builder, or None when ``pyproject.toml``
                carries no ``[tool.reqlix]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = extract_tool_section(path, load_toml_dict(path))
        if not data and path.name == PYPROJECT_TOML_NAME:
            logger.debug("No [tool.reqlix] section in %s", path)
            return None
        draft: MutableConfig = cls.from_toml_dict(data, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_config_files(cls, root: Path) -> list[Path]:
        """Return the config files present in ``root``, lowest precedence first.

        Args:
            root (Path): Project root directory.

        Returns:
            list[Path]: ``pyproject.toml`` then ``reqlix.toml``, when they exist.
        """
        return [p for p in (root / PYPROJECT_TOML_NAME, root / REQLIX_TOML_NAME) if p.is_file()]

    @classmethod
    def load_merged(
        cls,
        *,
        root: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        overrides: ArgsLike | None = None,
    ) -> MutableConfig:
        """Build the effective configuration from all layers.

        Args:
            root (Path | None): Project root; defaults to the current directory.
            extra_config_files (Iterable[Path]): Additional config files, merged after
                the discovered ones.
            overrides (ArgsLike | None): Highest-precedence values, see `apply_args`.

        Returns:
            MutableConfig: The merged builder (call `freeze` for a runtime snapshot).
        """
        base_root: Path = (root or Path.cwd()).resolve()
        merged: MutableConfig = cls.from_defaults()
        merged.root = base_root

        for path in [*cls.discover_config_files(base_root), *extra_config_files]:
            draft: MutableConfig | None = cls.from_toml_file(path)
            if draft is not None:
                merged = merged.merge_with(draft)

        if overrides:
            merged.apply_args(overrides)
        logger.debug("Merged config: %s", merged)
        return merged

    # ------------------------------ Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where set values of ``other`` win.

        Args:
            other (MutableConfig): Higher-precedence builder.

        Returns:
            MutableConfig: The merged builder.
        """
        takes_dir: bool = other.directory is not None
        return MutableConfig(
            root=other.root or self.root,
            directory=other.directory if takes_dir else self.directory,
            directory_base=other.directory_base if takes_dir else self.directory_base,
            file_write_strategy=other.file_write_strategy or self.file_write_strategy,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply explicit overrides in place.

        Recognized keys are ``root``, ``directory`` and ``strategy`` (a
        `FileWriteStrategy` or its name). ``None`` values are ignored.

        Args:
            args (ArgsLike): Override mapping (CLI options or API dict).

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ValueError: If ``strategy`` names an unknown strategy.
        """
        root: Any = args.get("root")
        if root is not None:
            self.root = Path(root).resolve()

        directory: Any = args.get("directory")
        if directory is not None:
            self.directory = str(directory)
            # CLI/API paths are relative to the invocation directory
            self.directory_base = Path.cwd()

        strategy: Any = args.get("strategy")
        if isinstance(strategy, FileWriteStrategy):
            self.file_write_strategy = strategy
        elif strategy is not None:
            resolved: FileWriteStrategy | None = FileWriteStrategy.from_name(str(strategy))
            if resolved is None:
                raise ValueError(f"Config invalid: unknown writer strategy '{strategy}'.")
            self.file_write_strategy = resolved

        if any(args.get(k) is not None for k in ("root", "directory", "strategy")):
            self.config_files.append("<overrides>")
        return self
