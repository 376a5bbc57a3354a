# reqlix:header:start
#
#   project      : Reqlix
#   file         : runtime.py
#   file_relpath : src/reqlix/api/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Runtime helpers for the public API.

These helpers turn the public ``config`` argument into a frozen `Config` and a
`RequirementStore`. They are internal: not re-exported from `reqlix.api` and
subject to change in minor versions.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from reqlix.config import Config, MutableConfig
from reqlix.config.logging import get_logger
from reqlix.store import RequirementStore

if TYPE_CHECKING:
    from reqlix.config.logging import ReqlixLogger

logger: ReqlixLogger = get_logger(__name__)

__all__: list[str] = [
    "ensure_mutable_config",
    "build_config",
    "open_store",
]


def ensure_mutable_config(
    value: Mapping[str, Any] | MutableConfig | Config | None,
    *,
    root: Path | str | None = None,
) -> MutableConfig:
    """Return a `MutableConfig` from a mapping, a frozen `Config` or nothing.

    ``None`` performs project discovery below ``root`` (defaults, then
    ``pyproject.toml``, then ``reqlix.toml``). A mapping in TOML shape is merged
    over the defaults without discovery, so project files cannot leak into an
    explicit configuration.

    Args:
        value (Mapping[str, Any] | MutableConfig | Config | None): Optional mapping,
            draft, or frozen config instance.
        root (Path | str | None): Project root; defaults to the current directory.

    Returns:
        MutableConfig: A mutable draft configuration.

    Raises:
        ValueError: If the mapping names an unknown writer strategy.
    """
    base_root: Path | None = Path(root).resolve() if root is not None else None
    if value is None:
        return MutableConfig.load_merged(root=base_root)
    if isinstance(value, MutableConfig):
        return value
    if isinstance(value, Config):
        return value.thaw()

    draft: MutableConfig = MutableConfig.from_defaults().merge_with(
        MutableConfig.from_toml_dict(dict(value))
    )
    draft.root = base_root
    draft.config_files.append("<mapping>")
    return draft


def build_config(
    value: Mapping[str, Any] | Config | None,
    *,
    root: Path | str | None = None,
) -> Config:
    """Return the frozen runtime configuration for an API call.

    Args:
        value (Mapping[str, Any] | Config | None): Public ``config`` argument.
        root (Path | str | None): Project root used for discovery and for relative
            directories; ignored when ``value`` is already a frozen `Config`.

    Returns:
        Config: The runtime snapshot.
    """
    if isinstance(value, Config):
        return value
    cfg: Config = ensure_mutable_config(value, root=root).freeze()
    logger.debug("API config: dir=%s strategy=%s", cfg.requirements_dir, cfg.file_write_strategy)
    return cfg


def open_store(
    value: Mapping[str, Any] | Config | None,
    *,
    root: Path | str | None = None,
) -> RequirementStore:
    """Return a store bound to the configuration derived from ``value``."""
    return RequirementStore(build_config(value, root=root))
