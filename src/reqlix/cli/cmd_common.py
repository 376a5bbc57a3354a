# reqlix:header:start
#
#   project      : Reqlix
#   file         : cmd_common.py
#   file_relpath : src/reqlix/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the subcommands: resolving the effective configuration
from the group options stored in ``ctx.obj``, opening the store, printing
envelopes, and reading text arguments that may come from STDIN.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import click

from reqlix.cli.errors import ReqlixConfigError, ReqlixOperationError
from reqlix.config import MutableConfig
from reqlix.config.logging import get_logger
from reqlix.core.results import Failure
from reqlix.store import RequirementStore

if TYPE_CHECKING:
    from reqlix.cli.console import ClickConsole
    from reqlix.config import Config
    from reqlix.config.logging import ReqlixLogger
    from reqlix.core.results import Outcome

logger: ReqlixLogger = get_logger(__name__)

#: Sentinel value meaning "read from STDIN".
STDIN_SENTINEL: Final[str] = "-"


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def resolve_config(ctx: click.Context) -> Config:
    """Build the effective configuration from the group options.

    Layers: defaults, ``pyproject.toml``, ``reqlix.toml``, ``--config`` files,
    then ``--dir`` and ``--strategy``.

    Args:
        ctx (click.Context): Current Click context.

    Returns:
        Config: The frozen runtime configuration.

    Raises:
        ReqlixConfigError: If a configuration value is invalid.
    """
    ctx.ensure_object(dict)
    obj: dict[str, Any] = ctx.obj
    root: str | None = obj.get("root")
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            root=Path(root) if root else None,
            extra_config_files=[Path(p) for p in obj.get("config_paths", ())],
            overrides={
                "directory": obj.get("directory"),
                "strategy": obj.get("strategy"),
            },
        )
        cfg: Config = draft.freeze()
    except ValueError as exc:
        raise ReqlixConfigError(str(exc)) from exc
    logger.debug("CLI config: dir=%s sources=%s", cfg.requirements_dir, cfg.config_files)
    return cfg


def get_store(ctx: click.Context) -> RequirementStore:
    """Return a store bound to the effective configuration."""
    return RequirementStore(resolve_config(ctx))


def emit_outcome(ctx: click.Context, outcome: Outcome) -> None:
    """Print the JSON envelope of ``outcome`` on stdout.

    Args:
        ctx (click.Context): Current Click context.
        outcome (Outcome): Operation result.

    Raises:
        ReqlixOperationError: After printing, when ``outcome`` is a failure; the
            exit code follows its error kind.
    """
    get_console(ctx).print(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False))
    if isinstance(outcome, Failure):
        raise ReqlixOperationError(outcome.error, outcome.kind)


def read_text_argument(value: str | None) -> str | None:
    """Return ``value``, or the whole of STDIN when ``value`` is ``-``."""
    if value == STDIN_SENTINEL:
        return click.get_text_stream("stdin").read()
    return value
