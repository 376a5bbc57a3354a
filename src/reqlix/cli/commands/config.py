# reqlix:header:start
#
#   project      : Reqlix
#   file         : config.py
#   file_relpath : src/reqlix/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix `config` command.

Emits the effective configuration as TOML after applying defaults, discovered
config files, ``--config`` files and the ``--dir``/``--strategy`` overrides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reqlix.cli.cmd_common import get_console, resolve_config
from reqlix.config.io import to_toml

if TYPE_CHECKING:
    from reqlix.config import Config


@click.command(
    name="config",
    help="Dump the effective Reqlix configuration as TOML.",
)
@click.option(
    "--show-sources",
    is_flag=True,
    default=False,
    help="Prepend a comment listing the config sources in merge order.",
)
@click.pass_context
def config_command(ctx: click.Context, show_sources: bool) -> None:
    """Print the merged configuration.

    Args:
        ctx (click.Context): Current Click context.
        show_sources (bool): Also list the contributing sources.
    """
    cfg: Config = resolve_config(ctx)
    console = get_console(ctx)
    if show_sources:
        for source in cfg.config_files:
            console.print(f"# source: {source}")
    console.print(to_toml(cfg.to_toml_dict()), nl=False)
