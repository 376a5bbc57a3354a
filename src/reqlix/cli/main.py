# reqlix:header:start
#
#   project      : Reqlix
#   file         : main.py
#   file_relpath : src/reqlix/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix command-line interface.

Group-level options are initialized once and placed into ``ctx.obj``; each
subcommand resolves the configuration from them, runs one store operation and
prints its JSON envelope on stdout. Logs go to stderr.
"""

from __future__ import annotations

import click

from reqlix.cli.commands.config import config_command
from reqlix.cli.commands.delete import delete_command
from reqlix.cli.commands.get import get_command
from reqlix.cli.commands.insert import insert_command
from reqlix.cli.commands.listing import (
    categories_command,
    chapters_command,
    requirements_command,
)
from reqlix.cli.commands.search import search_command
from reqlix.cli.commands.update import update_command
from reqlix.cli.commands.version import version_command
from reqlix.cli.console import ClickConsole
from reqlix.cli.options import common_config_options, common_verbose_options, resolve_verbosity
from reqlix.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    root: str | None,
    directory: str | None,
    config_paths: tuple[str, ...],
    strategy: str | None,
) -> None:
    """Initialize shared state (logging, console, config sources) on the Click context.

    ``REQLIX_LOG_LEVEL`` wins over ``-v``/``-q`` when set.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
        root (str | None): ``--root`` value.
        directory (str | None): ``--dir`` value.
        config_paths (tuple[str, ...]): ``--config`` values.
        strategy (str | None): ``--strategy`` value.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    ctx.obj["root"] = root
    ctx.obj["directory"] = directory
    ctx.obj["config_paths"] = config_paths
    ctx.obj["strategy"] = strategy


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Reqlix: markdown-backed requirement store.",
)
@common_verbose_options
@common_config_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    root: str | None,
    directory: str | None,
    config_paths: tuple[str, ...],
    strategy: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Reqlix CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        root=root,
        directory=directory,
        config_paths=config_paths,
        strategy=strategy,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'reqlix categories' to list the requirement categories.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(categories_command)

cli.add_command(chapters_command)

cli.add_command(requirements_command)

cli.add_command(get_command)

cli.add_command(insert_command)

cli.add_command(update_command)

cli.add_command(delete_command)

cli.add_command(search_command)

if __name__ == "__main__":
    cli()
