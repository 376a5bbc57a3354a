# reqlix:header:start
#
#   project      : Reqlix
#   file         : version.py
#   file_relpath : src/reqlix/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix `version` command.

Prints the Reqlix version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from reqlix.cli.cmd_common import emit_outcome, get_console
from reqlix.constants import REQLIX_VERSION
from reqlix.core.results import run_operation


@click.command(
    name="version",
    help="Show the current version of Reqlix.",
)
@click.option(
    "--plain",
    is_flag=True,
    default=False,
    help="Print the bare version string instead of the JSON envelope.",
)
@click.pass_context
def version_command(ctx: click.Context, plain: bool) -> None:
    """Show the current version of Reqlix.

    Args:
        ctx (click.Context): Current Click context.
        plain (bool): Print only the version string.
    """
    if plain:
        get_console(ctx).print(REQLIX_VERSION)
        return
    emit_outcome(ctx, run_operation(lambda: {"version": REQLIX_VERSION}))
