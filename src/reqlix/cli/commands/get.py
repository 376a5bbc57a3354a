# reqlix:header:start
#
#   project      : Reqlix
#   file         : get.py
#   file_relpath : src/reqlix/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix `get` command.

One INDEX prints a single requirement envelope. Several indices (or ``--batch``)
print a batch envelope with one result per index.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import click

from reqlix.cli.cmd_common import emit_outcome, get_store
from reqlix.core.results import run_operation

if TYPE_CHECKING:
    from reqlix.store import RequirementStore


@click.command(
    name="get",
    help="Show one or more requirements by INDEX (e.g. G.S.1).",
)
@click.argument("indices", metavar="INDEX...", nargs=-1, required=True)
@click.option(
    "--batch",
    is_flag=True,
    default=False,
    help="Return a batch envelope even for a single INDEX.",
)
@click.pass_context
def get_command(ctx: click.Context, indices: tuple[str, ...], batch: bool) -> None:
    """Print the requirement(s) with ``indices``.

    Args:
        ctx (click.Context): Current Click context.
        indices (tuple[str, ...]): Requested indices.
        batch (bool): Force a batch envelope.
    """
    store: RequirementStore = get_store(ctx)
    if batch or len(indices) > 1:
        emit_outcome(ctx, run_operation(partial(store.get_many, list(indices))))
    else:
        emit_outcome(ctx, run_operation(partial(store.get, indices[0])))
