# reqlix:header:start
#
#   project      : Reqlix
#   file         : delete.py
#   file_relpath : src/reqlix/cli/commands/delete.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix `delete` command.

A chapter left without requirements is removed with the deleted requirement;
the category file itself is kept.
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
    name="delete",
    help="Delete one or more requirements by INDEX.",
)
@click.argument("indices", metavar="INDEX...", nargs=-1, required=True)
@click.option(
    "--batch",
    is_flag=True,
    default=False,
    help="Return a batch envelope even for a single INDEX.",
)
@click.pass_context
def delete_command(ctx: click.Context, indices: tuple[str, ...], batch: bool) -> None:
    """Delete the requirement(s) with ``indices``.

    Args:
        ctx (click.Context): Current Click context.
        indices (tuple[str, ...]): Indices to delete, processed in order.
        batch (bool): Force a batch envelope.
    """
    store: RequirementStore = get_store(ctx)
    if batch or len(indices) > 1:
        emit_outcome(ctx, run_operation(partial(store.delete_many, list(indices))))
    else:
        emit_outcome(ctx, run_operation(partial(store.delete, indices[0])))
