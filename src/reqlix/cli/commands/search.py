# reqlix:header:start
#
#   project      : Reqlix
#   file         : search.py
#   file_relpath : src/reqlix/cli/commands/search.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix `search` command."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import click

from reqlix.cli.cmd_common import emit_outcome, get_store
from reqlix.core.results import run_operation

if TYPE_CHECKING:
    from reqlix.store import RequirementStore


@click.command(
    name="search",
    help=(
        "Find requirements whose title or text contains any KEYWORD "
        "(case-insensitive substring match)."
    ),
)
@click.argument("keywords", metavar="[KEYWORD]...", nargs=-1)
@click.pass_context
def search_command(ctx: click.Context, keywords: tuple[str, ...]) -> None:
    """Print ``{"keywords", "results"}``.

    Args:
        ctx (click.Context): Current Click context.
        keywords (tuple[str, ...]): Keywords; blank ones are ignored.
    """
    store: RequirementStore = get_store(ctx)
    emit_outcome(ctx, run_operation(partial(store.search, list(keywords))))
