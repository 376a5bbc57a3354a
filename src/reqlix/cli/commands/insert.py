# reqlix:header:start
#
#   project      : Reqlix
#   file         : insert.py
#   file_relpath : src/reqlix/cli/commands/insert.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix `insert` command."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import click

from reqlix.cli.cmd_common import emit_outcome, get_store, read_text_argument
from reqlix.core.results import run_operation

if TYPE_CHECKING:
    from reqlix.store import RequirementStore


@click.command(
    name="insert",
    help=(
        "Insert a requirement into CHAPTER of CATEGORY. The category file and the "
        "chapter are created when missing."
    ),
)
@click.argument("category")
@click.argument("chapter")
@click.option("--title", required=True, help="Requirement title, unique within the chapter.")
@click.option(
    "--text",
    required=True,
    help="Requirement text (markdown). Use '-' to read it from STDIN.",
)
@click.pass_context
def insert_command(
    ctx: click.Context,
    category: str,
    chapter: str,
    title: str,
    text: str,
) -> None:
    """Insert a requirement and print it with its new index.

    Args:
        ctx (click.Context): Current Click context.
        category (str): Category name.
        chapter (str): Chapter name.
        title (str): Requirement title.
        text (str): Requirement text, or ``-`` for STDIN.
    """
    store: RequirementStore = get_store(ctx)
    body: str | None = read_text_argument(text)
    emit_outcome(ctx, run_operation(partial(store.insert, category, chapter, title, body or "")))
