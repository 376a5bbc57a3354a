# reqlix:header:start
#
#   project      : Reqlix
#   file         : listing.py
#   file_relpath : src/reqlix/cli/commands/listing.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix listing commands: `categories`, `chapters` and `requirements`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reqlix.cli.cmd_common import emit_outcome, get_store
from reqlix.core.results import run_operation

if TYPE_CHECKING:
    from reqlix.store import RequirementStore


@click.command(
    name="categories",
    help="List all categories (category files in the requirements directory).",
)
@click.pass_context
def categories_command(ctx: click.Context) -> None:
    """Print ``{"categories": [...]}``."""
    store: RequirementStore = get_store(ctx)
    emit_outcome(ctx, run_operation(lambda: {"categories": store.categories()}))


@click.command(
    name="chapters",
    help="List the chapters of CATEGORY in file order.",
)
@click.argument("category")
@click.pass_context
def chapters_command(ctx: click.Context, category: str) -> None:
    """Print ``{"category", "chapters"}``.

    Args:
        ctx (click.Context): Current Click context.
        category (str): Category name.
    """
    store: RequirementStore = get_store(ctx)
    emit_outcome(
        ctx,
        run_operation(lambda: {"category": category, "chapters": store.chapters(category)}),
    )


@click.command(
    name="requirements",
    help="List index and title of the requirements in CHAPTER of CATEGORY.",
)
@click.argument("category")
@click.argument("chapter")
@click.pass_context
def requirements_command(ctx: click.Context, category: str, chapter: str) -> None:
    """Print ``{"category", "chapter", "requirements"}``.

    Args:
        ctx (click.Context): Current Click context.
        category (str): Category name.
        chapter (str): Chapter name.
    """
    store: RequirementStore = get_store(ctx)
    emit_outcome(
        ctx,
        run_operation(
            lambda: {
                "category": category,
                "chapter": chapter,
                "requirements": store.requirements(category, chapter),
            }
        ),
    )
