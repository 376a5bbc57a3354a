# reqlix:header:start
#
#   project      : Reqlix
#   file         : update.py
#   file_relpath : src/reqlix/cli/commands/update.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Reqlix `update` command.

Single mode:
    ``reqlix update INDEX --text TEXT [--title TITLE]``

Batch mode:
    ``reqlix update --items FILE`` where FILE (or ``-`` for STDIN) holds a JSON
    array of ``{"index", "text", "title"?}`` objects.

The index of an updated requirement never changes.
"""

from __future__ import annotations

import json
from functools import partial
from typing import TYPE_CHECKING, Any, TextIO

import click

from reqlix.api import UPDATE_BOTH_MODES, UPDATE_NO_MODE, UPDATE_TEXT_REQUIRED
from reqlix.cli.cmd_common import emit_outcome, get_store, read_text_argument
from reqlix.cli.errors import ReqlixUsageError
from reqlix.config.logging import get_logger
from reqlix.core.models import UpdateItem
from reqlix.core.results import run_operation

if TYPE_CHECKING:
    from reqlix.config.logging import ReqlixLogger
    from reqlix.store import RequirementStore

logger: ReqlixLogger = get_logger(__name__)


def parse_items(raw: str) -> list[UpdateItem]:
    """Parse a JSON array of update objects.

    Args:
        raw (str): JSON text.

    Returns:
        list[UpdateItem]: The batch, in input order.

    Raises:
        ReqlixUsageError: If the text is not a JSON array of objects.
    """
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ReqlixUsageError(f"--items is not valid JSON: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(i, dict) for i in data):
        raise ReqlixUsageError("--items must be a JSON array of objects")
    return [UpdateItem.from_mapping(i) for i in data]


@click.command(
    name="update",
    help="Replace the text (and optionally the title) of one or more requirements.",
)
@click.argument("index", required=False)
@click.option("--text", default=None, help="New text (markdown). Use '-' to read it from STDIN.")
@click.option("--title", default=None, help="New title; the current title is kept when omitted.")
@click.option(
    "--items",
    "items_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="JSON file with an array of {index, text, title} objects ('-' for STDIN).",
)
@click.pass_context
def update_command(
    ctx: click.Context,
    index: str | None,
    text: str | None,
    title: str | None,
    items_file: TextIO | None,
) -> None:
    """Update one requirement, or a batch read from ``--items``.

    Args:
        ctx (click.Context): Current Click context.
        index (str | None): Index for a single update.
        text (str | None): New text for a single update, or ``-`` for STDIN.
        title (str | None): Optional new title for a single update.
        items_file (TextIO | None): Open JSON file for a batch update.

    Raises:
        ReqlixUsageError: If ``--items`` is combined with INDEX, ``--text`` or
            ``--title``, if no mode is used, or if the single mode lacks ``--text``.
    """
    single_args: tuple[str | None, ...] = (index, text, title)
    if items_file is not None and any(arg is not None for arg in single_args):
        raise ReqlixUsageError(UPDATE_BOTH_MODES)
    if items_file is not None:
        items: list[UpdateItem] = parse_items(items_file.read())
        logger.debug("Batch update of %d item(s)", len(items))
        store: RequirementStore = get_store(ctx)
        emit_outcome(ctx, run_operation(partial(store.update_many, items)))
        return
    if index is None:
        raise ReqlixUsageError(UPDATE_NO_MODE)
    if text is None:
        raise ReqlixUsageError(UPDATE_TEXT_REQUIRED)

    store = get_store(ctx)
    body: str = read_text_argument(text) or ""
    emit_outcome(ctx, run_operation(partial(store.update, index, body, title)))
