# reqlix:header:start
#
#   project      : Reqlix
#   file         : console.py
#   file_relpath : src/reqlix/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Console for user-facing CLI output.

JSON envelopes and help text go to stdout through `ClickConsole.print`; CLI
errors go to stderr through `ClickConsole.error`. Diagnostics use `logging`.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Output console bound to a pair of streams.

    Args:
        enable_color (bool): If False, styling is stripped from all output.
        out (TextIO | None): Stream for envelopes. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error messages. Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO | None = out
        self.err: TextIO | None = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def error(self, text: str) -> None:
        """Write ``text`` to the error stream."""
        click.echo(text, file=self.err or sys.stderr, color=self.enable_color)

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` passed through `click.style`, or unchanged without color."""
        return click.style(text, **style) if self.enable_color else text
