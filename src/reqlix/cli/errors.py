# reqlix:header:start
#
#   project      : Reqlix
#   file         : errors.py
#   file_relpath : src/reqlix/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Exceptions for the Reqlix CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any, Final

import click

from reqlix.cli.exit_codes import ExitCode
from reqlix.core.errors import ErrorKind

#: Exit code reported when an operation envelope carries a failure of this kind.
EXIT_CODE_BY_KIND: Final[dict[ErrorKind, ExitCode]] = {
    ErrorKind.VALIDATION: ExitCode.USAGE_ERROR,
    ErrorKind.STRUCTURAL: ExitCode.USAGE_ERROR,
    ErrorKind.CONFLICT: ExitCode.DATA_ERROR,
    ErrorKind.NOT_FOUND: ExitCode.NOT_FOUND,
    ErrorKind.FILESYSTEM: ExitCode.IO_ERROR,
}


def exit_code_for(kind: ErrorKind) -> ExitCode:
    """Return the CLI exit code for an operation failure of ``kind``."""
    return EXIT_CODE_BY_KIND.get(kind, ExitCode.FAILURE)


class ReqlixCliError(click.ClickException):
    """Base class for all Reqlix CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None)
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class ReqlixUsageError(ReqlixCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ReqlixConfigError(ReqlixCliError):
    """Error for configuration errors (invalid values in config files or options)."""

    exit_code = ExitCode.CONFIG_ERROR


class ReqlixOperationError(ReqlixCliError):
    """Signals a failure envelope; the envelope itself was already printed.

    Args:
        message (str): The envelope's error message.
        kind (ErrorKind): Failure classification, mapped to the exit code.
    """

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind: ErrorKind = kind
        self.exit_code = exit_code_for(kind)

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - nothing to add
        """Print nothing: the JSON envelope on stdout already carries the error."""
