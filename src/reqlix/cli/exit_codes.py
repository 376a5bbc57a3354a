# reqlix:header:start
#
#   project      : Reqlix
#   file         : exit_codes.py
#   file_relpath : src/reqlix/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Exit codes for the Reqlix CLI.

Reqlix aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Reqlix CLI.

    Attributes:
        SUCCESS: Successful execution (including batches with failing elements).
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid invocation or invalid operation parameters. Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: The request conflicts with stored data (duplicate title).
            Mirrors BSD ``EX_DATAERR (65)``.
        NOT_FOUND: Category, chapter or requirement does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a category file failed. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
