# reqlix:header:start
#
#   project      : Reqlix
#   file         : options.py
#   file_relpath : src/reqlix/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, configuration sources) and
their resolution logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from reqlix.cli.errors import ReqlixUsageError
from reqlix.config.logging import TRACE_LEVEL
from reqlix.config.types import FileWriteStrategy

P = ParamSpec("P")
R = TypeVar("R")

# Verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: The logging level.

    Raises:
        ReqlixUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One -q flag sets ERROR level, two or more set CRITICAL.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ReqlixUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 2:  # -qq
        return LOG_LEVELS["CRITICAL"]
    if quiet_count == 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (up to three times).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Decrease log verbosity (up to twice).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the configuration source options to a command.

    Adds ``--root``, ``--dir``, ``--config`` (repeatable) and ``--strategy``.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--root",
        type=click.Path(file_okay=False, dir_okay=True),
        default=None,
        help="Project root used for config discovery (default: current directory).",
    )(f)
    f = click.option(
        "--dir",
        "directory",
        type=click.Path(file_okay=False, dir_okay=True),
        default=None,
        help="Requirements directory (overrides [store] directory).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(exists=True, dir_okay=False),
        multiple=True,
        help="Extra TOML config file, merged after discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--strategy",
        type=click.Choice([s.key for s in FileWriteStrategy], case_sensitive=False),
        default=None,
        help="File write strategy (overrides [writer] strategy).",
    )(f)
    return f
