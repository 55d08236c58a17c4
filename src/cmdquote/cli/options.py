# topmark:header:start
#
#   project      : CmdQuote
#   file         : options.py
#   file_relpath : src/cmdquote/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config, schemes)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from cmdquote.cli.cli_types import SchemeParam
from cmdquote.cli.errors import CmdquoteUsageError
from cmdquote.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Returns:
        int: ``verbose_count`` when verbose, ``-1`` when quiet, 0 otherwise.

    Raises:
        CmdquoteUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CmdquoteUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def verbosity_to_log_level(verbosity: int) -> int:
    """Map program-output verbosity to a logging level.

    Three or more ``-v`` flags set TRACE, two set DEBUG, one sets INFO;
    otherwise only CRITICAL records are emitted.
    """
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.CRITICAL


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color (auto, always, never) and --no-color."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config/-c``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore local project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def scheme_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--scheme/-s`` and the repeatable ``--layer/-l``."""
    f = click.option(
        "--scheme",
        "-s",
        "scheme",
        type=SchemeParam(),
        default=None,
        help="Quoting scheme (key or alias, see 'cmdquote schemes').",
    )(f)
    f = click.option(
        "--layer",
        "-l",
        "layers",
        type=SchemeParam(),
        multiple=True,
        help="Quote for nested interpreters; repeat innermost first. Overrides --scheme.",
    )(f)
    return f


def value_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--stdin`` and ``--binary``."""
    f = click.option(
        "--stdin",
        "stdin",
        is_flag=True,
        help="Read a single value from STDIN (one trailing newline is dropped in text mode).",
    )(f)
    f = click.option(
        "--binary",
        "binary",
        is_flag=True,
        help="Treat values as raw bytes (the innermost scheme must support binary values).",
    )(f)
    return f
