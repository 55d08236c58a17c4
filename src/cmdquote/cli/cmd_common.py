# topmark:header:start
#
#   project      : CmdQuote
#   file         : cmd_common.py
#   file_relpath : src/cmdquote/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers used by multiple CLI commands: console and verbosity access,
configuration resolution and value collection (arguments or STDIN).
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import click

from cmdquote.cli.errors import CmdquoteUsageError
from cmdquote.config.logging import get_logger
from cmdquote.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdquote.cli.console_api import ConsoleLike
    from cmdquote.config.logging import CmdquoteLogger
    from cmdquote.config.model import Config
    from cmdquote.registry import Scheme

logger: CmdquoteLogger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      TEXT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
      MARKDOWN: A Markdown document.
    """

    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console installed on the group context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity (negative when quiet, 0 by default)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_config(
    ctx: click.Context,
    *,
    scheme: Scheme | None = None,
    layers: Iterable[Scheme] | None = None,
    if_needed: bool | None = None,
) -> Config:
    """Merge config files from the group options with command overrides.

    Diagnostics collected while loading are printed as warnings unless the
    user asked for quiet output.
    """
    ctx.ensure_object(dict)
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in ctx.obj.get("config_paths", ())],
        no_config=bool(ctx.obj.get("no_config", False)),
    )
    draft.apply_overrides(scheme=scheme, layers=layers, if_needed=if_needed)
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)

    if get_effective_verbosity(ctx) >= 0:
        console: ConsoleLike = get_console(ctx)
        for diag in config.diagnostics:
            console.warn(diag.render())
    return config


def _read_stdin_text() -> str:
    text: str = click.get_text_stream("stdin").read()
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def collect_text_values(values: Iterable[str], *, stdin: bool) -> list[str]:
    """Return the values to process from positional arguments or STDIN.

    Raises:
        CmdquoteUsageError: If both sources are given, or neither.
    """
    items: list[str] = list(values)
    if stdin and items:
        raise CmdquoteUsageError("Pass values either as arguments or with --stdin, not both.")
    if stdin:
        return [_read_stdin_text()]
    if not items:
        raise CmdquoteUsageError("No values given (pass VALUES... or --stdin).")
    return items


def collect_binary_values(values: Iterable[str], *, stdin: bool) -> list[bytes]:
    """Return raw byte values from positional arguments or STDIN.

    Arguments are converted back to the bytes the OS passed in (via
    ``os.fsencode``); STDIN is read in full, unchanged.
    """
    items: list[str] = list(values)
    if stdin and items:
        raise CmdquoteUsageError("Pass values either as arguments or with --stdin, not both.")
    if stdin:
        return [click.get_binary_stream("stdin").read()]
    if not items:
        raise CmdquoteUsageError("No values given (pass VALUES... or --stdin).")
    return [os.fsencode(v) for v in items]
