# topmark:header:start
#
#   project      : CmdQuote
#   file         : quote.py
#   file_relpath : src/cmdquote/cli/commands/quote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote `quote` command.

Quotes each value for the configured scheme (or scheme layers) and prints one
quoted value per line.

Examples:
    ```bash
    cmdquote quote --scheme pwsh 'a $b'          # "a `$b"
    cmdquote quote -l argv -l cmd 'a b'          # ^"a^ b^"
    printf 'a\\0b' | cmdquote quote --binary --stdin -s ansi-c   # $'a\\x00b'
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmdquote import api
from cmdquote.cli.cmd_common import (
    collect_binary_values,
    collect_text_values,
    get_console,
    resolve_config,
)
from cmdquote.cli.errors import CmdquoteUsageError
from cmdquote.cli.options import scheme_options, value_input_options
from cmdquote.config.logging import get_logger
from cmdquote.core.errors import UnsupportedCapabilityError

if TYPE_CHECKING:
    from cmdquote.cli.console_api import ConsoleLike
    from cmdquote.config.logging import CmdquoteLogger
    from cmdquote.config.model import Config
    from cmdquote.registry import Scheme

logger: CmdquoteLogger = get_logger(__name__)


def quote_text(value: str, schemes: tuple[Scheme, ...], *, if_needed: bool) -> str:
    """Quote ``value`` through each scheme in turn, innermost first."""
    if not if_needed:
        return api.quote_layers(value, schemes)
    result: str = value
    for scheme in schemes:
        result = api.quote_if_needed(result, scheme)
    return result


@click.command(
    name="quote",
    help="Quote VALUES so the target interpreter reads each back as one argument.",
)
@click.argument("values", nargs=-1)
@scheme_options
@value_input_options
@click.option(
    "--if-needed/--always",
    "if_needed",
    default=None,
    help="Only quote values that contain special characters (default: always quote).",
)
def quote_command(
    *,
    values: tuple[str, ...],
    scheme: Scheme | None,
    layers: tuple[Scheme, ...],
    stdin: bool,
    binary: bool,
    if_needed: bool | None,
) -> None:
    """Quote values and print one result per line."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(ctx, scheme=scheme, layers=layers, if_needed=if_needed)
    schemes: tuple[Scheme, ...] = config.schemes
    logger.debug("Quoting with %s (if_needed=%s)", [s.key for s in schemes], config.if_needed)

    if not binary:
        for value in collect_text_values(values, stdin=stdin):
            console.print(quote_text(value, schemes, if_needed=config.if_needed))
        return

    innermost, *outer = schemes
    for raw in collect_binary_values(values, stdin=stdin):
        try:
            quoted: str = api.quote_binary(raw, innermost)
        except UnsupportedCapabilityError as exc:
            raise CmdquoteUsageError(str(exc)) from exc
        console.print(quote_text(quoted, tuple(outer), if_needed=config.if_needed))
