# topmark:header:start
#
#   project      : CmdQuote
#   file         : unquote.py
#   file_relpath : src/cmdquote/cli/commands/unquote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote `unquote` command.

Strictly unquotes each value, outermost layer first. The first malformed value
stops processing with exit code ``SYNTAX_ERROR`` and reports the byte offset of
the offending construct.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmdquote import api
from cmdquote.cli.cmd_common import collect_text_values, get_console, resolve_config
from cmdquote.cli.errors import CmdquoteSyntaxError, CmdquoteUsageError
from cmdquote.cli.options import scheme_options, value_input_options
from cmdquote.config.logging import get_logger
from cmdquote.core.errors import QuoteSyntaxError, UnsupportedCapabilityError

if TYPE_CHECKING:
    from cmdquote.cli.console_api import ConsoleLike
    from cmdquote.config.logging import CmdquoteLogger
    from cmdquote.config.model import Config
    from cmdquote.registry import Scheme

logger: CmdquoteLogger = get_logger(__name__)


@click.command(
    name="unquote",
    help="Unquote VALUES produced for the target interpreter.",
)
@click.argument("values", nargs=-1)
@scheme_options
@value_input_options
def unquote_command(
    *,
    values: tuple[str, ...],
    scheme: Scheme | None,
    layers: tuple[Scheme, ...],
    stdin: bool,
    binary: bool,
) -> None:
    """Unquote values and print one result per line (raw bytes with --binary)."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(ctx, scheme=scheme, layers=layers)
    schemes: tuple[Scheme, ...] = config.schemes
    innermost, *outer = schemes

    for quoted in collect_text_values(values, stdin=stdin):
        try:
            if binary:
                console.print_bytes(api.unquote_binary(api.unquote_layers(quoted, outer), innermost))
            else:
                console.print(api.unquote_layers(quoted, schemes))
        except QuoteSyntaxError as exc:
            logger.info("Rejected %r: %r", quoted, exc)
            raise CmdquoteSyntaxError(f"{quoted}: {exc} (at byte {exc.offset})") from exc
        except UnsupportedCapabilityError as exc:
            raise CmdquoteUsageError(str(exc)) from exc
