# topmark:header:start
#
#   project      : CmdQuote
#   file         : check.py
#   file_relpath : src/cmdquote/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote `check` command.

Reports whether values can be passed verbatim to the innermost interpreter.
An empty value always needs quoting. Exits with ``MUST_QUOTE`` when at least
one value needs quoting, which makes the command usable as a shell predicate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmdquote import api
from cmdquote.cli.cmd_common import (
    collect_text_values,
    get_console,
    get_effective_verbosity,
    resolve_config,
)
from cmdquote.cli.exit_codes import ExitCode
from cmdquote.cli.options import scheme_options

if TYPE_CHECKING:
    from cmdquote.cli.console_api import ConsoleLike
    from cmdquote.config.model import Config
    from cmdquote.registry import Scheme


@click.command(
    name="check",
    help="Exit with status 2 if any of VALUES must be quoted.",
)
@click.argument("values", nargs=-1)
@scheme_options
@click.option("--stdin", "stdin", is_flag=True, help="Read a single value from STDIN.")
def check_command(
    *,
    values: tuple[str, ...],
    scheme: Scheme | None,
    layers: tuple[Scheme, ...],
    stdin: bool,
) -> None:
    """Check values against the innermost scheme's special characters."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(ctx, scheme=scheme, layers=layers)
    target: Scheme = config.schemes[0]
    vlevel: int = get_effective_verbosity(ctx)

    needs_quoting = False
    for value in collect_text_values(values, stdin=stdin):
        must: bool = not value or api.must_quote(value, target)
        needs_quoting = needs_quoting or must
        if vlevel > 0:
            verdict: str = (
                console.styled("must quote", fg="yellow") if must else console.styled("ok", fg="green")
            )
            console.print(f"{verdict}\t{value}")

    if needs_quoting:
        ctx.exit(ExitCode.MUST_QUOTE)
