# topmark:header:start
#
#   project      : CmdQuote
#   file         : version.py
#   file_relpath : src/cmdquote/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote `version` command.

Prints the current CmdQuote version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from cmdquote.cli.cli_types import EnumChoiceParam
from cmdquote.cli.cmd_common import OutputFormat, get_console, get_effective_verbosity
from cmdquote.constants import CMDQUOTE_VERSION

if TYPE_CHECKING:
    from cmdquote.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of CmdQuote.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of CmdQuote.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": CMDQUOTE_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# CmdQuote Version\n")
        console.print(f"**CmdQuote version: {CMDQUOTE_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("CmdQuote version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(CMDQUOTE_VERSION, bold=True)}")
    else:
        console.print(console.styled(CMDQUOTE_VERSION, bold=True))
