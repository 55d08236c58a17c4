# topmark:header:start
#
#   project      : CmdQuote
#   file         : schemes.py
#   file_relpath : src/cmdquote/cli/commands/schemes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote `schemes` command.

Lists the registered quoting schemes with their aliases and capabilities.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from cmdquote.cli.cli_types import EnumChoiceParam
from cmdquote.cli.cmd_common import OutputFormat, get_console, get_effective_verbosity
from cmdquote.registry import Scheme, SchemeRegistry

if TYPE_CHECKING:
    from cmdquote.cli.console_api import ConsoleLike
    from cmdquote.registry import SchemeMeta


def _markdown_table(metas: list[SchemeMeta]) -> list[str]:
    lines: list[str] = [
        "# Quoting Schemes",
        "",
        "| Key | Label | Family | Binary | Aliases |",
        "| --- | --- | --- | --- | --- |",
    ]
    for meta in metas:
        aliases: str = ", ".join(f"`{a}`" for a in meta.aliases)
        lines.append(
            f"| `{meta.key}` | {meta.label} | {meta.family.value} | "
            f"{'yes' if meta.binary else 'no'} | {aliases} |"
        )
    return lines


@click.command(
    name="schemes",
    help="List the supported quoting schemes.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def schemes_command(*, output_format: OutputFormat | None = None) -> None:
    """List the supported quoting schemes."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    metas: list[SchemeMeta] = list(SchemeRegistry.iter_meta())
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([m.to_dict() for m in metas], indent=2))
        return
    if fmt == OutputFormat.MARKDOWN:
        for line in _markdown_table(metas):
            console.print(line)
        return

    width: int = Scheme.SH_SINGLE.value_length
    for meta in metas:
        key: str = console.styled(meta.key.ljust(width), bold=True)
        suffix: str = " [binary]" if meta.binary else ""
        console.print(f"{key}  {meta.label}{suffix}")
        if vlevel > 0:
            console.print(f"{'':{width}}  aliases: {', '.join(meta.aliases)}")
            console.print(f"{'':{width}}  unsafe:  {meta.unsafe}")
