# topmark:header:start
#
#   project      : CmdQuote
#   file         : config.py
#   file_relpath : src/cmdquote/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote `config` command.

Shows the effective configuration after merging defaults, the discovered
project config, ``--config`` files and CLI overrides.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from cmdquote.cli.cli_types import EnumChoiceParam
from cmdquote.cli.cmd_common import OutputFormat, get_console, get_effective_verbosity, resolve_config
from cmdquote.config.loaders import to_toml
from cmdquote.core.diagnostics import compute_diagnostic_stats

if TYPE_CHECKING:
    from cmdquote.cli.console_api import ConsoleLike
    from cmdquote.config.model import Config
    from cmdquote.core.diagnostics import DiagnosticStats


@click.command(
    name="config",
    help="Show the effective configuration as TOML (or JSON).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def config_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the effective configuration."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = resolve_config(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(config.to_dict(), indent=2))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# CmdQuote Configuration\n")
        console.print("```toml")
        console.print(to_toml(config.to_toml_dict()), nl=False)
        console.print("```")
    else:
        console.print(to_toml(config.to_toml_dict()), nl=False)

    if get_effective_verbosity(ctx) > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "(defaults only)"
        console.print(console.styled(f"# sources: {sources}", dim=True))
        stats: DiagnosticStats = compute_diagnostic_stats(config.diagnostics)
        if stats.total:
            summary: str = f"# diagnostics: {stats.n_warning} warning(s), {stats.n_error} error(s)"
            console.print(console.styled(summary, dim=True))
