# topmark:header:start
#
#   project      : CmdQuote
#   file         : main.py
#   file_relpath : src/cmdquote/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote command line entry point.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read the console, verbosity and config sources from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cmdquote.cli.commands.check import check_command
from cmdquote.cli.commands.config import config_command
from cmdquote.cli.commands.quote import quote_command
from cmdquote.cli.commands.schemes import schemes_command
from cmdquote.cli.commands.unquote import unquote_command
from cmdquote.cli.commands.version import version_command
from cmdquote.cli.console import ClickConsole
from cmdquote.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
    verbosity_to_log_level,
)
from cmdquote.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from cmdquote.cli.console_api import ConsoleLike
    from cmdquote.config.logging import CmdquoteLogger

logger: CmdquoteLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Extra config files from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # CMDQUOTE_LOG_LEVEL wins over -v for internal logging.
    log_level: int = resolve_env_log_level() or verbosity_to_log_level(level_cli)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["config_paths"] = config_paths
    ctx.obj["no_config"] = no_config

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Quote and unquote values for shells and Windows command interpreters.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the CmdQuote CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'cmdquote quote --scheme SCHEME VALUE...' to quote values.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(schemes_command)

cli.add_command(config_command)

cli.add_command(quote_command)

cli.add_command(unquote_command)

cli.add_command(check_command)

if __name__ == "__main__":
    cli()
