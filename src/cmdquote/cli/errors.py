# topmark:header:start
#
#   project      : CmdQuote
#   file         : errors.py
#   file_relpath : src/cmdquote/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CmdQuote CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from cmdquote.cli.exit_codes import ExitCode


class CmdquoteError(click.ClickException):
    """Base class for all CmdQuote CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text; color is applied in `show()`."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(self.format_message(), fg="bright_red"))


class CmdquoteUsageError(CmdquoteError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CmdquoteSyntaxError(CmdquoteError):
    """Error for a malformed quoted value."""

    exit_code = ExitCode.SYNTAX_ERROR

