# topmark:header:start
#
#   project      : CmdQuote
#   file         : __main__.py
#   file_relpath : src/cmdquote/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CmdQuote via ``python -m cmdquote``.

Equivalent to running the ``cmdquote`` console script; it delegates to
:func:`cmdquote.cli.main.cli`.

Examples:
    Quote a value for PowerShell Core::

        python -m cmdquote quote --scheme pwsh 'a $b'
"""

from __future__ import annotations

from cmdquote.cli.main import cli

if __name__ == "__main__":
    cli()
