# topmark:header:start
#
#   project      : CmdQuote
#   file         : __init__.py
#   file_relpath : src/cmdquote/windows/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quoting schemes for Windows programs and shells.

A value often crosses two layers on Windows: a program parses its command line
with `ARGV` rules, and ``cmd.exe`` interprets the whole line first. Quote with
`ARGV`, then with `CMD` (see `cmdquote.api.quote_layers`).
"""

from __future__ import annotations

from cmdquote.windows.argv import ARGV, ArgvQuoting
from cmdquote.windows.cmd import CMD, CmdQuoting
from cmdquote.windows.msiexec import MSIEXEC, MsiexecQuoting
from cmdquote.windows.powershell import (
    PS_DOUBLE_QUOTE,
    PS_SINGLE_QUOTE,
    PWSH_DOUBLE_QUOTE,
    PSDoubleQuoting,
    PSSingleQuoting,
    PwshDoubleQuoting,
)

__all__ = [
    "ARGV",
    "ArgvQuoting",
    "CMD",
    "CmdQuoting",
    "MSIEXEC",
    "MsiexecQuoting",
    "PS_DOUBLE_QUOTE",
    "PS_SINGLE_QUOTE",
    "PSDoubleQuoting",
    "PSSingleQuoting",
    "PWSH_DOUBLE_QUOTE",
    "PwshDoubleQuoting",
]
