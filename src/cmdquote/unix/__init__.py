# topmark:header:start
#
#   project      : CmdQuote
#   file         : __init__.py
#   file_relpath : src/cmdquote/unix/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quoting schemes for Unix shells (POSIX ``sh``, Bash, Zsh)."""

from __future__ import annotations

from cmdquote.unix.ansic import ANSI_C, AnsiCQuoting
from cmdquote.unix.posix import DOUBLE_QUOTE, SINGLE_QUOTE, DoubleQuoting, SingleQuoting

__all__ = [
    "ANSI_C",
    "AnsiCQuoting",
    "DOUBLE_QUOTE",
    "DoubleQuoting",
    "SINGLE_QUOTE",
    "SingleQuoting",
]
