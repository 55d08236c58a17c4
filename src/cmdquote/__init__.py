# topmark:header:start
#
#   project      : CmdQuote
#   file         : __init__.py
#   file_relpath : src/cmdquote/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote package.

CmdQuote quotes arbitrary values so that a specific command interpreter (POSIX
shells, Bash/Zsh ANSI-C strings, Windows argv parsing, cmd.exe, msiexec,
PowerShell) reads them back as exactly one argument, and strictly unquotes such
values. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations

from cmdquote.api import (
    must_quote,
    quote,
    quote_binary,
    quote_if_needed,
    quote_layers,
    unquote,
    unquote_binary,
    unquote_layers,
)
from cmdquote.core.errors import QuoteSyntaxError, UnknownSchemeError, UnsupportedCapabilityError
from cmdquote.registry import Scheme, SchemeRegistry

__all__ = [
    "QuoteSyntaxError",
    "Scheme",
    "SchemeRegistry",
    "UnknownSchemeError",
    "UnsupportedCapabilityError",
    "must_quote",
    "quote",
    "quote_binary",
    "quote_if_needed",
    "quote_layers",
    "unquote",
    "unquote_binary",
    "unquote_layers",
]
