# topmark:header:start
#
#   project      : CmdQuote
#   file         : __init__.py
#   file_relpath : src/cmdquote/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core contract shared by every quoting scheme.

Exposes the `Quoting` / `BinaryQuoting` protocols and the `QuoteSyntaxError`
raised by strict unquoting.
"""

from __future__ import annotations

from cmdquote.core.errors import QuoteSyntaxError, UnknownSchemeError, UnsupportedCapabilityError
from cmdquote.core.protocols import BinaryQuoting, Quoting

__all__ = [
    "BinaryQuoting",
    "QuoteSyntaxError",
    "Quoting",
    "UnknownSchemeError",
    "UnsupportedCapabilityError",
]
