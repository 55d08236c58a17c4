# topmark:header:start
#
#   project      : CmdQuote
#   file         : __init__.py
#   file_relpath : src/cmdquote/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for CmdQuote."""

from __future__ import annotations
