# topmark:header:start
#
#   project      : CmdQuote
#   file         : __init__.py
#   file_relpath : src/cmdquote/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote CLI subcommands."""

from __future__ import annotations
