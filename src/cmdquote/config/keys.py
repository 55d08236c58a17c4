# topmark:header:start
#
#   project      : CmdQuote
#   file         : keys.py
#   file_relpath : src/cmdquote/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for CmdQuote configuration.

Keys defined here are the *external configuration API* as it appears in
``cmdquote.toml`` and in ``[tool.cmdquote]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by CmdQuote configuration."""

    # [quoting]
    SECTION_QUOTING: Final[str] = "quoting"

    KEY_SCHEME: Final[str] = "scheme"
    KEY_LAYERS: Final[str] = "layers"
    KEY_IF_NEEDED: Final[str] = "if_needed"

    # pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
