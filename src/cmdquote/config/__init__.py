# topmark:header:start
#
#   project      : CmdQuote
#   file         : __init__.py
#   file_relpath : src/cmdquote/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for CmdQuote.

Layered configuration (runtime defaults, ``cmdquote.toml`` or
``[tool.cmdquote]`` in ``pyproject.toml``, explicit ``--config`` files, CLI
options) merged into an immutable [`Config`][cmdquote.config.model.Config].
"""

from __future__ import annotations
