# topmark:header:start
#
#   project      : CmdQuote
#   file         : constants.py
#   file_relpath : src/cmdquote/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdQuote Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CMDQUOTE_VERSION: str = get_version("cmdquote")

# Project configuration files, in lookup order within a directory.
CONFIG_FILE_NAME: str = "cmdquote.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# `[tool.<name>]` table holding the configuration inside pyproject.toml.
PYPROJECT_TOOL_NAME: str = "cmdquote"

LOG_LEVEL_ENV_VAR: str = "CMDQUOTE_LOG_LEVEL"
