# topmark:header:start
#
#   project      : CmdQuote
#   file         : loaders.py
#   file_relpath : src/cmdquote/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cmdquote.config.keys import Toml
from cmdquote.config.logging import get_logger
from cmdquote.constants import PYPROJECT_FILE_NAME, PYPROJECT_TOOL_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from cmdquote.config.logging import CmdquoteLogger
    from cmdquote.core.diagnostics import DiagnosticLog

logger: CmdquoteLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults in TOML shape."""
    return {
        Toml.SECTION_QUOTING: {
            Toml.KEY_SCHEME: "sh-single",
            Toml.KEY_LAYERS: [],
            Toml.KEY_IF_NEEDED: False,
        },
    }


def load_toml_dict(path: Path, *, diagnostics: DiagnosticLog | None = None) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``cmdquote.toml`` or ``pyproject.toml``).
        diagnostics (DiagnosticLog | None): When given, failures are also recorded
            there as error diagnostics.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        if diagnostics is not None:
            diagnostics.add_error(f"Cannot read {path}: {e}")
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        if diagnostics is not None:
            diagnostics.add_error(f"Invalid TOML in {path}: {e}")
        return {}


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the CmdQuote table of a parsed file.

    For ``pyproject.toml`` this is ``[tool.cmdquote]``; any other file is a
    dedicated config file whose top level is the table itself.

    Returns:
        TomlTable | None: The table, or None when a pyproject has no such section.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(PYPROJECT_TOOL_NAME) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_NAME, path)
        return None
    return cast("TomlTable", section)


def to_toml(data: TomlTable) -> str:
    """Render a TOML table as a document string."""
    return tomlkit.dumps(data)
