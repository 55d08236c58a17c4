# topmark:header:start
#
#   project      : CmdQuote
#   file         : getters.py
#   file_relpath : src/cmdquote/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

The getters validate the expected shape and record **warnings** in a
`DiagnosticLog` (and also log a warning), so that user mistakes are surfaced
without crashing or changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from cmdquote.config.loaders import TomlTable
    from cmdquote.config.logging import CmdquoteLogger
    from cmdquote.core.diagnostics import DiagnosticLog


def get_table_value_checked(
    table: TomlTable,
    key: str,
    *,
    diagnostics: DiagnosticLog,
    logger: CmdquoteLogger,
) -> TomlTable:
    """Return a sub-table, warning when present but not a table.

    Missing keys yield an empty table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    logger.warning("Expected table [%s], got %s: %r", key, type(value).__name__, value)
    diagnostics.add_warning(f"Expected table [{key}], got {type(value).__name__}: {value}")
    return {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: CmdquoteLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: CmdquoteLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are **not** coerced.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value}")
    return None


def get_string_list_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: CmdquoteLogger,
) -> list[str] | None:
    """Return an optional list of strings.

    A value that is not a list is ignored with a warning; non-string items are
    dropped individually, each with a warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value}")
        return None

    result: list[str] = []
    for item in value:
        if isinstance(item, str):
            result.append(item)
            continue
        logger.warning("Ignoring non-string item in %s: %r", loc, item)
        diagnostics.add_warning(f"Ignoring non-string item in {loc}: {item!r}")
    return result
