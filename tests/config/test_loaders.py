# topmark:header:start
#
#   project      : CmdQuote
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML loading, table extraction and rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from cmdquote.config.loaders import extract_config_table, load_defaults_dict, load_toml_dict, to_toml
from cmdquote.core.diagnostics import DiagnosticLevel, DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    """Parsed documents are unwrapped into builtin types."""
    path = tmp_path / "cmdquote.toml"
    path.write_text('[quoting]\nlayers = ["argv", "cmd"]\nif_needed = true\n', encoding="utf-8")
    data = load_toml_dict(path)
    assert data == {"quoting": {"layers": ["argv", "cmd"], "if_needed": True}}
    assert type(data["quoting"]) is dict


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """A missing file is logged and yields an empty table."""
    assert load_toml_dict(tmp_path / "absent.toml") == {}


def test_extract_config_table(tmp_path: Path) -> None:
    """Only pyproject files are unwrapped to their tool section."""
    data = {"tool": {"cmdquote": {"quoting": {"scheme": "cmd"}}}}
    assert extract_config_table(tmp_path / "pyproject.toml", data) == {"quoting": {"scheme": "cmd"}}
    assert extract_config_table(tmp_path / "pyproject.toml", {"tool": {"other": {}}}) is None
    assert extract_config_table(tmp_path / "cmdquote.toml", data) is data


def test_to_toml_round_trips_defaults() -> None:
    """Rendered defaults parse back to the same table."""
    defaults = load_defaults_dict()
    text: str = to_toml(defaults)
    assert "[quoting]" in text
    assert tomlkit.parse(text).unwrap() == defaults


def test_load_toml_dict_records_errors(tmp_path: Path) -> None:
    """Failures are recorded as error diagnostics when a log is passed."""
    bad = tmp_path / "cmdquote.toml"
    bad.write_text('scheme = "cmd\n', encoding="utf-8")
    log = DiagnosticLog()
    assert load_toml_dict(bad, diagnostics=log) == {}
    assert load_toml_dict(tmp_path / "absent.toml", diagnostics=log) == {}
    assert [d.level for d in log] == [DiagnosticLevel.ERROR, DiagnosticLevel.ERROR]
    messages = [d.message for d in log]
    assert messages[0].startswith(f"Invalid TOML in {bad}: ")
    assert messages[1].startswith(f"Cannot read {tmp_path / 'absent.toml'}: ")
