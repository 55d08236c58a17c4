# topmark:header:start
#
#   project      : CmdQuote
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: defaults, TOML merging, discovery and CLI overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cmdquote.config.model import Config, MutableConfig
from cmdquote.core.diagnostics import DiagnosticLevel
from cmdquote.registry import Scheme
from tests.conftest import make_config

if TYPE_CHECKING:
    from pathlib import Path


def _messages(config: Config | MutableConfig) -> list[str]:
    return [d.message for d in config.diagnostics]


def test_defaults() -> None:
    """Defaults select POSIX single quotes, no layers, always quote."""
    config: Config = MutableConfig.from_defaults().freeze()
    assert config.scheme is Scheme.SH_SINGLE
    assert config.layers == ()
    assert config.if_needed is False
    assert config.schemes == (Scheme.SH_SINGLE,)
    assert config.config_files == ()
    assert config.diagnostics == ()


def test_layers_replace_scheme() -> None:
    """A non-empty layer chain is the effective scheme chain."""
    config = make_config(layers=[Scheme.ARGV, Scheme.CMD])
    assert config.schemes == (Scheme.ARGV, Scheme.CMD)


def test_merge_toml_reads_all_keys() -> None:
    """Scheme tokens accept aliases; layers keep their order."""
    draft = MutableConfig.from_toml_dict(
        {"quoting": {"scheme": "bash", "layers": ["argv", "cmd.exe"], "if_needed": True}},
        source="inline",
    )
    assert draft.scheme is Scheme.ANSI_C
    assert draft.layers == [Scheme.ARGV, Scheme.CMD]
    assert draft.if_needed is True
    assert draft.config_files == ["inline"]
    assert len(draft.diagnostics) == 0


@pytest.mark.parametrize(
    ("table", "expected"),
    [
        ({"quoting": {"scheme": "fish"}}, "Unknown quoting scheme 'fish' in quoting.scheme (t.toml)"),
        ({"quoting": {"layers": ["argv", "nope"]}}, "Unknown quoting scheme 'nope' in quoting.layers (t.toml)"),
        ({"quoting": {"colour": "red"}}, "Unknown key quoting.colour (t.toml)"),
        ({"output": {}}, "Unknown configuration section [output] (t.toml)"),
        ({"quoting": {"scheme": 3}}, "Expected string in quoting.scheme, got int: 3"),
        ({"quoting": {"if_needed": 1}}, "Expected bool in quoting.if_needed, got int: 1"),
        ({"quoting": {"layers": "argv"}}, "Expected list in quoting.layers, got str: argv"),
        ({"quoting": {"layers": ["argv", 7]}}, "Ignoring non-string item in quoting.layers: 7"),
        ({"quoting": "sh"}, "Expected table [quoting], got str: sh"),
    ],
)
def test_merge_toml_warns_and_keeps_going(table: dict[str, object], expected: str) -> None:
    """Invalid entries become warnings; valid siblings still apply."""
    draft = MutableConfig.from_toml_dict(table, source="t.toml")
    assert expected in _messages(draft)
    assert {d.level for d in draft.diagnostics} == {DiagnosticLevel.WARNING}


def test_invalid_scheme_keeps_previous_value() -> None:
    """A rejected scheme leaves the earlier layer's value in place."""
    draft = MutableConfig.from_defaults()
    draft.merge_toml({"quoting": {"scheme": "fish"}}, source="x")
    assert draft.freeze().scheme is Scheme.SH_SINGLE


def test_merge_with_overrides_only_set_values() -> None:
    """``None`` in the higher layer inherits; provenance accumulates."""
    base = MutableConfig.from_toml_dict({"quoting": {"scheme": "cmd", "if_needed": True}}, source="a")
    top = MutableConfig.from_toml_dict({"quoting": {"layers": ["argv"]}}, source="b")
    merged = base.merge_with(top)
    assert merged.scheme is Scheme.CMD
    assert merged.layers == [Scheme.ARGV]
    assert merged.if_needed is True
    assert merged.config_files == ["a", "b"]


def test_apply_overrides_scheme_clears_layers() -> None:
    """An explicit scheme without layers drops configured layers."""
    draft = MutableConfig(layers=[Scheme.ARGV, Scheme.CMD])
    draft.apply_overrides(scheme=Scheme.PWSH_DOUBLE)
    assert draft.freeze().schemes == (Scheme.PWSH_DOUBLE,)


def test_apply_overrides_layers_win() -> None:
    """Explicit layers replace both configured layers and scheme."""
    draft = MutableConfig(scheme=Scheme.CMD)
    draft.apply_overrides(scheme=Scheme.SH_DOUBLE, layers=[Scheme.ARGV])
    frozen = draft.freeze()
    assert frozen.schemes == (Scheme.ARGV,)
    assert frozen.scheme is Scheme.SH_DOUBLE


def test_apply_overrides_without_values_is_noop() -> None:
    """No overrides leave the draft untouched."""
    draft = MutableConfig(scheme=Scheme.CMD, layers=[Scheme.ARGV], if_needed=True)
    draft.apply_overrides()
    assert (draft.scheme, draft.layers, draft.if_needed) == (Scheme.CMD, [Scheme.ARGV], True)


def test_thaw_freeze_round_trip() -> None:
    """Thawing a frozen config and freezing it again is lossless."""
    config = make_config(scheme=Scheme.MSIEXEC, layers=[Scheme.ARGV], if_needed=True)
    assert config.thaw().freeze() == config


def test_frozen_config_is_immutable() -> None:
    """Frozen configs reject attribute assignment."""
    config = make_config()
    with pytest.raises(AttributeError):
        config.scheme = Scheme.CMD  # type: ignore[misc]


def test_to_toml_dict_and_to_dict() -> None:
    """Exports use stable scheme keys."""
    config = make_config(scheme=Scheme.ANSI_C, layers=[Scheme.ARGV, Scheme.CMD])
    assert config.to_toml_dict() == {
        "quoting": {"scheme": "ansi-c", "layers": ["argv", "cmd"], "if_needed": False}
    }
    payload = config.to_dict()
    assert payload["config"] == config.to_toml_dict()
    assert payload["config_files"] == []
    assert payload["diagnostics"] == []
    assert payload["diagnostic_counts"] == {"warning": 0, "error": 0}


# ---------------------------------------------------------------------------
# Files and discovery
# ---------------------------------------------------------------------------


def test_from_toml_file_cmdquote_toml(tmp_path: Path) -> None:
    """A dedicated config file is read at top level."""
    path = tmp_path / "cmdquote.toml"
    path.write_text('[quoting]\nscheme = "pwsh"\n', encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.scheme is Scheme.PWSH_DOUBLE
    assert draft.config_files == [path]


def test_from_toml_file_pyproject_section(tmp_path: Path) -> None:
    """A pyproject is read from its ``[tool.cmdquote]`` section only."""
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.cmdquote.quoting]\nlayers = ["argv", "cmd"]\n',
        encoding="utf-8",
    )
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.layers == [Scheme.ARGV, Scheme.CMD]
    assert len(draft.diagnostics) == 0


def test_from_toml_file_pyproject_without_section(tmp_path: Path) -> None:
    """A pyproject without the tool section yields no draft."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(path) is None


def test_malformed_toml_is_treated_as_empty(tmp_path: Path) -> None:
    """Unparseable files set nothing and are reported as an error diagnostic."""
    path = tmp_path / "cmdquote.toml"
    path.write_text("[quoting\nscheme = ", encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.scheme is None
    assert draft.config_files == [path]
    [diag] = list(draft.diagnostics)
    assert diag.level is DiagnosticLevel.ERROR
    assert diag.message.startswith(f"Invalid TOML in {path}: ")


def test_malformed_pyproject_is_reported(tmp_path: Path) -> None:
    """A broken pyproject passed explicitly is reported rather than skipped."""
    path = tmp_path / "pyproject.toml"
    path.write_text("[tool.cmdquote\n", encoding="utf-8")
    draft = MutableConfig.load_merged(anchor=tmp_path, extra_config_files=[path], no_config=True)
    config = draft.freeze()
    assert config.scheme is Scheme.SH_SINGLE
    assert [d.level for d in config.diagnostics] == [DiagnosticLevel.ERROR]
    assert config.to_dict()["diagnostic_counts"] == {"warning": 0, "error": 1}


def test_discover_walks_up(tmp_path: Path) -> None:
    """Discovery finds the nearest config in a parent directory."""
    (tmp_path / "cmdquote.toml").write_text('[quoting]\nscheme = "cmd"\n', encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert MutableConfig.discover_config_file(nested) == (tmp_path / "cmdquote.toml").resolve()


def test_discover_prefers_cmdquote_toml(tmp_path: Path) -> None:
    """In one directory ``cmdquote.toml`` wins over ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text('[tool.cmdquote.quoting]\nscheme = "argv"\n', encoding="utf-8")
    (tmp_path / "cmdquote.toml").write_text('[quoting]\nscheme = "cmd"\n', encoding="utf-8")
    found = MutableConfig.discover_config_file(tmp_path)
    assert found is not None
    assert found.name == "cmdquote.toml"


def test_discover_skips_pyproject_without_section(tmp_path: Path) -> None:
    """A pyproject without ``[tool.cmdquote]`` does not stop the walk."""
    (tmp_path / "cmdquote.toml").write_text('[quoting]\nscheme = "cmd"\n', encoding="utf-8")
    child = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    found = MutableConfig.discover_config_file(child)
    assert found == (tmp_path / "cmdquote.toml").resolve()


def test_load_merged_precedence(isolation: Path, tmp_path: Path) -> None:
    """Discovered config, then extra files in order, then overrides."""
    (isolation / "cmdquote.toml").write_text(
        '[quoting]\nscheme = "cmd"\nif_needed = true\n', encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text('[quoting]\nscheme = "msiexec"\n', encoding="utf-8")

    draft = MutableConfig.load_merged(extra_config_files=[extra])
    config = draft.freeze()
    assert config.scheme is Scheme.MSIEXEC
    assert config.if_needed is True
    assert [str(p) for p in config.config_files][-1] == str(extra)
    assert len(config.config_files) == 2


def test_load_merged_no_config_skips_discovery(isolation: Path) -> None:
    """``no_config`` ignores the project file but keeps defaults."""
    (isolation / "cmdquote.toml").write_text('[quoting]\nscheme = "cmd"\n', encoding="utf-8")
    config = MutableConfig.load_merged(no_config=True).freeze()
    assert config.scheme is Scheme.SH_SINGLE
    assert config.config_files == ()


def test_load_merged_warns_on_extra_pyproject_without_section(isolation: Path) -> None:
    """An explicit pyproject without the tool section is reported."""
    path = isolation / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    config = MutableConfig.load_merged(extra_config_files=[path], no_config=True).freeze()
    assert f"No [tool.cmdquote] section in {path}" in _messages(config)
