# topmark:header:start
#
#   project      : CmdQuote
#   file         : test_quote.py
#   file_relpath : tests/cli/test_quote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `quote` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_SUCCESS,
    assert_USAGE_ERROR,
    lines,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

LONG_NAME = "Long File With 'Single' & \"Double\" Quotes.txt"


@mark_cli
def test_quote_defaults_to_posix_single(isolation: Path) -> None:
    """Without config or options, values are single-quoted for POSIX shells."""
    result = run_cli_in(isolation, ["quote", "a b", "it's"])
    assert_SUCCESS(result)
    assert lines(result) == ["'a b'", "'it'\"'\"'s'"]


@mark_cli
@pytest.mark.parametrize(
    ("scheme", "value", "expected"),
    [
        ("sh-double", "$HOME", '"\\$HOME"'),
        ("bash", "a\nb", "$'a\\nb'"),
        ("argv", 'say "hi"', '"say \\"hi\\""'),
        ("cmd", "a&b", "a^&b"),
        ("msi", 'a"b', '"a""b"'),
        ("ps-single", "it's", "'it''s'"),
        ("powershell", "$x", '"`$x"'),
        ("pwsh", "\x1b", '"`e"'),
    ],
)
def test_quote_with_scheme(scheme: str, value: str, expected: str) -> None:
    """``--scheme`` accepts keys and aliases."""
    result = run_cli(["--no-config", "quote", "--scheme", scheme, value])
    assert_SUCCESS(result)
    assert lines(result) == [expected]


@mark_cli
def test_quote_layers(isolation: Path) -> None:
    """``--layer`` applies schemes innermost first."""
    result = run_cli_in(isolation, ["quote", "-l", "argv", "-l", "cmd", LONG_NAME])
    assert_SUCCESS(result)
    assert lines(result) == ["^\"Long^ File^ With^ ^'Single^'^ ^&^ \\^\"Double\\^\"^ Quotes.txt^\""]


@mark_cli
def test_quote_if_needed(isolation: Path) -> None:
    """``--if-needed`` leaves safe values alone but still quotes empty ones."""
    result = run_cli_in(isolation, ["quote", "--if-needed", "plain", "a b", ""])
    assert_SUCCESS(result)
    assert lines(result) == ["plain", "'a b'", "''"]


@mark_cli
def test_quote_stdin_drops_one_trailing_newline(isolation: Path) -> None:
    """STDIN is read as a single value minus one trailing newline."""
    result = run_cli_in(isolation, ["quote", "--stdin"], input_text="a b\n\n")
    assert_SUCCESS(result)
    assert result.output == "'a b\n'\n"


@mark_cli
def test_quote_stdin_and_values_conflict(isolation: Path) -> None:
    """Values come either from arguments or from STDIN."""
    result = run_cli_in(isolation, ["quote", "--stdin", "x"], input_text="y")
    assert_USAGE_ERROR(result)
    assert "not both" in result.output


@mark_cli
def test_quote_without_values(isolation: Path) -> None:
    """At least one value is required."""
    result = run_cli_in(isolation, ["quote"])
    assert_USAGE_ERROR(result)
    assert "No values given" in result.output


@mark_cli
def test_quote_unknown_scheme() -> None:
    """Unknown schemes are rejected by option parsing."""
    result = run_cli(["--no-config", "quote", "-s", "fish", "x"])
    assert result.exit_code == 2
    assert "Unknown scheme 'fish'" in result.output


@mark_cli
def test_quote_binary_stdin() -> None:
    """Binary mode quotes raw bytes, including invalid UTF-8."""
    result = run_cli(
        ["--no-config", "quote", "--binary", "--stdin", "-s", "ansi-c"],
        input_text=b"a\x00\xff",
    )
    assert_SUCCESS(result)
    assert result.output == "$'a\\x00\\xFF'\n"


@mark_cli
def test_quote_binary_with_outer_layer() -> None:
    """In binary mode only the innermost layer sees bytes."""
    result = run_cli(["--no-config", "quote", "--binary", "-l", "ansi-c", "-l", "cmd", "a b"])
    assert_SUCCESS(result)
    assert lines(result) == ["$^'a^ b^'"]


@mark_cli
def test_quote_binary_requires_capable_scheme() -> None:
    """Binary mode with a text-only scheme is a usage error."""
    result = run_cli(["--no-config", "quote", "--binary", "-s", "argv", "x"])
    assert_USAGE_ERROR(result)
    assert "cannot quote binary values" in result.output


@mark_cli
def test_quote_uses_project_config(isolation: Path) -> None:
    """The discovered ``cmdquote.toml`` selects scheme and behavior."""
    (isolation / "cmdquote.toml").write_text(
        '[quoting]\nscheme = "pwsh"\nif_needed = true\n', encoding="utf-8"
    )
    result = run_cli_in(isolation, ["quote", "plain", "$x"])
    assert_SUCCESS(result)
    assert lines(result) == ["plain", '"`$x"']

    # CLI options win over the file.
    result = run_cli_in(isolation, ["quote", "--always", "-s", "cmd", "plain"])
    assert_SUCCESS(result)
    assert lines(result) == ["plain"]

    result = run_cli_in(isolation, ["quote", "--always", "plain"])
    assert_SUCCESS(result)
    assert lines(result) == ['"plain"']


@mark_cli
def test_quote_pyproject_layers(isolation: Path) -> None:
    """Layers configured in ``pyproject.toml`` apply; ``--scheme`` replaces them."""
    (isolation / "pyproject.toml").write_text(
        '[tool.cmdquote.quoting]\nlayers = ["argv", "cmd"]\n', encoding="utf-8"
    )
    result = run_cli_in(isolation, ["quote", "a b"])
    assert_SUCCESS(result)
    assert lines(result) == ['^"a^ b^"']

    result = run_cli_in(isolation, ["quote", "-s", "argv", "a b"])
    assert_SUCCESS(result)
    assert lines(result) == ['"a b"']
