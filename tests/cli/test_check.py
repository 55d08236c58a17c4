# topmark:header:start
#
#   project      : CmdQuote
#   file         : test_check.py
#   file_relpath : tests/cli/test_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `check` command.

`check` exits with 0 when no value needs quoting and with 2 as soon as one
does; with ``-v`` it also prints a verdict per value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_MUST_QUOTE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    lines,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_check_safe_values(isolation: Path) -> None:
    """Safe values pass silently."""
    result = run_cli_in(isolation, ["check", "plain", "path/to/file.txt"])
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_check_unsafe_value(isolation: Path) -> None:
    """A single unsafe value is enough to fail."""
    result = run_cli_in(isolation, ["check", "plain", "a b"])
    assert_MUST_QUOTE(result)


@mark_cli
def test_check_empty_value(isolation: Path) -> None:
    """The empty string always needs quoting."""
    result = run_cli_in(isolation, ["check", ""])
    assert_MUST_QUOTE(result)


@mark_cli
def test_check_verbose_prints_verdicts() -> None:
    """``-v`` prints one verdict per value."""
    result = run_cli(["-v", "--no-config", "check", "-s", "argv", "a&b", "a b"])
    assert_MUST_QUOTE(result)
    assert lines(result) == ["ok\ta&b", "must quote\ta b"]


@mark_cli
def test_check_uses_innermost_layer() -> None:
    """With layers, values are checked against the innermost scheme."""
    result = run_cli(["--no-config", "check", "-l", "argv", "-l", "cmd", "a&b"])
    assert_SUCCESS(result)

    result = run_cli(["--no-config", "check", "-s", "cmd", "a&b"])
    assert_MUST_QUOTE(result)


@mark_cli
def test_check_stdin(isolation: Path) -> None:
    """A value can come from STDIN."""
    result = run_cli_in(isolation, ["check", "--stdin"], input_text="plain\n")
    assert_SUCCESS(result)

    result = run_cli_in(isolation, ["check", "--stdin"], input_text="a;b\n")
    assert_MUST_QUOTE(result)


@mark_cli
def test_check_without_values(isolation: Path) -> None:
    """At least one value is required."""
    result = run_cli_in(isolation, ["check"])
    assert_USAGE_ERROR(result)
