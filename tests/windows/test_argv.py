# topmark:header:start
#
#   project      : CmdQuote
#   file         : test_argv.py
#   file_relpath : tests/windows/test_argv.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windows ``CommandLineToArgvW`` quoting."""

from __future__ import annotations

import pytest

from cmdquote.core.errors import QuoteSyntaxError
from cmdquote.windows import ARGV
from tests.corpus import case_ids, input_cases

ROUND_TRIP_CASES = input_cases('"')


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", '""'),
        ('\\"\\', '"\\\\\\"\\\\"'),
        ('a\\\\b\\\\\\c\\\\""', '"a\\\\b\\\\\\c\\\\\\\\\\"\\""'),
        ("a b", '"a b"'),
    ],
    ids=["empty string", "quote between backslashes", "backslash runs", "space"],
)
def test_quote(value: str, expected: str) -> None:
    """Backslashes are doubled only in front of a double quote or the closing quote."""
    assert ARGV.quote(value) == expected
    assert ARGV.unquote(expected) == value


@pytest.mark.parametrize(
    ("quoted", "expected"),
    [
        ('"ab""\\"""""cd""ef"', 'ab"cdef'),
        ('"\\p\\z"', "\\p\\z"),
        ('"a\\\\\\\\"', "a\\\\"),
    ],
    ids=["multiple strings", "unnecessary escaping", "even run before closing quote"],
)
def test_unquote(quoted: str, expected: str) -> None:
    """Backslashes are literal unless they precede a double quote."""
    assert ARGV.unquote(quoted) == expected


@pytest.mark.parametrize(
    ("quoted", "msg", "offset"),
    [
        ('"a', "unterminated quoted string", 2),
        ("\\", "character U+005C '\\' outside of quoted string", 1),
        ("a", "character U+0061 'a' outside of quoted string", 1),
        ('"a"a', "character U+0061 'a' outside of quoted string", 4),
    ],
)
def test_unquote_rejects(quoted: str, msg: str, offset: int) -> None:
    """Malformed input raises with the message and byte offset of the fault."""
    with pytest.raises(QuoteSyntaxError) as exc_info:
        ARGV.unquote(quoted)
    assert exc_info.value == QuoteSyntaxError(msg, offset)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", False),
        ("C:\\Program Files\\x", True),
        ("tab\there", True),
        ('say"hi', True),
        ("a&b|c<d>e^f", False),
    ],
)
def test_must_quote(value: str, expected: bool) -> None:
    """Only whitespace and double quotes split or confuse argv parsing."""
    assert ARGV.must_quote(value) is expected


@pytest.mark.parametrize("case", ROUND_TRIP_CASES, ids=case_ids(ROUND_TRIP_CASES))
def test_round_trip(case: tuple[str, str]) -> None:
    """Every corpus value survives quote then unquote."""
    _, value = case
    assert ARGV.unquote(ARGV.quote(value)) == value
