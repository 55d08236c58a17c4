# topmark:header:start
#
#   project      : CmdQuote
#   file         : powershell.py
#   file_relpath : src/cmdquote/windows/powershell.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PowerShell string literals.

See https://docs.microsoft.com/en-us/powershell/module/microsoft.powershell.core/about/about_quoting_rules
and https://docs.microsoft.com/en-us/powershell/module/microsoft.powershell.core/about/about_special_characters.

Three schemes share the same unsafe characters:

- `PSSingleQuoting`: verbatim ``'...'`` strings, ``'`` doubled.
- `PSDoubleQuoting`: expandable ``"..."`` strings for Windows PowerShell
  (``powershell.exe``).
- `PwshDoubleQuoting`: expandable ``"..."`` strings for PowerShell Core
  (``pwsh.exe``), which additionally understands ```e`` and ```u{...}``.

For example, the value::

    a b:"c d" 'e''f'  "g\\""

is single-quoted as::

    'a b:"c d" ''e''''f''  "g\\""'

and double-quoted (both dialects) as::

    "a b:`"c d`" 'e''f'  `"g\\`"`""
"""

from __future__ import annotations

from typing import Final

from cmdquote.core.errors import QuoteSyntaxError
from cmdquote.core.text import (
    HEX_DIGITS,
    MAX_CODE_POINT,
    contains_any,
    describe_char,
    is_printable,
    offset_at,
    outside_error,
    unescaped_error,
    unterminated_escape_error,
    unterminated_string_error,
)
from cmdquote.windows.msiexec import quote_doubled, unquote_doubled

ESCAPE_CHAR: Final[str] = "`"

UNSAFE_CHARS: Final[frozenset[str]] = frozenset("\t \"$'`")

# Character -> escape emitted by both double-quote dialects.
QUOTE_ESCAPES: Final[dict[str, str]] = {
    "\0": "`0",
    "\a": "`a",
    "\b": "`b",
    "\f": "`f",
    "\n": "`n",
    "\r": "`r",
    "\t": "`t",
    "\v": "`v",
    '"': '`"',
    "$": "`$",
    "`": "``",
}

# Escape letter -> character produced by unquoting.
UNQUOTE_ESCAPES: Final[dict[str, str]] = {
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_MAX_UNICODE_DIGITS: Final[int] = 6
_MSG_UNTERMINATED_U: Final[str] = "unterminated escape sequence `u"


def _must_quote(value: str) -> bool:
    return contains_any(value, UNSAFE_CHARS)


class PSSingleQuoting:
    """Surround values with single quotes (``'...'``), doubling inner quotes."""

    def must_quote(self, value: str) -> bool:
        return _must_quote(value)

    def quote(self, value: str) -> str:
        return quote_doubled(value, "'")

    def unquote(self, quoted: str) -> str:
        return unquote_doubled(quoted, "'")


def quote_double(value: str, *, pwsh: bool) -> str:
    """Quote ``value`` as an expandable string.

    Args:
        value (str): Raw value.
        pwsh (bool): Target PowerShell Core: escape ESC as ```e`` and every other
            non-printable character as ```u{...}``. Windows PowerShell has
            neither escape, so those characters are emitted verbatim.

    Returns:
        str: The double-quoted value.
    """
    out: list[str] = []
    for ch in value:
        escape = QUOTE_ESCAPES.get(ch)
        if escape is not None:
            out.append(escape)
            continue
        code = ord(ch)
        if not pwsh:
            out.append(ch)
        elif ch == "\x1b":
            out.append("`e")
        elif code < 0x20 or not is_printable(ch):
            if code < 0x7F:
                out.append(f"`u{{{code:02X}}}")
            elif code < 0x10000:
                out.append(f"`u{{{code:04X}}}")
            else:
                out.append(f"`u{{{code:06X}}}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def unquote_double(quoted: str) -> str:
    """Unquote an expandable string; both dialects share this grammar.

    Raises:
        QuoteSyntaxError: On characters outside quotes, a bare ``$``, a malformed
            escape or an unterminated quote.
    """
    out: list[str] = []
    in_quote = False
    i = 0
    n = len(quoted)
    while i < n:
        ch = quoted[i]
        if ch == '"':
            in_quote = not in_quote
            i += 1
            continue
        if not in_quote:
            raise outside_error(quoted, i)
        if ch == "$":
            raise unescaped_error(quoted, i)
        if ch != ESCAPE_CHAR:
            out.append(ch)
            i += 1
            continue

        i += 1
        if i >= n:
            raise unterminated_escape_error(quoted)
        esc = quoted[i]
        if esc == "u":
            code, i = _scan_unicode_escape(quoted, i)
            out.append(chr(code))
        else:
            # Unknown escapes (including `" `$ ``) yield the character itself.
            out.append(UNQUOTE_ESCAPES.get(esc, esc))
        i += 1
    if in_quote:
        raise unterminated_string_error(quoted)
    return "".join(out)


def _scan_unicode_escape(quoted: str, index: int) -> tuple[int, int]:
    """Decode ```u{HHHHHH}`` whose ``u`` sits at ``index``.

    Returns:
        tuple[int, int]: The code point and the index of the closing brace.
    """
    n = len(quoted)
    index += 1
    if index >= n:
        raise unterminated_escape_error(quoted, _MSG_UNTERMINATED_U)
    if quoted[index] != "{":
        raise QuoteSyntaxError(
            f"invalid character {describe_char(quoted[index])} in escape sequence '`u'",
            offset_at(quoted, index),
        )
    start = index + 1
    end = start
    limit = min(n, start + _MAX_UNICODE_DIGITS)
    while end < limit and quoted[end] in HEX_DIGITS:
        end += 1
    digits = quoted[start:end]
    if not digits:
        raise QuoteSyntaxError("invalid escape sequence '`u'", offset_at(quoted, index))
    if end >= n:
        raise unterminated_escape_error(quoted, _MSG_UNTERMINATED_U)
    if quoted[end] != "}":
        raise QuoteSyntaxError(
            f"invalid character {describe_char(quoted[end])} in escape sequence '`u'",
            offset_at(quoted, end),
        )
    code = int(digits, 16)
    if code > MAX_CODE_POINT:
        raise QuoteSyntaxError(f"invalid escape sequence '`u{{{digits}}}'", offset_at(quoted, end))
    return code, end


class PSDoubleQuoting:
    """Surround values with double quotes (``"..."``) for Windows PowerShell."""

    def must_quote(self, value: str) -> bool:
        return _must_quote(value)

    def quote(self, value: str) -> str:
        return quote_double(value, pwsh=False)

    def unquote(self, quoted: str) -> str:
        return unquote_double(quoted)


class PwshDoubleQuoting:
    """Surround values with double quotes (``"..."``) for PowerShell Core."""

    def must_quote(self, value: str) -> bool:
        return _must_quote(value)

    def quote(self, value: str) -> str:
        return quote_double(value, pwsh=True)

    def unquote(self, quoted: str) -> str:
        return unquote_double(quoted)


PS_SINGLE_QUOTE: Final[PSSingleQuoting] = PSSingleQuoting()
PS_DOUBLE_QUOTE: Final[PSDoubleQuoting] = PSDoubleQuoting()
PWSH_DOUBLE_QUOTE: Final[PwshDoubleQuoting] = PwshDoubleQuoting()
