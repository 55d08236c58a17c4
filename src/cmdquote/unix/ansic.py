# topmark:header:start
#
#   project      : CmdQuote
#   file         : ansic.py
#   file_relpath : src/cmdquote/unix/ansic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI-C quoting (``$'...'``) as implemented by Bash and Zsh.

See https://www.gnu.org/software/bash/manual/html_node/ANSI_002dC-Quoting.html.

This is the only scheme that can carry arbitrary bytes: `AnsiCQuoting.quote_binary`
escapes every byte outside printable ASCII as ``\\xHH`` while `AnsiCQuoting.quote`
escapes whole code points (``\\uHHHH`` / ``\\UHHHHHHHH``).

For example, the value::

    a b:"c d" 'e''f'  "g\\""

is quoted as::

    $'a b:\\"c d\\" \\'e\\'\\'f\\'  \\"g\\\\\\"\\"'

Unquoting accepts consecutive segments (``$'a'$'b'`` is ``ab``), short numeric
escapes (``\\x0``, ``\\u378``), control escapes (``\\cA``) and keeps unknown
escapes verbatim (``\\p`` stays ``\\p``).
"""

from __future__ import annotations

from typing import Final

from cmdquote.core.errors import QuoteSyntaxError
from cmdquote.core.text import (
    HEX_DIGITS,
    MAX_CODE_POINT,
    OCTAL_DIGITS,
    describe_char,
    is_printable,
    offset_at,
    outside_error,
    unterminated_escape_error,
    unterminated_string_error,
)
from cmdquote.unix import unsafe

PREFIX: Final[str] = "$'"
SUFFIX: Final[str] = "'"

# Character -> escape emitted by `quote` / `quote_binary`.
QUOTE_ESCAPES: Final[dict[str, str]] = {
    "\a": "\\a",
    "\b": "\\b",
    "\x1b": "\\e",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "'": "\\'",
    "?": "\\?",
    "\\": "\\\\",
}

# Escape letter -> character produced by `unquote` / `unquote_binary`.
UNQUOTE_ESCAPES: Final[dict[str, str]] = {
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "E": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "?": "?",
    "\\": "\\",
}

# Maximum number of hex digits per numeric escape letter.
HEX_ESCAPE_WIDTHS: Final[dict[str, int]] = {"x": 2, "u": 4, "U": 8}

_MAX_OCTAL_DIGITS: Final[int] = 3
_MAX_BYTE: Final[int] = 0xFF


class _TextSink:
    """Collects unquoted output as text."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def text(self, value: str) -> None:
        self.parts.append(value)

    def byte(self, value: int) -> None:
        self.parts.append(chr(value))

    def code_point(self, value: int) -> None:
        self.parts.append(chr(value))

    def result(self) -> str:
        return "".join(self.parts)


class _BytesSink:
    """Collects unquoted output as raw bytes."""

    def __init__(self) -> None:
        self.buf = bytearray()

    def text(self, value: str) -> None:
        self.buf += value.encode("utf-8", "surrogatepass")

    def byte(self, value: int) -> None:
        self.buf.append(value)

    def code_point(self, value: int) -> None:
        self.buf += chr(value).encode("utf-8", "surrogatepass")

    def result(self) -> bytes:
        return bytes(self.buf)


def _scan(quoted: str, sink: _TextSink | _BytesSink) -> None:
    """Decode ``quoted`` into ``sink``.

    ``\\x`` and octal escapes produce a byte; ``\\u`` / ``\\U`` produce a code
    point. The sink decides how each is represented.
    """
    n = len(quoted)
    in_quote = False
    i = 0
    while i < n:
        ch = quoted[i]
        if not in_quote:
            if quoted.startswith(PREFIX, i):
                in_quote = True
                i += len(PREFIX)
                continue
            raise outside_error(quoted, i)
        if ch == SUFFIX:
            in_quote = False
            i += 1
            continue
        if ch != "\\":
            sink.text(ch)
            i += 1
            continue

        i += 1
        if i >= n:
            raise unterminated_escape_error(quoted)
        esc = quoted[i]

        if esc in UNQUOTE_ESCAPES:
            sink.text(UNQUOTE_ESCAPES[esc])
            i += 1
        elif esc == "c":
            i += 1
            if i >= n:
                raise unterminated_escape_error(quoted, "unterminated escape sequence `\\c`")
            sink.byte(_control_char(quoted, i))
            i += 1
        elif esc in HEX_ESCAPE_WIDTHS:
            start = i + 1
            end = start
            limit = min(n, start + HEX_ESCAPE_WIDTHS[esc])
            while end < limit and quoted[end] in HEX_DIGITS:
                end += 1
            digits = quoted[start:end]
            if not digits:
                raise QuoteSyntaxError(
                    f"unterminated escape sequence `\\{esc}`",
                    offset_at(quoted, i),
                )
            value = int(digits, 16)
            if value > MAX_CODE_POINT:
                raise QuoteSyntaxError(
                    f"invalid escape sequence `\\{esc}{digits}`",
                    offset_at(quoted, end - 1),
                )
            if esc == "x":
                sink.byte(value)
            else:
                sink.code_point(value)
            i = end
        elif esc in OCTAL_DIGITS:
            end = i + 1
            limit = min(n, i + _MAX_OCTAL_DIGITS)
            while end < limit and quoted[end] in OCTAL_DIGITS:
                end += 1
            digits = quoted[i:end]
            value = int(digits, 8)
            if value > _MAX_BYTE:
                raise QuoteSyntaxError(
                    f"invalid escape sequence `\\{digits}`",
                    offset_at(quoted, end - 1),
                )
            sink.byte(value)
            i = end
        else:
            sink.text("\\" + esc)
            i += 1
    if in_quote:
        raise unterminated_string_error(quoted)


def _control_char(quoted: str, index: int) -> int:
    """Decode the character following ``\\c`` into a control code."""
    ch = quoted[index]
    if ch == "?":
        return 0x7F
    if "a" <= ch <= "z":
        ch = ch.upper()
    if "@" <= ch <= "_":
        return ord(ch) - ord("@")
    raise QuoteSyntaxError(
        f"invalid character {describe_char(ch)} in escape sequence `\\c`",
        offset_at(quoted, index),
    )


class AnsiCQuoting:
    """Surround values with a dollar-prefixed single quote (``$'...'``)."""

    def must_quote(self, value: str) -> bool:
        return unsafe.must_quote(value)

    def quote(self, value: str) -> str:
        out: list[str] = []
        for ch in value:
            escape = QUOTE_ESCAPES.get(ch)
            if escape is not None:
                out.append(escape)
                continue
            code = ord(ch)
            if code < 0x20:
                out.append(f"\\x{code:02X}")
            elif is_printable(ch):
                out.append(ch)
            elif code < 0x10000:
                out.append(f"\\u{code:04X}")
            else:
                out.append(f"\\U{code:08X}")
        return PREFIX + "".join(out) + SUFFIX

    def unquote(self, quoted: str) -> str:
        sink = _TextSink()
        _scan(quoted, sink)
        return sink.result()

    def quote_binary(self, value: bytes) -> str:
        out: list[str] = []
        for byte in value:
            ch = chr(byte)
            escape = QUOTE_ESCAPES.get(ch)
            if escape is not None:
                out.append(escape)
            elif byte < 0x20 or byte >= 0x7F:
                out.append(f"\\x{byte:02X}")
            else:
                out.append(ch)
        return PREFIX + "".join(out) + SUFFIX

    def unquote_binary(self, quoted: str) -> bytes:
        sink = _BytesSink()
        _scan(quoted, sink)
        return sink.result()


ANSI_C: Final[AnsiCQuoting] = AnsiCQuoting()
