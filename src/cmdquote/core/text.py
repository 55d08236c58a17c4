# topmark:header:start
#
#   project      : CmdQuote
#   file         : text.py
#   file_relpath : src/cmdquote/core/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Character and offset helpers shared by the scanners.

Scanners walk quoted values character by character but report error offsets in
UTF-8 bytes. Offsets are only computed when an error is raised, so the happy
path never encodes the input.
"""

from __future__ import annotations

from typing import Final

from cmdquote.core.errors import QuoteSyntaxError

MAX_CODE_POINT: Final[int] = 0x10FFFF

HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")
OCTAL_DIGITS: Final[frozenset[str]] = frozenset("01234567")

MSG_OUTSIDE: Final[str] = "character {char} outside of quoted string"
MSG_UNTERMINATED_STRING: Final[str] = "unterminated quoted string"
MSG_UNTERMINATED_ESCAPE: Final[str] = "unterminated escape sequence"
MSG_UNESCAPED: Final[str] = "unescaped special character {char}"


def byte_length(text: str) -> int:
    """Return the UTF-8 length of ``text`` (lone surrogates count as 3 bytes)."""
    return len(text.encode("utf-8", "surrogatepass"))


def offset_at(text: str, index: int) -> int:
    """Return the 1-based byte offset of the character at ``index`` in ``text``."""
    return byte_length(text[:index]) + 1


def describe_char(char: str) -> str:
    """Describe a character as ``U+XXXX 'c'`` for error messages.

    Args:
        char (str): A single character.

    Returns:
        str: The code point in upper-case hex (at least 4 digits) followed by the
            quoted character when it is printable.
    """
    code = ord(char)
    if char.isprintable():
        return f"U+{code:04X} '{char}'"
    return f"U+{code:04X}"


def is_printable(char: str) -> bool:
    """Return True when ``char`` may be emitted verbatim by escaping schemes."""
    return char.isprintable()


def outside_error(text: str, index: int) -> QuoteSyntaxError:
    """Build the error for a character found outside any quoted region."""
    return QuoteSyntaxError(MSG_OUTSIDE.format(char=describe_char(text[index])), offset_at(text, index))


def unescaped_error(text: str, index: int) -> QuoteSyntaxError:
    """Build the error for a special character that should have been escaped."""
    return QuoteSyntaxError(MSG_UNESCAPED.format(char=describe_char(text[index])), offset_at(text, index))


def unterminated_string_error(text: str) -> QuoteSyntaxError:
    """Build the error for input that ends inside a quoted region."""
    return QuoteSyntaxError(MSG_UNTERMINATED_STRING, byte_length(text))


def unterminated_escape_error(text: str, msg: str = MSG_UNTERMINATED_ESCAPE) -> QuoteSyntaxError:
    """Build the error for input that ends inside an escape sequence."""
    return QuoteSyntaxError(msg, byte_length(text))


def contains_any(value: str, chars: frozenset[str]) -> bool:
    """Return True if any character of ``value`` belongs to ``chars``."""
    return not chars.isdisjoint(value)
