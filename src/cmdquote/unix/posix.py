# topmark:header:start
#
#   project      : CmdQuote
#   file         : posix.py
#   file_relpath : src/cmdquote/unix/posix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""POSIX single- and double-quoting.

See https://pubs.opengroup.org/onlinepubs/9699919799/utilities/V3_chap02.html#tag_18_02_02
and https://pubs.opengroup.org/onlinepubs/9699919799/utilities/V3_chap02.html#tag_18_02_03.

For example, the value::

    a b:"c d" 'e''f'  "g\\""

is single-quoted as::

    'a b:"c d" '"'"'e'"'"''"'"'f'"'"'  "g\\""'

and double-quoted as::

    "a b:\\"c d\\" 'e''f'  \\"g\\\\\\"\\""
"""

from __future__ import annotations

from typing import Final

from cmdquote.core.errors import QuoteSyntaxError
from cmdquote.core.text import (
    describe_char,
    offset_at,
    outside_error,
    unescaped_error,
    unterminated_escape_error,
    unterminated_string_error,
)
from cmdquote.unix import unsafe

# Characters that keep their special meaning inside double quotes.
DOUBLE_QUOTE_SPECIALS: Final[frozenset[str]] = frozenset('!"$\\`')

_DOUBLE_QUOTE_TABLE: Final[dict[int, str]] = {ord(c): "\\" + c for c in DOUBLE_QUOTE_SPECIALS}


class SingleQuoting:
    """Surround values with single quotes (``'...'``).

    A literal ``'`` cannot appear inside single quotes, so it is re-expressed as
    ``'"'"'``: close the quote, emit a double-quoted ``'``, reopen.
    """

    def must_quote(self, value: str) -> bool:
        return unsafe.must_quote(value)

    def quote(self, value: str) -> str:
        return "'" + value.replace("'", "'\"'\"'") + "'"

    def unquote(self, quoted: str) -> str:
        """Unquote a single-quoted value.

        Double quotes are only accepted around single quotes, which is the only
        way `quote` ever uses them.

        Raises:
            QuoteSyntaxError: On characters outside quotes, anything but ``'``
                between double quotes, or an unterminated quote.
        """
        out: list[str] = []
        in_single = in_double = False
        for i, ch in enumerate(quoted):
            if ch == "'":
                if in_double:
                    out.append(ch)
                else:
                    in_single = not in_single
            elif ch == '"':
                if in_single:
                    out.append(ch)
                else:
                    in_double = not in_double
            elif in_double:
                raise QuoteSyntaxError(
                    f"unsupported character {describe_char(ch)} in double quoted string",
                    offset_at(quoted, i),
                )
            elif not in_single:
                raise outside_error(quoted, i)
            else:
                out.append(ch)
        if in_single or in_double:
            raise unterminated_string_error(quoted)
        return "".join(out)


class DoubleQuoting:
    """Surround values with double quotes (``"..."``).

    Special characters (``!``, ``"``, ``$``, backslash and backtick) are
    backslash-escaped; any other backslash sequence is kept
    verbatim on unquoting, as the shell does.
    """

    def must_quote(self, value: str) -> bool:
        return unsafe.must_quote(value)

    def quote(self, value: str) -> str:
        return '"' + value.translate(_DOUBLE_QUOTE_TABLE) + '"'

    def unquote(self, quoted: str) -> str:
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
            escaped = False
            if ch == "\\":
                escaped = True
                i += 1
                if i >= n:
                    raise unterminated_escape_error(quoted)
                ch = quoted[i]
            if ch in DOUBLE_QUOTE_SPECIALS:
                if not escaped:
                    raise unescaped_error(quoted, i)
            elif escaped:
                out.append("\\")
            out.append(ch)
            i += 1
        if in_quote:
            raise unterminated_string_error(quoted)
        return "".join(out)


SINGLE_QUOTE: Final[SingleQuoting] = SingleQuoting()
DOUBLE_QUOTE: Final[DoubleQuoting] = DoubleQuoting()
