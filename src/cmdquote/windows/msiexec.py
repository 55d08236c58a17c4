# topmark:header:start
#
#   project      : CmdQuote
#   file         : msiexec.py
#   file_relpath : src/cmdquote/windows/msiexec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property value quoting for the Windows Installer (``msiexec.exe``).

See https://docs.microsoft.com/en-us/windows/win32/msi/command-line-options.

Values are wrapped in double quotes and a literal ``"`` is doubled. For example,
the value::

    a"b c

is quoted as::

    "a""b c"
"""

from __future__ import annotations

from typing import Final

from cmdquote.core.text import contains_any, outside_error, unterminated_string_error
from cmdquote.windows.argv import UNSAFE_CHARS


def quote_doubled(value: str, delim: str) -> str:
    """Wrap ``value`` in ``delim``, doubling every literal ``delim``."""
    return delim + value.replace(delim, delim * 2) + delim


def unquote_doubled(quoted: str, delim: str) -> str:
    """Undo `quote_doubled`, allowing adjacent quoted segments.

    Raises:
        QuoteSyntaxError: On characters outside quotes or an unterminated quote.
    """
    out: list[str] = []
    in_quote = False
    i = 0
    n = len(quoted)
    while i < n:
        ch = quoted[i]
        if ch == delim:
            if not in_quote:
                in_quote = True
            elif i + 1 < n and quoted[i + 1] == delim:
                out.append(delim)
                i += 1
            else:
                in_quote = False
        elif not in_quote:
            raise outside_error(quoted, i)
        else:
            out.append(ch)
        i += 1
    if in_quote:
        raise unterminated_string_error(quoted)
    return "".join(out)


class MsiexecQuoting:
    """Surround values with double quotes (``"..."``), doubling inner quotes."""

    def must_quote(self, value: str) -> bool:
        return contains_any(value, UNSAFE_CHARS)

    def quote(self, value: str) -> str:
        return quote_doubled(value, '"')

    def unquote(self, quoted: str) -> str:
        return unquote_doubled(quoted, '"')


MSIEXEC: Final[MsiexecQuoting] = MsiexecQuoting()
