# topmark:header:start
#
#   project      : CmdQuote
#   file         : cmd.py
#   file_relpath : src/cmdquote/windows/cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Caret escaping for the Windows command interpreter (``cmd.exe``).

See https://docs.microsoft.com/en-us/archive/blogs/twistylittlepassagesallalike/everyone-quotes-command-line-arguments-the-wrong-way.

There are no delimiters: every special character is prefixed with ``^``. For
example, the value::

    a b:"c d" 'e''f'  "g\\""

is quoted as::

    a^ b:^"c^ d^"^ ^'e^'^'f^'^ ^ ^"g\\^"^"
"""

from __future__ import annotations

from typing import Final

from cmdquote.core.text import contains_any

ESCAPE_CHAR: Final[str] = "^"

UNSAFE_CHARS: Final[frozenset[str]] = frozenset("\t !\"&'+,;<=>[]^`{}~")

_QUOTE_TABLE: Final[dict[int, str]] = {ord(c): ESCAPE_CHAR + c for c in UNSAFE_CHARS}


class CmdQuoting:
    """Escape characters special to ``cmd.exe`` with a caret."""

    def must_quote(self, value: str) -> bool:
        return contains_any(value, UNSAFE_CHARS)

    def quote(self, value: str) -> str:
        return value.translate(_QUOTE_TABLE)

    def unquote(self, quoted: str) -> str:
        """Drop the caret in front of every special character.

        Never raises: a caret before any other character is kept, as ``cmd.exe``
        treats it as a no-op there.
        """
        out: list[str] = []
        i = 0
        n = len(quoted)
        while i < n:
            ch = quoted[i]
            if ch == ESCAPE_CHAR and i + 1 < n and quoted[i + 1] in UNSAFE_CHARS:
                out.append(quoted[i + 1])
                i += 2
                continue
            out.append(ch)
            i += 1
        return "".join(out)


CMD: Final[CmdQuoting] = CmdQuoting()
