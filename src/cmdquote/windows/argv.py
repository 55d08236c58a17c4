# topmark:header:start
#
#   project      : CmdQuote
#   file         : argv.py
#   file_relpath : src/cmdquote/windows/argv.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Windows argv quoting as parsed by ``CommandLineToArgvW``.

See https://docs.microsoft.com/en-us/cpp/c-language/parsing-c-command-line-arguments.

Backslashes are literal unless they precede a double quote: ``2n`` backslashes
followed by ``"`` yield ``n`` backslashes and a delimiter, ``2n+1`` backslashes
followed by ``"`` yield ``n`` backslashes and a literal ``"``.

For example, the value::

    a b:"c d" 'e''f'  "g\\""

is quoted as::

    "a b:\\"c d\\" 'e''f'  \\"g\\\\\\"\\""
"""

from __future__ import annotations

from typing import Final

from cmdquote.core.text import contains_any, outside_error, unterminated_string_error

UNSAFE_CHARS: Final[frozenset[str]] = frozenset('\t "')


class ArgvQuoting:
    """Surround values with double quotes (``"..."``) for ``CommandLineToArgvW``."""

    def must_quote(self, value: str) -> bool:
        return contains_any(value, UNSAFE_CHARS)

    def quote(self, value: str) -> str:
        out: list[str] = ['"']
        slashes = 0
        for ch in value:
            if ch == '"':
                # Double the pending run and escape the quote itself.
                out.append("\\" * (slashes + 1))
                slashes = 0
            elif ch == "\\":
                slashes += 1
            else:
                slashes = 0
            out.append(ch)
        # The closing quote must not be escaped by a trailing run.
        out.append("\\" * slashes)
        out.append('"')
        return "".join(out)

    def unquote(self, quoted: str) -> str:
        out: list[str] = []
        in_quote = False
        slashes = 0
        for i, ch in enumerate(quoted):
            if ch == '"':
                out.append("\\" * (slashes // 2))
                if slashes % 2:
                    out.append('"')
                else:
                    in_quote = not in_quote
                slashes = 0
            elif not in_quote:
                raise outside_error(quoted, i)
            elif ch == "\\":
                slashes += 1
            else:
                out.append("\\" * slashes)
                slashes = 0
                out.append(ch)
        if in_quote:
            raise unterminated_string_error(quoted)
        return "".join(out)


ARGV: Final[ArgvQuoting] = ArgvQuoting()
