# topmark:header:start
#
#   project      : CmdQuote
#   file         : errors.py
#   file_relpath : src/cmdquote/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for CmdQuote.

Usage:
    `QuoteSyntaxError` is the single error kind raised by every ``unquote`` /
    ``unquote_binary`` implementation. Quoting itself never fails.

    ```python
    from cmdquote import QuoteSyntaxError, unquote

    try:
        unquote("'a", "sh-single")
    except QuoteSyntaxError as exc:
        print(exc.msg, exc.offset)  # unterminated quoted string 2
    ```
"""

from __future__ import annotations


class QuoteSyntaxError(ValueError):
    """A quoted value is not a well-formed instance of a scheme's grammar.

    Attributes:
        msg (str): Description of the violated grammar rule.
        offset (int): Number of UTF-8 bytes of the quoted value consumed when the
            error was detected (1-based; equals the byte length of the input for
            "unterminated" errors).
    """

    msg: str
    offset: int

    def __init__(self, msg: str, offset: int) -> None:
        super().__init__(msg, offset)
        self.msg = msg
        self.offset = offset

    def __str__(self) -> str:
        return f"syntax error: {self.msg}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(msg={self.msg!r}, offset={self.offset})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuoteSyntaxError):
            return NotImplemented
        return (self.msg, self.offset) == (other.msg, other.offset)

    def __hash__(self) -> int:
        return hash((self.msg, self.offset))


class UnknownSchemeError(KeyError):
    """Raised when a scheme token does not name a registered quoting scheme."""

    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"unknown quoting scheme: {self.token!r}"


class UnsupportedCapabilityError(TypeError):
    """Raised when a binary operation is requested from a text-only scheme."""
