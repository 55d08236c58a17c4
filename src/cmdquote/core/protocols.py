# topmark:header:start
#
#   project      : CmdQuote
#   file         : protocols.py
#   file_relpath : src/cmdquote/core/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability protocols implemented by the quoting schemes.

Schemes are small stateless objects. They do not inherit from these protocols;
conformance is structural, and `isinstance` works because both protocols are
``runtime_checkable``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Quoting(Protocol):
    """Quote and unquote textual command-line arguments and variables."""

    def must_quote(self, value: str) -> bool:
        """Report whether ``value`` must be quoted to appear as a single argument.

        Args:
            value (str): Raw value.

        Returns:
            bool: True if ``value`` contains a character outside the scheme's safe set.
        """
        ...

    def quote(self, value: str) -> str:
        """Return ``value`` quoted so that it appears as a single argument.

        Args:
            value (str): Raw value.

        Returns:
            str: The quoted value.
        """
        ...

    def unquote(self, quoted: str) -> str:
        """Interpret ``quoted`` and return the value it quotes.

        Args:
            quoted (str): Quoted value.

        Returns:
            str: The raw value.

        Raises:
            QuoteSyntaxError: If ``quoted`` is not well-formed.
        """
        ...


@runtime_checkable
class BinaryQuoting(Quoting, Protocol):
    """Quote and unquote binary command-line arguments and variables."""

    def quote_binary(self, value: bytes) -> str:
        """Return the bytes ``value`` quoted so that it appears as a single argument.

        Args:
            value (bytes): Raw bytes.

        Returns:
            str: The quoted value.
        """
        ...

    def unquote_binary(self, quoted: str) -> bytes:
        """Interpret ``quoted`` and return the bytes it quotes.

        Args:
            quoted (str): Quoted value.

        Returns:
            bytes: The raw bytes.

        Raises:
            QuoteSyntaxError: If ``quoted`` is not well-formed.
        """
        ...
