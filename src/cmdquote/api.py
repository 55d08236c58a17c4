# topmark:header:start
#
#   project      : CmdQuote
#   file         : api.py
#   file_relpath : src/cmdquote/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public CmdQuote API (stable surface).

Thin, typed functions over the scheme registry. Every function accepts the
scheme either as a [`Scheme`][cmdquote.registry.Scheme] member or as a string
token (key, member name or alias, case-insensitive).

Versioning policy
-----------------
- The signatures in this module follow semver.
- Removing/renaming anything here is a breaking change (major release).

Notes:
-----
- All functions are pure; codecs hold no state and may be shared across threads.
- Unquoting is strict: malformed input raises
  [`QuoteSyntaxError`][cmdquote.core.errors.QuoteSyntaxError] carrying the byte
  offset of the offending construct.
- Layered quoting composes schemes for nested interpreters. The first scheme is
  applied first (the innermost interpreter) and each following scheme wraps the
  previous result:

```python
from cmdquote import api

outer = api.quote_layers("a b", ["argv", "cmd"])  # ^"a^ b^"
assert api.unquote_layers(outer, ["argv", "cmd"]) == "a b"
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdquote.config.logging import get_logger
from cmdquote.core.errors import UnsupportedCapabilityError
from cmdquote.core.protocols import BinaryQuoting
from cmdquote.registry import SchemeRegistry, resolve_scheme

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cmdquote.config.logging import CmdquoteLogger
    from cmdquote.core.protocols import Quoting
    from cmdquote.registry import Scheme

logger: CmdquoteLogger = get_logger(__name__)

__all__ = [
    "must_quote",
    "quote",
    "quote_binary",
    "quote_if_needed",
    "quote_layers",
    "unquote",
    "unquote_binary",
    "unquote_layers",
]


def must_quote(value: str, scheme: Scheme | str) -> bool:
    """Report whether ``value`` contains a character the scheme treats as special.

    Args:
        value (str): Raw value.
        scheme (Scheme | str): Target scheme.

    Returns:
        bool: True if the value cannot be passed verbatim.
    """
    return SchemeRegistry.get(scheme).must_quote(value)


def quote(value: str, scheme: Scheme | str) -> str:
    """Quote ``value`` for ``scheme``; always succeeds."""
    result: str = SchemeRegistry.get(scheme).quote(value)
    logger.trace("quote[%s] %r -> %r", scheme, value, result)
    return result


def unquote(quoted: str, scheme: Scheme | str) -> str:
    """Unquote ``quoted`` for ``scheme``.

    Raises:
        QuoteSyntaxError: If ``quoted`` is not a well-formed quoted value.
    """
    result: str = SchemeRegistry.get(scheme).unquote(quoted)
    logger.trace("unquote[%s] %r -> %r", scheme, quoted, result)
    return result


def quote_if_needed(value: str, scheme: Scheme | str) -> str:
    """Quote ``value`` only when it must be quoted.

    An empty value is always quoted: without delimiters it would vanish from
    the command line.
    """
    codec: Quoting = SchemeRegistry.get(scheme)
    if value and not codec.must_quote(value):
        return value
    return codec.quote(value)


def _binary_codec(scheme: Scheme | str) -> BinaryQuoting:
    codec: Quoting = SchemeRegistry.get(scheme)
    if not isinstance(codec, BinaryQuoting):
        raise UnsupportedCapabilityError(
            f"quoting scheme {resolve_scheme(scheme).key!r} cannot quote binary values"
        )
    return codec


def quote_binary(value: bytes, scheme: Scheme | str = "ansi-c") -> str:
    """Quote arbitrary bytes.

    Raises:
        UnsupportedCapabilityError: If ``scheme`` only handles text.
    """
    result: str = _binary_codec(scheme).quote_binary(value)
    logger.trace("quote_binary[%s] %r -> %r", scheme, value, result)
    return result


def unquote_binary(quoted: str, scheme: Scheme | str = "ansi-c") -> bytes:
    """Unquote to raw bytes.

    Raises:
        UnsupportedCapabilityError: If ``scheme`` only handles text.
        QuoteSyntaxError: If ``quoted`` is not a well-formed quoted value.
    """
    result: bytes = _binary_codec(scheme).unquote_binary(quoted)
    logger.trace("unquote_binary[%s] %r -> %r", scheme, quoted, result)
    return result


def quote_layers(value: str, schemes: Sequence[Scheme | str]) -> str:
    """Quote ``value`` once per scheme, innermost interpreter first.

    An empty ``schemes`` sequence returns ``value`` unchanged.
    """
    # Resolve every token before quoting so an unknown scheme fails early.
    codecs: list[Quoting] = [SchemeRegistry.get(s) for s in schemes]
    result: str = value
    for scheme, codec in zip(schemes, codecs):
        result = codec.quote(result)
        logger.trace("quote_layers[%s] -> %r", scheme, result)
    return result


def unquote_layers(quoted: str, schemes: Sequence[Scheme | str]) -> str:
    """Undo `quote_layers` by unquoting with ``schemes`` in reverse order.

    Raises:
        QuoteSyntaxError: If any layer is malformed; the offset refers to the
            value as seen by that layer.
    """
    codecs: list[Quoting] = [SchemeRegistry.get(s) for s in schemes]
    result: str = quoted
    for scheme, codec in zip(reversed(schemes), reversed(codecs)):
        result = codec.unquote(result)
        logger.trace("unquote_layers[%s] -> %r", scheme, result)
    return result
