# topmark:header:start
#
#   project      : CmdQuote
#   file         : registry.py
#   file_relpath : src/cmdquote/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of the built-in quoting schemes.

Each scheme is identified by a `Scheme` member (a stable, serializable key) and
bound to a stateless codec object. The registry is read-only: the bindings are
constant tables built at import time.

Typical usage:
    ```python
    from cmdquote.registry import Scheme, SchemeRegistry

    codec = SchemeRegistry.get("pwsh")  # alias of Scheme.PWSH_DOUBLE
    codec.quote("a b")

    for meta in SchemeRegistry.iter_meta():
        print(meta.key, meta.label, meta.binary)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from cmdquote.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum
from cmdquote.core.errors import UnknownSchemeError
from cmdquote.core.protocols import BinaryQuoting
from cmdquote.unix import ANSI_C, DOUBLE_QUOTE, SINGLE_QUOTE
from cmdquote.windows import ARGV, CMD, MSIEXEC, PS_DOUBLE_QUOTE, PS_SINGLE_QUOTE, PWSH_DOUBLE_QUOTE

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from cmdquote.core.protocols import Quoting


class Scheme(EnumIntrospectionMixin, KeyedStrEnum):
    """Identifiers of the built-in quoting schemes."""

    SH_SINGLE = ("sh-single", "POSIX shell, single quotes", ("posix", "sh", "single"))
    SH_DOUBLE = ("sh-double", "POSIX shell, double quotes", ("double",))
    ANSI_C = ("ansi-c", "Bash/Zsh ANSI-C quoting ($'...')", ("ansic", "bash", "zsh"))
    ARGV = ("argv", "Windows CommandLineToArgvW", ("windows", "win32"))
    CMD = ("cmd", "Windows cmd.exe caret escaping", ("cmd.exe",))
    MSIEXEC = ("msiexec", "Windows Installer (msiexec.exe)", ("msi", "msiexec.exe"))
    PS_SINGLE = ("ps-single", "PowerShell, single quotes", ("powershell-single",))
    PS_DOUBLE = ("ps-double", "Windows PowerShell, double quotes", ("powershell", "powershell.exe"))
    PWSH_DOUBLE = ("pwsh-double", "PowerShell Core, double quotes", ("pwsh", "pwsh.exe"))


class SchemeFamily(Enum):
    """Platform family a scheme belongs to."""

    UNIX = "unix"
    WINDOWS = "windows"


@dataclass(frozen=True)
class SchemeMeta:
    """Serializable metadata describing a registered scheme.

    Attributes:
        key: Stable scheme key (``Scheme.value``).
        label: Human-readable label.
        family: Platform family.
        binary: Whether the scheme can quote raw bytes.
        aliases: Alternative tokens accepted by `Scheme.parse`.
        unsafe: Description of the characters that force quoting.
    """

    key: str
    label: str
    family: SchemeFamily
    binary: bool
    aliases: tuple[str, ...]
    unsafe: str

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        return {
            "key": self.key,
            "label": self.label,
            "family": self.family.value,
            "binary": self.binary,
            "aliases": list(self.aliases),
            "unsafe": self.unsafe,
        }


_BINDINGS: Final[dict[Scheme, Quoting]] = {
    Scheme.SH_SINGLE: SINGLE_QUOTE,
    Scheme.SH_DOUBLE: DOUBLE_QUOTE,
    Scheme.ANSI_C: ANSI_C,
    Scheme.ARGV: ARGV,
    Scheme.CMD: CMD,
    Scheme.MSIEXEC: MSIEXEC,
    Scheme.PS_SINGLE: PS_SINGLE_QUOTE,
    Scheme.PS_DOUBLE: PS_DOUBLE_QUOTE,
    Scheme.PWSH_DOUBLE: PWSH_DOUBLE_QUOTE,
}

_UNIX_SCHEMES: Final[frozenset[Scheme]] = frozenset({Scheme.SH_SINGLE, Scheme.SH_DOUBLE, Scheme.ANSI_C})

_UNIX_UNSAFE: Final[str] = "controls, space to $, & ' ( ) * ; < = > ? [ ] ^ ` { | } ~, DEL, NBSP"
_ARGV_UNSAFE: Final[str] = "tab, space, \""
_PS_UNSAFE: Final[str] = "tab, space, \" $ ' `"

_UNSAFE_DESCRIPTIONS: Final[dict[Scheme, str]] = {
    Scheme.SH_SINGLE: _UNIX_UNSAFE,
    Scheme.SH_DOUBLE: _UNIX_UNSAFE,
    Scheme.ANSI_C: _UNIX_UNSAFE,
    Scheme.ARGV: _ARGV_UNSAFE,
    Scheme.CMD: "tab, space, ! \" & ' + , ; < = > [ ] ^ ` { } ~",
    Scheme.MSIEXEC: _ARGV_UNSAFE,
    Scheme.PS_SINGLE: _PS_UNSAFE,
    Scheme.PS_DOUBLE: _PS_UNSAFE,
    Scheme.PWSH_DOUBLE: _PS_UNSAFE,
}


def resolve_scheme(scheme: Scheme | str) -> Scheme:
    """Return the `Scheme` named by ``scheme``.

    Args:
        scheme (Scheme | str): A member, key, member name or alias.

    Returns:
        Scheme: The resolved member.

    Raises:
        UnknownSchemeError: If the token names no scheme.
    """
    if isinstance(scheme, Scheme):
        return scheme
    resolved: Scheme | None = Scheme.parse(scheme)
    if resolved is None:
        raise UnknownSchemeError(scheme)
    return resolved


class SchemeRegistry:
    """Read-only access to the scheme bindings."""

    @staticmethod
    def get(scheme: Scheme | str) -> Quoting:
        """Return the codec bound to ``scheme``.

        Raises:
            UnknownSchemeError: If the token names no scheme.
        """
        return _BINDINGS[resolve_scheme(scheme)]

    @staticmethod
    def is_binary(scheme: Scheme | str) -> bool:
        """Return True if ``scheme`` also implements `BinaryQuoting`."""
        return isinstance(SchemeRegistry.get(scheme), BinaryQuoting)

    @staticmethod
    def names() -> tuple[str, ...]:
        """Return the stable keys of all schemes, in declaration order."""
        return tuple(s.key for s in Scheme)

    @staticmethod
    def as_mapping() -> Mapping[Scheme, Quoting]:
        """Return a **read-only** mapping of schemes to codecs."""
        return MappingProxyType(_BINDINGS)

    @staticmethod
    def meta(scheme: Scheme | str) -> SchemeMeta:
        """Return the metadata of a single scheme."""
        member = resolve_scheme(scheme)
        return SchemeMeta(
            key=member.key,
            label=member.label,
            family=SchemeFamily.UNIX if member in _UNIX_SCHEMES else SchemeFamily.WINDOWS,
            binary=SchemeRegistry.is_binary(member),
            aliases=member.aliases,
            unsafe=_UNSAFE_DESCRIPTIONS[member],
        )

    @staticmethod
    def iter_meta() -> Iterator[SchemeMeta]:
        """Iterate metadata for all schemes, in declaration order.

        Yields:
            SchemeMeta: Metadata of the next scheme.
        """
        for member in Scheme:
            yield SchemeRegistry.meta(member)
