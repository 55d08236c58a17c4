# topmark:header:start
#
#   project      : CmdQuote
#   file         : cli_types.py
#   file_relpath : src/cmdquote/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for CmdQuote commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from cmdquote.registry import Scheme

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", e.value) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", choice.value).lower(): choice for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_CMDQUOTE_COMPLETE=bash_source cmdquote)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(choice) for choice in self.choices if choice.lower().startswith(prefix)
        ]


class SchemeParam(EnumChoiceParam[Scheme]):
    """Click parameter type for quoting schemes; accepts keys, names and aliases."""

    def __init__(self) -> None:
        super().__init__(Scheme)
        self.name = "scheme"

    def convert(
        self,
        value: str | Scheme | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Scheme | None:
        """Resolve a scheme token via `Scheme.parse`."""
        if value is None or isinstance(value, Scheme):
            return value
        scheme: Scheme | None = Scheme.parse(value)
        if scheme is None:
            self._fail_noreturn(
                f"Unknown scheme '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return scheme
