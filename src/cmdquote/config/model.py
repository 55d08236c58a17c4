# topmark:header:start
#
#   project      : CmdQuote
#   file         : model.py
#   file_relpath : src/cmdquote/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: immutable `Config` and its `MutableConfig` builder.

Merge order (lowest to highest precedence):
    1) Runtime defaults
    2) The nearest project config found walking up from the anchor directory
       (``cmdquote.toml``, else ``pyproject.toml`` with ``[tool.cmdquote]``)
    3) Extra config files passed explicitly via ``--config`` (in the order provided)
    4) CLI overrides

Invalid values never abort loading: they are recorded as warning diagnostics
and the previous layer's value is kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cmdquote.config.getters import (
    get_bool_value_or_none_checked,
    get_string_list_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value_checked,
)
from cmdquote.config.keys import Toml
from cmdquote.config.loaders import extract_config_table, load_defaults_dict, load_toml_dict
from cmdquote.config.logging import get_logger
from cmdquote.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from cmdquote.core.diagnostics import Diagnostic, DiagnosticLog, diagnostics_counts_to_dict
from cmdquote.registry import Scheme

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdquote.config.loaders import TomlTable
    from cmdquote.config.logging import CmdquoteLogger

logger: CmdquoteLogger = get_logger(__name__)

_KNOWN_QUOTING_KEYS: frozenset[str] = frozenset({Toml.KEY_SCHEME, Toml.KEY_LAYERS, Toml.KEY_IF_NEEDED})


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Produced by `MutableConfig.freeze`. Use `Config.thaw` to obtain a mutable
    builder for edits.

    Attributes:
        scheme (Scheme): Scheme used when no layers are configured.
        layers (tuple[Scheme, ...]): Schemes applied innermost first; when
            non-empty they replace ``scheme``.
        if_needed (bool): Leave values that need no quoting untouched.
        config_files (tuple[Path | str, ...]): Config sources merged, in order.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    scheme: Scheme
    layers: tuple[Scheme, ...]
    if_needed: bool
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def schemes(self) -> tuple[Scheme, ...]:
        """Effective scheme chain, innermost first."""
        return self.layers or (self.scheme,)

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration in TOML shape."""
        return {
            Toml.SECTION_QUOTING: {
                Toml.KEY_SCHEME: self.scheme.key,
                Toml.KEY_LAYERS: [s.key for s in self.layers],
                Toml.KEY_IF_NEEDED: self.if_needed,
            },
        }

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation including provenance."""
        return {
            "config": self.to_toml_dict(),
            "config_files": [str(p) for p in self.config_files],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "diagnostic_counts": diagnostics_counts_to_dict(self.diagnostics),
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            scheme=self.scheme,
            layers=list(self.layers),
            if_needed=self.if_needed,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "inherit from the previous layer".

    Attributes:
        scheme (Scheme | None): Scheme used when no layers are configured.
        layers (list[Scheme] | None): Scheme chain, innermost first.
        if_needed (bool | None): Leave values that need no quoting untouched.
        config_files (list[Path | str]): Config sources merged, in order.
        diagnostics (DiagnosticLog): Warnings collected while loading and merging.
    """

    scheme: Scheme | None = None
    layers: list[Scheme] | None = None
    if_needed: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable Config, filling unset values."""
        return Config(
            scheme=self.scheme or Scheme.SH_SINGLE,
            layers=tuple(self.layers or ()),
            if_needed=bool(self.if_needed),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        draft = cls()
        draft.merge_toml(load_defaults_dict(), source=None)
        return draft

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: Path | str | None) -> MutableConfig:
        """Return a builder holding only the values set in ``table``."""
        draft = cls()
        draft.merge_toml(table, source=source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``cmdquote.toml`` and ``pyproject.toml`` (its
        ``[tool.cmdquote]`` section).

        An unreadable or malformed file yields a draft that sets nothing and
        carries an error diagnostic.

        Returns:
            MutableConfig | None: The draft, or None if a readable pyproject has
                no ``[tool.cmdquote]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        errors = DiagnosticLog()
        table: TomlTable | None = extract_config_table(path, load_toml_dict(path, diagnostics=errors))
        if table is None and not errors:
            return None
        draft = cls(diagnostics=errors)
        draft.merge_toml(table or {}, source=path)
        return draft

    def merge_toml(self, table: TomlTable, *, source: Path | str | None) -> None:
        """Merge a configuration table into this builder in place.

        Args:
            table (TomlTable): Table in the shape of ``cmdquote.toml``.
            source (Path | str | None): Where ``table`` came from; recorded in
                ``config_files`` unless None (runtime defaults).
        """
        if source is not None:
            self.config_files.append(source)
        origin: str = f" ({source})" if source is not None else ""

        for key in table:
            if key != Toml.SECTION_QUOTING:
                logger.warning("Unknown configuration section [%s]%s", key, origin)
                self.diagnostics.add_warning(f"Unknown configuration section [{key}]{origin}")

        quoting: TomlTable = get_table_value_checked(
            table, Toml.SECTION_QUOTING, diagnostics=self.diagnostics, logger=logger
        )
        where: str = Toml.SECTION_QUOTING
        for key in quoting:
            if key not in _KNOWN_QUOTING_KEYS:
                logger.warning("Unknown key %s.%s%s", where, key, origin)
                self.diagnostics.add_warning(f"Unknown key {where}.{key}{origin}")

        raw_scheme: str | None = get_string_value_or_none_checked(
            quoting, Toml.KEY_SCHEME, where=where, diagnostics=self.diagnostics, logger=logger
        )
        if raw_scheme is not None:
            scheme: Scheme | None = self._parse_scheme(raw_scheme, f"{where}.{Toml.KEY_SCHEME}", origin)
            if scheme is not None:
                self.scheme = scheme

        raw_layers: list[str] | None = get_string_list_or_none_checked(
            quoting, Toml.KEY_LAYERS, where=where, diagnostics=self.diagnostics, logger=logger
        )
        if raw_layers is not None:
            layers: list[Scheme] = []
            for token in raw_layers:
                parsed: Scheme | None = self._parse_scheme(token, f"{where}.{Toml.KEY_LAYERS}", origin)
                if parsed is not None:
                    layers.append(parsed)
            self.layers = layers

        if_needed: bool | None = get_bool_value_or_none_checked(
            quoting, Toml.KEY_IF_NEEDED, where=where, diagnostics=self.diagnostics, logger=logger
        )
        if if_needed is not None:
            self.if_needed = if_needed

    def _parse_scheme(self, token: str, loc: str, origin: str) -> Scheme | None:
        scheme: Scheme | None = Scheme.parse(token)
        if scheme is None:
            logger.warning("Unknown quoting scheme %r in %s%s", token, loc, origin)
            self.diagnostics.add_warning(f"Unknown quoting scheme {token!r} in {loc}{origin}")
        return scheme

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the nearest project config file at or above ``start``.

        In each directory ``cmdquote.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` only counts when it has a ``[tool.cmdquote]`` section.
        """
        anchor: Path = start.resolve()
        for directory in (anchor, *anchor.parents):
            candidate: Path = directory / CONFIG_FILE_NAME
            if candidate.is_file():
                logger.debug("Discovered config file: %s", candidate)
                return candidate
            pyproject: Path = directory / PYPROJECT_FILE_NAME
            if pyproject.is_file() and extract_config_table(pyproject, load_toml_dict(pyproject)):
                logger.debug("Discovered config file: %s", pyproject)
                return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Directory where discovery starts (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit config files
                merged **after** discovery, in their given order.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            discovered: Path | None = cls.discover_config_file(anchor or Path.cwd())
            if discovered is not None:
                mc: MutableConfig | None = cls.from_toml_file(discovered)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            path = Path(extra)
            mc = cls.from_toml_file(path)
            if mc is None:
                draft.diagnostics.add_warning(f"No [tool.cmdquote] section in {path}")
                continue
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            scheme=other.scheme if other.scheme is not None else self.scheme,
            layers=list(other.layers) if other.layers is not None else self.layers,
            if_needed=other.if_needed if other.if_needed is not None else self.if_needed,
            config_files=[*self.config_files, *other.config_files],
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )

    def apply_overrides(
        self,
        *,
        scheme: Scheme | None = None,
        layers: Iterable[Scheme] | None = None,
        if_needed: bool | None = None,
    ) -> MutableConfig:
        """Apply CLI overrides in place and return ``self``.

        An explicit ``scheme`` without ``layers`` selects that single scheme and
        drops any configured layers.
        """
        layer_list: list[Scheme] = list(layers or ())
        if layer_list:
            self.layers = layer_list
        elif scheme is not None:
            self.layers = []
        if scheme is not None:
            self.scheme = scheme
        if if_needed is not None:
            self.if_needed = if_needed
        return self
