# topmark:header:start
#
#   project      : LicenseMark
#   file         : model.py
#   file_relpath : src/licensemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model.

This module defines:
    - `LangRule`: the extensions and line-comment prefix of one language.
    - `Config`: an immutable runtime snapshot holding the header template, the two
      blank-line layout flags, and the language table.

Extension lookup:
    The language table is indexed by extension when the `Config` is created.
    Extensions must be unique across languages, so resolving a file's comment
    prefix is a single deterministic dictionary lookup.

Scope:
    - *In scope*: data shapes, schema validation of plain dicts (`Config.from_dict`).
    - *Out of scope*: TOML I/O, which lives in [`licensemark.config.io`][licensemark.config.io].
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from licensemark.config.keys import Toml
from licensemark.config.logging import get_logger
from licensemark.core.errors import ConfigParseError, UnsupportedExtensionError

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LangRule:
    """Comment rule for one language.

    Attributes:
        extensions (tuple[str, ...]): File extensions without the leading dot.
        comment (str): Line-comment prefix, e.g. ``//`` or ``#``.
    """

    extensions: tuple[str, ...]
    comment: str


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        template (str): Header template; may span several lines and contain the
            ``{author}`` and ``{year}`` placeholders.
        newline_after_shebang (bool): Require a blank line between a shebang and the header.
        newline_after_template (bool): Require a blank line after the header.
        langs (Mapping[str, LangRule]): Language name to rule, in declaration order.
        source (Path | None): The file this config was loaded from, if any.
    """

    template: str
    newline_after_shebang: bool = False
    newline_after_template: bool = False
    langs: Mapping[str, LangRule] = field(default_factory=dict)
    source: Path | None = None

    _by_extension: Mapping[str, LangRule] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, LangRule] = {}
        owner: dict[str, str] = {}
        for name, rule in self.langs.items():
            for ext in rule.extensions:
                if ext in index:
                    raise ConfigParseError(
                        self.source,
                        f"extension {ext!r} is declared by both {owner[ext]!r} and {name!r}",
                    )
                index[ext] = rule
                owner[ext] = name
        object.__setattr__(self, "langs", MappingProxyType(dict(self.langs)))
        object.__setattr__(self, "_by_extension", MappingProxyType(index))

    def rule_for(self, path: Path) -> LangRule:
        """Return the language rule for ``path``'s extension.

        Args:
            path (Path): The file whose extension is looked up.

        Returns:
            LangRule: The rule declaring the extension.

        Raises:
            UnsupportedExtensionError: If no language declares the extension
                (including files without an extension).
        """
        ext = path.suffix[1:]
        rule = self._by_extension.get(ext)
        if rule is None:
            raise UnsupportedExtensionError(path, ext)
        return rule

    def comment_for(self, path: Path) -> str:
        """Return the line-comment prefix for ``path`` (see `rule_for`)."""
        return self.rule_for(path).comment

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: Path | None = None) -> Config:
        """Build a `Config` from a plain (TOML-derived) mapping.

        Args:
            data (Mapping[str, Any]): Top-level table: ``template``, the two layout
                flags, and one table per language.
            source (Path | None): Origin of ``data``, used in error messages.

        Returns:
            Config: The validated configuration.

        Raises:
            ConfigParseError: If a key is missing or has the wrong type, or if an
                extension is declared twice.
        """
        template = data.get(Toml.KEY_TEMPLATE)
        if not isinstance(template, str):
            raise ConfigParseError(source, f"'{Toml.KEY_TEMPLATE}' must be a string")

        flags: dict[str, bool] = {}
        for key in (Toml.KEY_NEWLINE_AFTER_SHEBANG, Toml.KEY_NEWLINE_AFTER_TEMPLATE):
            value = data.get(key, False)
            if not isinstance(value, bool):
                raise ConfigParseError(source, f"'{key}' must be a boolean")
            flags[key] = value

        langs: dict[str, LangRule] = {}
        for name, table in data.items():
            if name in Toml.RESERVED_KEYS:
                continue
            langs[name] = _lang_rule_from_table(name, table, source=source)

        if not langs:
            logger.warning("No language tables declared in %s", source or "config")

        return cls(
            template=template,
            newline_after_shebang=flags[Toml.KEY_NEWLINE_AFTER_SHEBANG],
            newline_after_template=flags[Toml.KEY_NEWLINE_AFTER_TEMPLATE],
            langs=langs,
            source=source,
        )


def _lang_rule_from_table(name: str, table: Any, *, source: Path | None) -> LangRule:
    if not isinstance(table, Mapping):
        raise ConfigParseError(source, f"'{name}' must be a table with extensions and comment")

    extensions = table.get(Toml.KEY_EXTENSIONS)
    if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
        raise ConfigParseError(source, f"'{name}.{Toml.KEY_EXTENSIONS}' must be a list of strings")

    comment = table.get(Toml.KEY_COMMENT)
    if not isinstance(comment, str) or not comment:
        raise ConfigParseError(source, f"'{name}.{Toml.KEY_COMMENT}' must be a non-empty string")

    unknown = set(table) - {Toml.KEY_EXTENSIONS, Toml.KEY_COMMENT}
    if unknown:
        logger.warning("Ignoring unknown keys in [%s]: %s", name, ", ".join(sorted(unknown)))

    return LangRule(
        extensions=tuple(ext.removeprefix(".") for ext in extensions),
        comment=comment,
    )
