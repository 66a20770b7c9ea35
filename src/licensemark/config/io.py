# topmark:header:start
#
#   project      : LicenseMark
#   file         : io.py
#   file_relpath : src/licensemark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load the LicenseMark TOML configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures, which
[`Config.from_dict`][licensemark.config.model.Config.from_dict] validates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from licensemark.config.logging import get_logger
from licensemark.config.model import Config
from licensemark.core.errors import ConfigParseError, ConfigReadError

if TYPE_CHECKING:
    from pathlib import Path

    from licensemark.config.logging import LicensemarkLogger

TomlTable = dict[str, Any]

logger: LicensemarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigReadError: If the file cannot be read or decoded as UTF-8.
        ConfigParseError: If the file is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigReadError(path, f"cannot read the config file: {e}") from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigParseError(path, f"invalid toml: {e}") from e

    data: Any = doc.unwrap()
    logger.trace("Loaded TOML from %s: %s", path, data)
    return data


def load_config(path: Path) -> Config:
    """Read, parse and validate the configuration file at ``path``.

    Args:
        path (Path): Path to the TOML configuration file.

    Returns:
        Config: The immutable runtime configuration.

    Raises:
        ConfigReadError: If the file cannot be read.
        ConfigParseError: If the file is not valid TOML or does not fit the schema.
    """
    config = Config.from_dict(load_toml_dict(path), source=path)
    logger.debug(
        "Config from %s: %d language(s), %d template line(s)",
        path,
        len(config.langs),
        len(config.template.splitlines()),
    )
    return config
