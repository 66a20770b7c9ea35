# topmark:header:start
#
#   project      : LicenseMark
#   file         : options.py
#   file_relpath : src/licensemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and context helpers shared by the subcommands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from licensemark.cli.errors import LicensemarkConfigError
from licensemark.config.io import load_config
from licensemark.config.logging import get_logger
from licensemark.config.model import Config
from licensemark.core.errors import ConfigError

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)

#: Click context settings shared by the group and its subcommands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_quiet_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``-q/--quiet`` flag to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "-q",
        "--quiet",
        is_flag=True,
        help="Suppress diagnostics (errors are still reflected in the exit status).",
    )(f)


def common_paths_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the required ``PATHS...`` argument to a command."""
    return click.argument(
        "paths",
        nargs=-1,
        required=True,
        type=click.Path(dir_okay=False, path_type=Path),
    )(f)


def get_config(ctx: click.Context) -> Config:
    """Load (once) and return the configuration named by the group's ``--config``.

    Args:
        ctx (click.Context): The current command context.

    Returns:
        Config: The loaded configuration, cached on the root context object.

    Raises:
        LicensemarkConfigError: If the config cannot be read or parsed.
    """
    obj: dict[str, object] = ctx.find_root().ensure_object(dict)
    config = obj.get("config")
    if isinstance(config, Config):
        return config

    config_path = obj.get("config_path")
    assert isinstance(config_path, Path), "config_path not set by the CLI group"
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise LicensemarkConfigError(str(e)) from e
    obj["config"] = config
    logger.trace("Config: %s", config)
    return config
