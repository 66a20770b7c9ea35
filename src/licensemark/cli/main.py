# topmark:header:start
#
#   project      : LicenseMark
#   file         : main.py
#   file_relpath : src/licensemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseMark Click CLI.

Group-level options (``--config``, ``--no-color``) are initialized once and placed
into ``ctx.obj``. The configuration itself is loaded lazily by the subcommands
(see [`get_config`][licensemark.cli.options.get_config]) so ``--help`` works even
when the config file is missing.
"""

from __future__ import annotations

from pathlib import Path

import click

from licensemark.cli.commands.format import format_command
from licensemark.cli.commands.lint import lint_command
from licensemark.cli.console import ClickConsole
from licensemark.cli.options import CONTEXT_SETTINGS
from licensemark.config.logging import get_logger, resolve_env_log_level, setup_logging
from licensemark.constants import LICENSEMARK_VERSION

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, config_path: Path, no_color: bool) -> None:
    """Initialize shared state (logging, console, config path) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        config_path (Path): Path given to ``--config``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # Internal logging is configured via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["console"] = ClickConsole(enable_color=False if no_color else None)
    ctx.obj["config_path"] = config_path
    logger.debug("Config path: %s", config_path)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    help="License Checker: verify and insert license headers.",
)
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="A path to the config TOML.",
)
@click.option("--no-color", "no_color", is_flag=True, help="Disable colored output.")
@click.version_option(LICENSEMARK_VERSION, prog_name="licensemark")
@click.pass_context
def cli(ctx: click.Context, config_path: Path, no_color: bool) -> None:
    """Entry point for the LicenseMark CLI."""
    init_common_state(ctx, config_path=config_path, no_color=no_color)


cli.add_command(lint_command)

cli.add_command(format_command)

if __name__ == "__main__":
    cli()
