# topmark:header:start
#
#   project      : LicenseMark
#   file         : lint.py
#   file_relpath : src/licensemark/cli/commands/lint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``licensemark lint``: check files for the license header.

Examples:
  Check a single file:

    $ licensemark --config licensemark.toml lint src/main.rs

  Check every tracked Rust file, silently, in CI:

    $ git ls-files '*.rs' | xargs licensemark --config licensemark.toml lint -q
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licensemark.api import lint_paths
from licensemark.cli.options import (
    CONTEXT_SETTINGS,
    common_paths_argument,
    common_quiet_option,
    get_config,
)
from licensemark.cli.utils import exit_for, report_errors
from licensemark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from licensemark.cli.console import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="lint",
    help="Check for the license header in each file.",
    context_settings=CONTEXT_SETTINGS,
)
@common_quiet_option
@common_paths_argument
def lint_command(*, quiet: bool, paths: tuple[Path, ...]) -> None:
    """Check each path for a compliant header.

    Nothing is printed for compliant files. Each failing file is reported on
    stderr (unless ``--quiet``) and the remaining paths are still checked.

    Args:
        quiet (bool): Suppress error output.
        paths (tuple[Path, ...]): Files to check.

    Exit Status:
        SUCCESS (0): Every file carries a compliant header.
        FAILURE (1): At least one file does not.
        CONFIG_ERROR (78): The configuration cannot be loaded.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.find_root().obj["console"]
    config = get_config(ctx)

    run = lint_paths(config, paths)
    logger.debug("lint: %d file(s), %d error(s)", len(run.files), len(run.errors))

    report_errors(console, run, quiet=quiet)
    exit_for(ctx, run)
