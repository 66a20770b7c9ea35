# topmark:header:start
#
#   project      : LicenseMark
#   file         : format.py
#   file_relpath : src/licensemark/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``licensemark format``: insert the license header.

By default the fully assembled content of the single PATH is printed to stdout and
the file itself is left untouched; redirect to a new file to keep it. With
``--in-place`` every PATH lacking a header is rewritten instead.

Examples:
  Preview the formatted file:

    $ licensemark --config licensemark.toml format src/main.rs

  Add headers to several files, naming the author explicitly:

    $ licensemark --config licensemark.toml format --in-place --author "Jane Doe" src/*.rs
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licensemark.api import Outcome, format_paths
from licensemark.authors import GitBlameAuthorResolver, StaticAuthorResolver
from licensemark.cli.errors import LicensemarkUsageError
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

    from licensemark.authors import AuthorResolver
    from licensemark.cli.console import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="format",
    help="Insert a license header in each file.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Without --in-place the new content of the single PATH is printed to stdout.
""",
)
@common_quiet_option
@click.option(
    "--in-place",
    "in_place",
    is_flag=True,
    help="Rewrite the files instead of printing the new content.",
)
@click.option(
    "--author",
    type=str,
    default=None,
    help="Author name for {author} (default: the top contributor per git blame).",
)
@common_paths_argument
def format_command(
    *,
    quiet: bool,
    in_place: bool,
    author: str | None,
    paths: tuple[Path, ...],
) -> None:
    """Insert the configured header where it is missing.

    Args:
        quiet (bool): Suppress error output and progress messages.
        in_place (bool): Write the new content back to each file.
        author (str | None): Fixed author name; git blame is used when omitted.
        paths (tuple[Path, ...]): Files to format.

    Raises:
        LicensemarkUsageError: If several paths are given without ``--in-place``.

    Exit Status:
        SUCCESS (0): Every file was formatted (or already compliant).
        FAILURE (1): At least one file could not be formatted.
        USAGE_ERROR (64): Invalid invocation.
        CONFIG_ERROR (78): The configuration cannot be loaded.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.find_root().obj["console"]

    if len(paths) > 1 and not in_place:
        raise LicensemarkUsageError(
            f"{ctx.command.name}: several paths require --in-place "
            "(the new content of a single file is printed to stdout)."
        )

    config = get_config(ctx)
    resolver: AuthorResolver = (
        StaticAuthorResolver(author) if author is not None else GitBlameAuthorResolver()
    )

    run = format_paths(config, paths, author_resolver=resolver, in_place=in_place)
    logger.debug("format: %d file(s), %d error(s)", len(run.files), len(run.errors))

    for r in run.files:
        if r.outcome is Outcome.ERROR or r.content is None:
            continue
        if not in_place:
            console.print(r.content, nl=False)
        elif r.outcome is Outcome.CHANGED and not quiet:
            console.print(console.styled(f"Added header to {r.path}", fg="green"))

    report_errors(console, run, quiet=quiet)
    exit_for(ctx, run)
