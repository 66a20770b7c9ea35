# topmark:header:start
#
#   project      : LicenseMark
#   file         : utils.py
#   file_relpath : src/licensemark/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output helpers shared by the CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licensemark.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from licensemark.api import RunResult
    from licensemark.cli.console import ConsoleLike


def report_errors(console: ConsoleLike, run: RunResult, *, quiet: bool) -> None:
    """Print one ``Error in <path>`` block per failed file to stderr (unless quiet)."""
    if quiet:
        return
    for r in run.errors:
        console.error(f"Error in {r.path}")
        console.error(str(r.error))


def exit_for(ctx: click.Context, run: RunResult) -> None:
    """Exit with FAILURE if any file failed; return normally otherwise."""
    if run.had_errors:
        ctx.exit(ExitCode.FAILURE)
