# topmark:header:start
#
#   project      : LicenseMark
#   file         : errors.py
#   file_relpath : src/licensemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LicenseMark CLI.

Raise these in CLI commands to abort with a standardized message and exit code.
Core errors ([`LicensemarkError`][licensemark.core.errors.LicensemarkError]) are
converted at the command boundary; per-file header failures are reported by the
commands themselves and do not go through here.
"""

from __future__ import annotations

from typing import IO, Any

import click

from licensemark.cli.exit_codes import ExitCode


class LicensemarkCliError(click.ClickException):
    """Base class for all LicenseMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class LicensemarkUsageError(LicensemarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LicensemarkConfigError(LicensemarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
