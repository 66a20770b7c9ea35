# topmark:header:start
#
#   project      : LicenseMark
#   file         : errors.py
#   file_relpath : src/licensemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the LicenseMark core.

Every failure of a single-file operation is a subclass of `LicensemarkError`, so
callers processing several files can catch it per file and carry on. The CLI
converts these into click exceptions with an exit code
(see [`licensemark.cli.errors`][licensemark.cli.errors]).

Hierarchy:
    - `LicensemarkError`
        - `ConfigError`: `ConfigReadError`, `ConfigParseError`
        - `HeaderCheckError`: the file does not carry the expected header
        - `HeaderWriteError`: a header cannot be inserted (or written back)
            - `LooksLikeExistingHeaderError`, `FileWriteError`
            - `AuthorResolutionError`: `RepositoryNotFoundError`, `NoAuthorInfoError`
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import re
    from pathlib import Path


class LicensemarkError(Exception):
    """Base class for all LicenseMark errors."""


# --- Configuration ---


class ConfigError(LicensemarkError):
    """Base class for configuration errors."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}{reason}")


class ConfigReadError(ConfigError):
    """The configuration file cannot be read."""


class ConfigParseError(ConfigError):
    """The configuration file is not valid TOML or does not fit the schema."""


# --- Header check ---


class HeaderCheckError(LicensemarkError):
    """Base class for files whose leading lines do not match the header template."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class UnsupportedExtensionError(HeaderCheckError):
    """No language rule lists the file's extension."""

    def __init__(self, path: Path, extension: str) -> None:
        self.extension = extension
        super().__init__(path, f"unsupported file extension: {extension!r}")


class UnreadableFileError(HeaderCheckError):
    """The file cannot be opened or is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"cannot read file: {reason}")


class EmptyFileError(HeaderCheckError):
    """The file has no lines to inspect."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "file is empty")


class MissingBlankAfterShebangError(HeaderCheckError):
    """The line following the shebang is not empty."""

    def __init__(self, path: Path, actual: str) -> None:
        self.actual = actual
        super().__init__(path, f"non-empty line after shebang: {actual}")


class UnexpectedEOFError(HeaderCheckError):
    """The file ends before the header is complete."""

    def __init__(self, path: Path, expected: str) -> None:
        self.expected = expected
        super().__init__(path, f'Expected: "{expected}"\n  Actual: <None>')


class TemplateMismatchError(HeaderCheckError):
    """A header line does not match the corresponding template line.

    Attributes:
        expected (str): The template line with its comment prefix (placeholders kept).
        actual (str): The offending file line.
        pattern (re.Pattern[str]): The pattern the file line was matched against.
        line_number (int): 1-based line number in the file.
    """

    def __init__(
        self,
        path: Path,
        *,
        expected: str,
        actual: str,
        pattern: re.Pattern[str],
        line_number: int,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.pattern = pattern
        self.line_number = line_number
        super().__init__(
            path,
            f'line {line_number}:\n  Expected: "{expected}"\n  Actual: "{actual}"',
        )


class TrailingContentAfterTemplateError(HeaderCheckError):
    """The line following the header is not empty."""

    def __init__(self, path: Path, actual: str) -> None:
        self.actual = actual
        super().__init__(path, f'line after template is not empty: "{actual}"')


# --- Header insertion ---


class HeaderWriteError(LicensemarkError):
    """Base class for failures while inserting a header."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class LooksLikeExistingHeaderError(HeaderWriteError):
    """The insertion point already starts with the comment prefix."""

    def __init__(self, path: Path, snippet: str) -> None:
        self.snippet = snippet
        super().__init__(path, f'Is this a license comment?\n"{snippet}.."')


class FileWriteError(HeaderWriteError):
    """The formatted content cannot be written back to the file."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"cannot write file: {reason}")


class AuthorResolutionError(HeaderWriteError):
    """Base class for failures to determine the file's primary author."""


class RepositoryNotFoundError(AuthorResolutionError):
    """The file is not inside a version-controlled working tree."""

    def __init__(self, path: Path, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(path, f"no git repository found for {path}{detail}")


class NoAuthorInfoError(AuthorResolutionError):
    """Blame yields no named contributor for the file."""

    def __init__(self, path: Path, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(path, f"cannot find author info{detail}")
