# topmark:header:start
#
#   project      : LicenseMark
#   file         : api.py
#   file_relpath : src/licensemark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Batch API over the single-file header operations.

Each path is processed independently: a failure is recorded in that file's
`FileResult` and processing continues with the next path. The CLI commands are
thin wrappers around `lint_paths` and `format_paths`.

Examples:
    ```python
    from pathlib import Path
    from licensemark.api import lint_paths
    from licensemark.config import load_config

    config = load_config(Path("licensemark.toml"))
    run = lint_paths(config, [Path("src/main.rs")])
    if run.had_errors:
        ...
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from licensemark.config.logging import get_logger
from licensemark.core.errors import LicensemarkError
from licensemark.header.matcher import check
from licensemark.header.text import write_source
from licensemark.header.writer import insert_header

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from licensemark.authors import AuthorResolver
    from licensemark.config.logging import LicensemarkLogger
    from licensemark.config.model import Config

logger: LicensemarkLogger = get_logger(__name__)


class Outcome(str, Enum):
    """Per-file outcome bucket.

    - ``COMPLIANT``: the header is present and matches the template.
    - ``CHANGED``: a header was computed (and written, for in-place formatting).
    - ``ERROR``: the file failed to process; see `FileResult.error`.
    """

    COMPLIANT = "compliant"
    CHANGED = "changed"
    ERROR = "error"


@dataclass(frozen=True)
class FileResult:
    """Result for a single file.

    Attributes:
        path (Path): The processed file.
        outcome (Outcome): High-level outcome bucket.
        content (str | None): File content after formatting (``format`` only; ``None``
            on error or lint).
        error (LicensemarkError | None): The failure, when ``outcome`` is ``ERROR``.
    """

    path: Path
    outcome: Outcome
    content: str | None = None
    error: LicensemarkError | None = None


@dataclass(frozen=True)
class RunResult:
    """Aggregate result of a batch run.

    Attributes:
        files (Sequence[FileResult]): One entry per input path, in input order.
    """

    files: Sequence[FileResult]

    @property
    def had_errors(self) -> bool:
        """True if any file failed."""
        return any(r.outcome is Outcome.ERROR for r in self.files)

    @property
    def errors(self) -> list[FileResult]:
        """The failed entries, in input order."""
        return [r for r in self.files if r.outcome is Outcome.ERROR]


def lint_paths(config: Config, paths: Iterable[Path]) -> RunResult:
    """Check every path for a compliant header.

    Args:
        config (Config): Runtime configuration.
        paths (Iterable[Path]): Files to check.

    Returns:
        RunResult: ``COMPLIANT`` or ``ERROR`` per file.
    """
    results: list[FileResult] = []
    for path in paths:
        try:
            check(config, path)
        except LicensemarkError as e:
            logger.info("lint failed for %s: %s", path, e)
            results.append(FileResult(path=path, outcome=Outcome.ERROR, error=e))
        else:
            results.append(FileResult(path=path, outcome=Outcome.COMPLIANT))
    return RunResult(files=results)


def format_paths(
    config: Config,
    paths: Iterable[Path],
    *,
    author_resolver: AuthorResolver | None = None,
    year: int | None = None,
    in_place: bool = False,
) -> RunResult:
    """Insert headers where missing.

    Args:
        config (Config): Runtime configuration.
        paths (Iterable[Path]): Files to format.
        author_resolver (AuthorResolver | None): Source of the ``{author}`` value;
            defaults to git blame.
        year (int | None): Value for ``{year}``; defaults to the current year.
        in_place (bool): Write changed content back to the file. Otherwise nothing
            is written and the content is only returned.

    Returns:
        RunResult: ``COMPLIANT``, ``CHANGED`` or ``ERROR`` per file, with the new content.
    """
    results: list[FileResult] = []
    for path in paths:
        try:
            content, changed = insert_header(
                config, path, author_resolver=author_resolver, year=year
            )
            if changed and in_place:
                write_source(path, content)
        except LicensemarkError as e:
            logger.info("format failed for %s: %s", path, e)
            results.append(FileResult(path=path, outcome=Outcome.ERROR, error=e))
            continue
        outcome = Outcome.CHANGED if changed else Outcome.COMPLIANT
        results.append(FileResult(path=path, outcome=outcome, content=content))
    return RunResult(files=results)
