# topmark:header:start
#
#   project      : LicenseMark
#   file         : matcher.py
#   file_relpath : src/licensemark/header/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header matcher (``lint``).

Checks that a file starts with the header described by the configured template.
The check is read-only and consumes the file's leading lines in order:

1. an optional shebang (``#!...``), followed by a blank line when
   ``newline_after_shebang`` is set;
2. one commented line per template line, each fully matching the template
   pattern (see [`build_line_pattern`][licensemark.header.template.build_line_pattern]);
3. a blank line (or end of file) when ``newline_after_template`` is set.

Any deviation raises a [`HeaderCheckError`][licensemark.core.errors.HeaderCheckError]
subclass describing the first offending line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licensemark.config.logging import get_logger
from licensemark.constants import SHEBANG_PREFIX
from licensemark.core.errors import (
    EmptyFileError,
    MissingBlankAfterShebangError,
    TemplateMismatchError,
    TrailingContentAfterTemplateError,
    UnexpectedEOFError,
)
from licensemark.header.template import build_line_pattern, prefixed, template_lines
from licensemark.header.text import read_source, split_lines

if TYPE_CHECKING:
    from pathlib import Path

    from licensemark.config.logging import LicensemarkLogger
    from licensemark.config.model import Config

logger: LicensemarkLogger = get_logger(__name__)


def check(config: Config, path: Path) -> None:
    """Verify that ``path`` starts with the configured header.

    Args:
        config (Config): Runtime configuration.
        path (Path): File to check.

    Raises:
        UnsupportedExtensionError: No language rule for the file's extension.
        UnreadableFileError: The file cannot be read as UTF-8 text.
        EmptyFileError: The file has no lines.
        MissingBlankAfterShebangError: The shebang is not followed by a blank line.
        UnexpectedEOFError: The file ends before the header does.
        TemplateMismatchError: A header line does not match the template.
        TrailingContentAfterTemplateError: The header is not followed by a blank line.
    """
    comment: str = config.comment_for(path)
    check_text(config, path, read_source(path), comment=comment)
    logger.debug("Header OK: %s", path)


def check_text(config: Config, path: Path, text: str, *, comment: str) -> None:
    """Verify header compliance of already-loaded content (see `check`).

    ``path`` is only used for error reporting.
    """
    lines = split_lines(text)
    if not lines:
        raise EmptyFileError(path)

    pos = 0
    if lines[0].startswith(SHEBANG_PREFIX):
        logger.trace("Shebang found in %s: %r", path, lines[0])
        pos = 1
        if config.newline_after_shebang:
            if pos >= len(lines):
                raise UnexpectedEOFError(path, "")
            if lines[pos]:
                raise MissingBlankAfterShebangError(path, lines[pos])
            pos += 1

    for template_line in template_lines(config.template):
        expected = prefixed(comment, template_line)
        if pos >= len(lines):
            raise UnexpectedEOFError(path, expected)
        actual = lines[pos]
        pattern = build_line_pattern(comment, template_line)
        if pattern.fullmatch(actual) is None:
            raise TemplateMismatchError(
                path,
                expected=expected,
                actual=actual,
                pattern=pattern,
                line_number=pos + 1,
            )
        pos += 1

    if config.newline_after_template and pos < len(lines) and lines[pos]:
        raise TrailingContentAfterTemplateError(path, lines[pos])
