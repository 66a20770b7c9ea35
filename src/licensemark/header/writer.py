# topmark:header:start
#
#   project      : LicenseMark
#   file         : writer.py
#   file_relpath : src/licensemark/header/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header writer (``format``).

Computes the content of a file with the configured header inserted. Nothing is
written to disk here: the file is read once, every step works on that snapshot,
and the assembled content is returned to the caller.

Placement walks a fixed sequence of states, each optional transition gated by a
config flag:

    Start -> (shebang consumed) -> before header -> header inserted
          -> (trailing blank) -> done

- A shebang line is skipped. With ``newline_after_shebang``, an existing blank
  line after it is skipped too, otherwise one is inserted. A shebang with no
  newline at all gets one, plus the blank line when the flag is set.
- If the insertion point already starts with the comment prefix, insertion is
  refused with [`LooksLikeExistingHeaderError`][licensemark.core.errors.LooksLikeExistingHeaderError].
  Only the prefix is inspected, so an unrelated leading comment is refused as well.
- With ``newline_after_template``, a blank line is added after the header unless
  the content at the insertion point already starts with one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from licensemark.authors import GitBlameAuthorResolver
from licensemark.config.logging import get_logger
from licensemark.constants import SHEBANG_PREFIX
from licensemark.core.errors import HeaderCheckError, LooksLikeExistingHeaderError
from licensemark.header.matcher import check_text
from licensemark.header.template import render_header
from licensemark.header.text import CRLF, LF, newline_of, read_source, starts_with_blank_line

if TYPE_CHECKING:
    from pathlib import Path

    from licensemark.authors import AuthorResolver
    from licensemark.config.logging import LicensemarkLogger
    from licensemark.config.model import Config

logger: LicensemarkLogger = get_logger(__name__)

SNIPPET_LENGTH = 10


@dataclass(frozen=True)
class InsertionPlan:
    """Where the header goes and which blank lines surround it.

    Attributes:
        offset (int): Character offset of the insertion point in the original content.
        newlines_before (int): Newlines emitted before the header.
        newlines_after (int): Newlines emitted after the header.
        newline (str): Line terminator used for everything inserted.
    """

    offset: int
    newlines_before: int
    newlines_after: int
    newline: str


def plan_insertion(config: Config, path: Path, content: str, *, comment: str) -> InsertionPlan:
    """Compute the insertion point for a header in ``content``.

    Raises:
        LooksLikeExistingHeaderError: The insertion point starts with ``comment``.
    """
    newline = newline_of(content)
    offset = 0
    before = 0
    after = 0

    if content.startswith(SHEBANG_PREFIX):
        eol = content.find(LF)
        if eol >= 0:
            offset = eol + 1
            if config.newline_after_shebang:
                rest = content[offset:]
                if starts_with_blank_line(rest):
                    offset += len(CRLF) if rest.startswith(CRLF) else len(LF)
                else:
                    before += 1
        else:
            # shebang without a trailing newline
            offset = len(content)
            before += 1
            if config.newline_after_shebang:
                before += 1

    rest = content[offset:]
    if rest.startswith(comment):
        raise LooksLikeExistingHeaderError(path, rest[:SNIPPET_LENGTH])

    if config.newline_after_template and not starts_with_blank_line(rest):
        after += 1

    plan = InsertionPlan(offset=offset, newlines_before=before, newlines_after=after, newline=newline)
    logger.trace("Insertion plan for %s: %s", path, plan)
    return plan


def current_year() -> int:
    """Return the current calendar year (UTC)."""
    return datetime.now(timezone.utc).year


def apply(
    config: Config,
    path: Path,
    *,
    author_resolver: AuthorResolver | None = None,
    year: int | None = None,
) -> str:
    """Return the content of ``path`` with the configured header inserted.

    If the file already carries a compliant header its content is returned
    unchanged. See `insert_header` for arguments and errors.
    """
    content, _changed = insert_header(config, path, author_resolver=author_resolver, year=year)
    return content


def insert_header(
    config: Config,
    path: Path,
    *,
    author_resolver: AuthorResolver | None = None,
    year: int | None = None,
) -> tuple[str, bool]:
    """Compute the content of ``path`` with the configured header inserted.

    Args:
        config (Config): Runtime configuration.
        path (Path): File to format.
        author_resolver (AuthorResolver | None): Source of the ``{author}`` value.
            Defaults to a `GitBlameAuthorResolver`.
        year (int | None): Value for ``{year}``; defaults to the current year.

    Returns:
        tuple[str, bool]: The full new file content, and whether it differs from
            the original (False when the header was already compliant).

    Raises:
        UnsupportedExtensionError: No language rule for the file's extension.
        UnreadableFileError: The file cannot be read as UTF-8 text.
        LooksLikeExistingHeaderError: The insertion point already starts with a comment.
        RepositoryNotFoundError: The file is not inside a git working tree.
        NoAuthorInfoError: No author can be derived from the file's history.
    """
    comment: str = config.comment_for(path)
    content: str = read_source(path)

    try:
        check_text(config, path, content, comment=comment)
    except HeaderCheckError as e:
        logger.debug("Header missing or non-compliant in %s: %s", path, e)
    else:
        logger.debug("Header already compliant: %s", path)
        return content, False

    plan = plan_insertion(config, path, content, comment=comment)

    resolver: AuthorResolver = author_resolver or GitBlameAuthorResolver()
    author: str = resolver.resolve_primary_author(path)
    year_text: str = f"{year if year is not None else current_year():04d}"

    header: str = render_header(
        config.template,
        comment=comment,
        author=author,
        year=year_text,
        newline=plan.newline,
    )
    insertion = plan.newline * plan.newlines_before + header + plan.newline * plan.newlines_after
    logger.info("Inserting %d-line header in %s", header.count(plan.newline), path)
    return content[: plan.offset] + insertion + content[plan.offset :], True
