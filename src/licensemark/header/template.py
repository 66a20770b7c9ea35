# topmark:header:start
#
#   project      : LicenseMark
#   file         : template.py
#   file_relpath : src/licensemark/header/template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header template handling.

A template line is matched by escaping its literal text and replacing the two
placeholders with fixed patterns:

- ``{author}``: one or more word characters, optionally followed by a run of
  spaces, tabs and word characters ending in a word character
  (``"Jane Doe"`` and ``"X"`` match, ``""`` does not).
- ``{year}``: exactly four digits.

The comment prefix and one space precede every template line, both when matching
and when rendering, so a rendered header always matches its own template as long
as the author name fits the ``{author}`` pattern.
"""

from __future__ import annotations

import re
from functools import lru_cache

from licensemark.constants import (
    AUTHOR_PATTERN,
    AUTHOR_PLACEHOLDER,
    YEAR_PATTERN,
    YEAR_PLACEHOLDER,
)
from licensemark.header.text import split_lines

_PLACEHOLDER_RE = re.compile(f"({re.escape(AUTHOR_PLACEHOLDER)}|{re.escape(YEAR_PLACEHOLDER)})")

_PLACEHOLDER_PATTERNS: dict[str, str] = {
    AUTHOR_PLACEHOLDER: AUTHOR_PATTERN,
    YEAR_PLACEHOLDER: YEAR_PATTERN,
}


def template_lines(template: str) -> list[str]:
    """Return the lines of ``template`` (see `split_lines`)."""
    return split_lines(template)


def prefixed(comment: str, line: str) -> str:
    """Return ``line`` behind the comment prefix and one space."""
    return f"{comment} {line}"


@lru_cache(maxsize=256)
def build_line_pattern(comment: str, template_line: str) -> re.Pattern[str]:
    """Compile the pattern a file line must fully match for ``template_line``.

    Args:
        comment (str): Line-comment prefix of the file's language.
        template_line (str): One line of the header template.

    Returns:
        re.Pattern[str]: Pattern to use with ``fullmatch``.
    """
    parts = _PLACEHOLDER_RE.split(prefixed(comment, template_line))
    # split() with a capture group alternates literal text and placeholders
    regex = "".join(
        _PLACEHOLDER_PATTERNS[part] if i % 2 else re.escape(part) for i, part in enumerate(parts)
    )
    return re.compile(regex)


def substitute(template: str, *, author: str, year: str) -> str:
    """Fill the ``{author}`` and ``{year}`` placeholders of ``template``."""
    return template.replace(AUTHOR_PLACEHOLDER, author).replace(YEAR_PLACEHOLDER, year)


def render_header(template: str, *, comment: str, author: str, year: str, newline: str) -> str:
    """Render the concrete header block.

    Args:
        template (str): Header template.
        comment (str): Line-comment prefix.
        author (str): Value for ``{author}``.
        year (str): Value for ``{year}``.
        newline (str): Terminator appended to every rendered line.

    Returns:
        str: The header, one commented line per template line, each ending in ``newline``.
    """
    text = substitute(template, author=author, year=year)
    return "".join(prefixed(comment, line) + newline for line in split_lines(text))
