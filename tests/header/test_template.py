# topmark:header:start
#
#   project      : LicenseMark
#   file         : test_template.py
#   file_relpath : tests/header/test_template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for template line patterns and header rendering."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from licensemark.header.template import build_line_pattern, render_header, substitute
from licensemark.header.text import newline_of, split_lines, starts_with_blank_line

YEAR_LINE = "Copyright {year}"
AUTHOR_LINE = "Author: {author}"
WORD_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"


@pytest.mark.parametrize(
    ("line", "matches"),
    [
        ("// Copyright 2024", True),
        ("// Copyright 1999", True),
        ("// Copyright 202", False),
        ("// Copyright 20245", False),
        ("// Copyright abcd", False),
        ("// Copyright ", False),
    ],
)
def test_year_matches_exactly_four_digits(line: str, matches: bool) -> None:
    pattern = build_line_pattern("//", YEAR_LINE)

    assert (pattern.fullmatch(line) is not None) is matches


@pytest.mark.parametrize(
    ("author", "matches"),
    [
        ("Jane Doe", True),
        ("X", True),
        ("Jane\tDoe", True),
        ("Jean  Claude Van Damme", True),
        ("", False),
        ("Jane Doe ", False),
        (" Jane", False),
        ("Jane\nDoe", False),
        ("O'Brien", False),
    ],
)
def test_author_placeholder(author: str, matches: bool) -> None:
    pattern = build_line_pattern("#", AUTHOR_LINE)

    assert (pattern.fullmatch(f"# Author: {author}") is not None) is matches


def test_literal_text_is_escaped() -> None:
    """Regex metacharacters in the template and comment prefix match literally."""
    pattern = build_line_pattern("--", "(c) {year} [MIT] a.b*")

    assert pattern.fullmatch("-- (c) 2020 [MIT] a.b*")
    assert not pattern.fullmatch("-- c 2020 M a-bbb")


def test_pattern_needs_prefix_and_single_space() -> None:
    pattern = build_line_pattern("//", YEAR_LINE)

    assert not pattern.fullmatch("Copyright 2024")
    assert not pattern.fullmatch("//Copyright 2024")
    assert not pattern.fullmatch("///  Copyright 2024")


def test_repeated_placeholders() -> None:
    pattern = build_line_pattern("#", "{year}-{year} {author} and {author}")

    assert pattern.fullmatch("# 2019-2024 Jane Doe and John")


@given(st.integers(min_value=1000, max_value=9999))
def test_any_four_digit_year_matches(year: int) -> None:
    assert build_line_pattern("//", YEAR_LINE).fullmatch(f"// Copyright {year}")


@given(
    st.lists(
        st.text(alphabet=WORD_CHARS, min_size=1),
        min_size=1,
        max_size=4,
    )
)
def test_words_separated_by_spaces_match_author(words: list[str]) -> None:
    author = " ".join(words)

    assert build_line_pattern("#", AUTHOR_LINE).fullmatch(f"# Author: {author}")


def test_substitute_fills_every_placeholder() -> None:
    assert substitute("{year} {author} {year}", author="X", year="2024") == "2024 X 2024"


def test_render_header_prefixes_every_line() -> None:
    template = "Copyright {year} {author}\n\nSPDX-License-Identifier: MIT\n"

    header = render_header(template, comment="#", author="Jane Doe", year="2024", newline="\n")

    assert header == "# Copyright 2024 Jane Doe\n# \n# SPDX-License-Identifier: MIT\n"


def test_render_header_uses_given_newline() -> None:
    header = render_header("A\nB", comment="//", author="X", year="2024", newline="\r\n")

    assert header == "// A\r\n// B\r\n"


@pytest.mark.parametrize(
    ("text", "lines"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("a\n\n", ["a", ""]),
        ("\n", [""]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\x0cb\n", ["a\x0cb"]),
    ],
)
def test_split_lines(text: str, lines: list[str]) -> None:
    assert split_lines(text) == lines


@pytest.mark.parametrize(
    ("text", "newline"),
    [("a\nb\r\n", "\n"), ("a\r\nb\n", "\r\n"), ("no newline", "\n"), ("\n\r\n", "\n")],
)
def test_newline_of_uses_first_line(text: str, newline: str) -> None:
    assert newline_of(text) == newline


def test_starts_with_blank_line() -> None:
    assert starts_with_blank_line("\nx")
    assert starts_with_blank_line("\r\nx")
    assert not starts_with_blank_line("x\n")
    assert not starts_with_blank_line("")
