# topmark:header:start
#
#   project      : LicenseMark
#   file         : constants.py
#   file_relpath : src/licensemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    LICENSEMARK_VERSION: str = get_version("licensemark")
except PackageNotFoundError:  # running from a source checkout
    LICENSEMARK_VERSION = "0.0.0"

AUTHOR_PLACEHOLDER: str = "{author}"
YEAR_PLACEHOLDER: str = "{year}"

# `{author}`: one or more words separated by runs of spaces/tabs
AUTHOR_PATTERN: str = r"\w+(?:[ \t\w]*\w)?"
YEAR_PATTERN: str = r"\d{4}"

SHEBANG_PREFIX: str = "#!"
