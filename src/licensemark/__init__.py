# topmark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseMark package.

LicenseMark verifies and inserts license/copyright header comments at the top of
source files, using a configurable template with ``{author}`` and ``{year}``
placeholders and per-language comment prefixes.
"""

from __future__ import annotations
