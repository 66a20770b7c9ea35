# topmark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseMark CLI subcommands."""

from __future__ import annotations
