# topmark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/header/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header matching (``check``) and insertion (``apply``)."""

from __future__ import annotations

from licensemark.header.matcher import check, check_text
from licensemark.header.writer import apply, insert_header

__all__ = ["apply", "check", "check_text", "insert_header"]
