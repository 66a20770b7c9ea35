# topmark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the header, config and CLI layers."""

from __future__ import annotations
