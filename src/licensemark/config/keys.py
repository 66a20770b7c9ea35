# topmark:header:start
#
#   project      : LicenseMark
#   file         : keys.py
#   file_relpath : src/licensemark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for LicenseMark configuration.

Keys defined here are the external configuration API: renaming or removing one is
a breaking change. Any top-level key not listed in `Toml.RESERVED_KEYS` names a
language table.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by the LicenseMark configuration file."""

    KEY_TEMPLATE: Final[str] = "template"
    KEY_NEWLINE_AFTER_SHEBANG: Final[str] = "newline_after_shebang"
    KEY_NEWLINE_AFTER_TEMPLATE: Final[str] = "newline_after_template"

    # [<language>]
    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_COMMENT: Final[str] = "comment"

    RESERVED_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_TEMPLATE, KEY_NEWLINE_AFTER_SHEBANG, KEY_NEWLINE_AFTER_TEMPLATE}
    )
