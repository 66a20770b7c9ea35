# topmark:header:start
#
#   project      : LicenseMark
#   file         : exit_codes.py
#   file_relpath : src/licensemark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the LicenseMark CLI.

Values follow the BSD `sysexits` convention where practical, so other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LicenseMark CLI.

    Attributes:
        SUCCESS: Every file carries a compliant header (``lint``) or was formatted.
        FAILURE: At least one file failed its header check or could not be formatted.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Missing, unreadable or malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
