# topmark:header:start
#
#   project      : LicenseMark
#   file         : text.py
#   file_relpath : src/licensemark/header/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Text helpers shared by the header matcher and writer.

Line splitting follows one rule everywhere (file content and template alike):
split on ``\n``, drop one trailing ``\r`` per line, and do not report a phantom
empty line after a final newline. Unlike `str.splitlines`, form feeds and other
Unicode line boundaries are kept inside the line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licensemark.config.logging import get_logger
from licensemark.core.errors import FileWriteError, UnreadableFileError

if TYPE_CHECKING:
    from pathlib import Path

    from licensemark.config.logging import LicensemarkLogger

logger: LicensemarkLogger = get_logger(__name__)

LF = "\n"
CRLF = "\r\n"


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines without their terminators.

    Examples:
        ``"a\\nb\\n"`` -> ``["a", "b"]``; ``"a\\r\\n\\n"`` -> ``["a", ""]``; ``""`` -> ``[]``.
    """
    if not text:
        return []
    lines = text.split(LF)
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def newline_of(text: str) -> str:
    """Return the newline style of ``text``'s first line (``\\r\\n`` or ``\\n``)."""
    idx = text.find(LF)
    if idx > 0 and text[idx - 1] == "\r":
        return CRLF
    return LF


def starts_with_blank_line(text: str) -> bool:
    """Return True if ``text`` begins with an empty line."""
    return text.startswith((LF, CRLF))


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 text, preserving its newlines.

    The file handle is released before returning.

    Raises:
        UnreadableFileError: If the file cannot be opened or decoded.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        raise UnreadableFileError(path, str(e)) from e
    logger.trace("Read %d character(s) from %s", len(text), path)
    return text


def write_source(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without newline translation.

    Raises:
        FileWriteError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise FileWriteError(path, str(e)) from e
    logger.info("Wrote %s", path)
