# topmark:header:start
#
#   project      : LicenseMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LicenseMark test suite.

Provides logging setup, configuration factories, a fixed author resolver, and a
helper to write the TOML config used by CLI tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest

from licensemark.authors import StaticAuthorResolver
from licensemark.config import Config, LangRule, logging

if TYPE_CHECKING:
    from pathlib import Path

TEMPLATE = "Copyright {year} {author}"
AUTHOR = "Jane Doe"
YEAR = 2024

CONFIG_TOML = """\
template = "Copyright {year} {author}"
newline_after_shebang = true
newline_after_template = true

[rust]
extensions = ["rs"]
comment = "//"

[py]
extensions = ["py"]
comment = "#"
"""


@pytest.fixture(autouse=True)
def silence_licensemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv("LICENSEMARK_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failures come with full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a `Config` with Rust (``//``) and Python (``#``) rules.

    Both blank-line flags default to True; any field can be overridden.
    """
    values: dict[str, Any] = {
        "template": TEMPLATE,
        "newline_after_shebang": True,
        "newline_after_template": True,
        "langs": {
            "rust": LangRule(extensions=("rs",), comment="//"),
            "py": LangRule(extensions=("py",), comment="#"),
        },
    }
    values.update(overrides)
    return Config(**values)


@pytest.fixture
def config_factory() -> Callable[..., Config]:
    """Factory fixture around `make_config`."""
    return make_config


@pytest.fixture
def author_resolver() -> StaticAuthorResolver:
    """Author resolver that always answers ``Jane Doe``."""
    return StaticAuthorResolver(AUTHOR)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing ``content`` verbatim (no newline translation) to ``tmp_path/name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    return _write


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write the standard TOML config and return its path."""
    path = tmp_path / "licensemark.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    return path
