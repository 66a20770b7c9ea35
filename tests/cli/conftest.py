# topmark:header:start
#
#   project      : LicenseMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group in-process with `CliRunner`, prepending
``--config`` pointing at the standard test configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from licensemark.cli.main import cli

RunCli = Callable[..., Result]


@pytest.fixture
def run_cli(config_file: Path) -> RunCli:
    """Return a helper running ``licensemark --config <config_file> *argv``.

    Args:
        config_file (Path): The standard TOML config (see the root conftest).

    Returns:
        RunCli: ``run(*argv, config=None)``; ``config`` overrides the config path.
    """

    def _run(*argv: str | Path, config: Path | None = None) -> Result:
        args: Sequence[str] = ["--config", str(config or config_file), *map(str, argv)]
        return CliRunner().invoke(cli, args)

    return _run
