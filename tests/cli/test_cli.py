# topmark:header:start
#
#   project      : LicenseMark
#   file         : test_cli.py
#   file_relpath : tests/cli/test_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for the ``lint`` and ``format`` commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from licensemark.cli.exit_codes import ExitCode
from licensemark.cli.main import cli
from licensemark.constants import LICENSEMARK_VERSION

pytestmark = pytest.mark.cli

RunCli = Callable[..., Result]
WriteFile = Callable[[str, str], Path]

COMPLIANT = "// Copyright 2023 Jane Doe\n\nfn main(){}\n"
MISSING = "fn main(){}\n"


def test_help_does_not_need_a_config() -> None:
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == ExitCode.SUCCESS
    assert "lint" in result.output
    assert "format" in result.output


def test_subcommand_help_does_not_load_the_config(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--config", str(tmp_path / "none.toml"), "format", "-h"])

    assert result.exit_code == ExitCode.SUCCESS
    assert "--in-place" in result.output


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == ExitCode.SUCCESS
    assert LICENSEMARK_VERSION in result.output


def test_config_option_is_required(write_file: WriteFile) -> None:
    result = CliRunner().invoke(cli, ["lint", str(write_file("a.rs", COMPLIANT))])

    assert result.exit_code == 2
    assert "--config" in result.output


# --- lint ---


def test_lint_compliant_file_is_silent(run_cli: RunCli, write_file: WriteFile) -> None:
    result = run_cli("lint", write_file("main.rs", COMPLIANT))

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""


def test_lint_reports_missing_header(run_cli: RunCli, write_file: WriteFile) -> None:
    path = write_file("main.rs", MISSING)

    result = run_cli("lint", path)

    assert result.exit_code == ExitCode.FAILURE
    assert f"Error in {path}" in result.output
    assert 'Expected: "// Copyright {year} {author}"' in result.output
    assert 'Actual: "fn main(){}"' in result.output


def test_lint_checks_every_path(run_cli: RunCli, write_file: WriteFile) -> None:
    bad = write_file("bad.rs", MISSING)
    good = write_file("good.rs", COMPLIANT)
    other = write_file("notes.txt", "hello\n")

    result = run_cli("lint", bad, good, other)

    assert result.exit_code == ExitCode.FAILURE
    assert f"Error in {bad}" in result.output
    assert f"Error in {other}" in result.output
    assert f"Error in {good}" not in result.output
    assert "unsupported file extension: 'txt'" in result.output


def test_lint_quiet_prints_nothing(run_cli: RunCli, write_file: WriteFile) -> None:
    result = run_cli("lint", "-q", write_file("main.rs", MISSING))

    assert result.exit_code == ExitCode.FAILURE
    assert result.output == ""


def test_lint_requires_a_path(run_cli: RunCli) -> None:
    result = run_cli("lint")

    assert result.exit_code == 2


def test_lint_missing_config(run_cli: RunCli, write_file: WriteFile, tmp_path: Path) -> None:
    result = run_cli("lint", write_file("main.rs", COMPLIANT), config=tmp_path / "missing.toml")

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "cannot read the config file" in result.output


def test_lint_invalid_config(run_cli: RunCli, write_file: WriteFile) -> None:
    config = write_file("bad.toml", "template = 3\n")

    result = run_cli("lint", write_file("main.rs", COMPLIANT), config=config)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "'template' must be a string" in result.output


# --- format ---


def test_format_prints_new_content(run_cli: RunCli, write_file: WriteFile) -> None:
    path = write_file("main.rs", MISSING)

    result = run_cli("format", "--author", "Jane Doe", path)

    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout.endswith("Jane Doe\n\nfn main(){}\n")
    assert result.stdout.startswith("// Copyright ")
    assert path.read_text(encoding="utf-8") == MISSING


def test_format_output_passes_lint(
    run_cli: RunCli, write_file: WriteFile, tmp_path: Path
) -> None:
    formatted = run_cli("format", "--author", "Jane Doe", write_file("main.rs", MISSING)).stdout
    out = tmp_path / "out.rs"
    out.write_text(formatted, encoding="utf-8")

    assert run_cli("lint", out).exit_code == ExitCode.SUCCESS


def test_format_compliant_file_prints_it_unchanged(run_cli: RunCli, write_file: WriteFile) -> None:
    result = run_cli("format", "--author", "Jane Doe", write_file("main.rs", COMPLIANT))

    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout == COMPLIANT


def test_format_shebang_script(run_cli: RunCli, write_file: WriteFile) -> None:
    result = run_cli("format", "--author", "Jane Doe", write_file("tool.py", "#!/bin/sh\n"))

    assert result.exit_code == ExitCode.SUCCESS
    assert result.stdout.startswith("#!/bin/sh\n\n# Copyright ")
    assert result.stdout.endswith(" Jane Doe\n\n")


def test_format_several_paths_needs_in_place(run_cli: RunCli, write_file: WriteFile) -> None:
    a = write_file("a.rs", MISSING)
    b = write_file("b.rs", MISSING)

    result = run_cli("format", "--author", "Jane Doe", a, b)

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "--in-place" in result.output
    assert a.read_text(encoding="utf-8") == MISSING


def test_format_in_place(run_cli: RunCli, write_file: WriteFile) -> None:
    a = write_file("a.rs", MISSING)
    b = write_file("b.rs", COMPLIANT)

    result = run_cli("format", "--in-place", "--author", "Jane Doe", a, b)

    assert result.exit_code == ExitCode.SUCCESS
    assert f"Added header to {a}" in result.output
    assert f"Added header to {b}" not in result.output
    assert a.read_text(encoding="utf-8").endswith("Jane Doe\n\nfn main(){}\n")
    assert b.read_text(encoding="utf-8") == COMPLIANT


def test_format_in_place_quiet(run_cli: RunCli, write_file: WriteFile) -> None:
    path = write_file("a.rs", MISSING)

    result = run_cli("format", "--in-place", "-q", "--author", "Jane Doe", path)

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""
    assert path.read_text(encoding="utf-8") != MISSING


def test_format_refuses_existing_comment(run_cli: RunCli, write_file: WriteFile) -> None:
    path = write_file("main.rs", "// Copyright (c) Somebody\nfn main(){}\n")

    result = run_cli("format", "--author", "Jane Doe", path)

    assert result.exit_code == ExitCode.FAILURE
    assert f"Error in {path}" in result.output
    assert "Is this a license comment?" in result.output


def test_format_unsupported_extension(run_cli: RunCli, write_file: WriteFile) -> None:
    result = run_cli("format", "--author", "Jane Doe", write_file("notes.txt", "hi\n"))

    assert result.exit_code == ExitCode.FAILURE
    assert "unsupported file extension" in result.output


def test_format_outside_git_without_author(run_cli: RunCli, tmp_path: Path) -> None:
    """Without ``--author`` the author comes from git; a loose file has none."""
    loose = tmp_path / "loose"
    loose.mkdir()
    path = loose / "main.rs"
    path.write_text(MISSING, encoding="utf-8")

    result = run_cli("format", path)

    assert result.exit_code == ExitCode.FAILURE
    assert "no git repository found" in result.output
