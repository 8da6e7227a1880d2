# topmark:header:start
#
#   project      : ReflowPP
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``reflowpp version``."""

from __future__ import annotations

import json

from click.testing import Result

from reflowpp.constants import REFLOWPP_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_version_plain() -> None:
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output == f"{REFLOWPP_VERSION}\n"


@mark_cli
@parametrize("fmt", ["json", "JSON"])
def test_version_json(fmt: str) -> None:
    result: Result = run_cli(["version", "--format", fmt])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": REFLOWPP_VERSION}


@mark_cli
def test_version_verbose_has_header() -> None:
    result: Result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["ReflowPP version:", f"    {REFLOWPP_VERSION}"]


@mark_cli
def test_version_invalid_format() -> None:
    result: Result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code == 2
