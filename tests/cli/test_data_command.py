# topmark:header:start
#
#   project      : ReflowPP
#   file         : test_data_command.py
#   file_relpath : tests/cli/test_data_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``reflowpp data``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import Result

from reflowpp.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, mark_integration, parametrize

if TYPE_CHECKING:
    from pathlib import Path

DOC_JSON: str = '{"a": 1, "b": [2, 3]}'
DOC_TOML: str = 'a = 1\nb = [2, 3]\n'


def _data(*args: str, input_text: str | bytes | None = None) -> Result:
    return run_cli(["data", "--no-config", *args], input_text=input_text)


@mark_cli
def test_json_from_stdin() -> None:
    result: Result = _data(input_text=DOC_JSON)
    assert_SUCCESS(result)
    assert result.output == "{a=1, b=[2, 3]}\n"


@mark_cli
def test_toml_from_stdin_is_auto_detected() -> None:
    result: Result = _data("-", input_text=DOC_TOML)
    assert_SUCCESS(result)
    assert result.output == "{a=1, b=[2, 3]}\n"


@mark_cli
@parametrize(
    "args, expected",
    [
        (["-w", "10"], "{a=1,\n b=[2, 3]}\n"),
        (["-w", "6"], "{a=1,\n b=\n   [2,\n    3]}\n"),
        (["-w", "6", "-i", "4"], "{a=1,\n b=\n     [2,\n      3]}\n"),
    ],
)
def test_width_and_indent(args: list[str], expected: str) -> None:
    result: Result = _data(*args, input_text=DOC_JSON)
    assert_SUCCESS(result)
    assert result.output == expected


@mark_cli
def test_format_option_is_case_insensitive() -> None:
    result: Result = _data("--format", "TOML", input_text=DOC_TOML)
    assert_SUCCESS(result)
    assert result.output == "{a=1, b=[2, 3]}\n"


@mark_cli
def test_forced_format_rejects_other_input() -> None:
    result: Result = _data("--format", "json", input_text=DOC_TOML)
    assert_exit(result, ExitCode.INPUT_ERROR)
    assert "Invalid JSON" in result.output


@mark_cli
def test_unknown_format_is_a_usage_error() -> None:
    result: Result = _data("--format", "yaml", input_text=DOC_JSON)
    assert result.exit_code == 2
    assert "Must be one of: auto, json, toml" in result.output


@mark_cli
def test_undecodable_input() -> None:
    result: Result = _data(input_text=b"\xff\xfe{}")
    assert_exit(result, ExitCode.INPUT_ERROR)
    assert "not valid UTF-8" in result.output


@mark_cli
def test_detect_cycles_flag_is_accepted() -> None:
    result: Result = _data("--detect-cycles", input_text="[[1], [1]]")
    assert_SUCCESS(result)
    assert result.output == "[[1], [1]]\n"


@mark_cli
@mark_integration
def test_file_suffix_selects_format(tmp_path: Path) -> None:
    path: Path = tmp_path / "doc.json"
    path.write_text(DOC_TOML, encoding="utf-8")
    result: Result = _data(str(path))
    assert_exit(result, ExitCode.INPUT_ERROR)


@mark_cli
@mark_integration
def test_unknown_suffix_falls_back_to_auto(tmp_path: Path) -> None:
    path: Path = tmp_path / "doc.conf"
    path.write_text(DOC_TOML, encoding="utf-8")
    result: Result = _data(str(path))
    assert_SUCCESS(result)
    assert result.output == "{a=1, b=[2, 3]}\n"


@mark_cli
def test_missing_file(tmp_path: Path) -> None:
    result: Result = _data(str(tmp_path / "missing.json"))
    assert_exit(result, ExitCode.FILE_NOT_FOUND)


@mark_cli
@mark_integration
def test_config_sets_format_and_layout(isolated_dir: Path) -> None:
    (isolated_dir / "reflowpp.toml").write_text(
        'root = true\n\n[layout]\nline_width = 10\n\n[data]\nformat = "toml"\n',
        encoding="utf-8",
    )
    result: Result = run_cli_in(isolated_dir, ["data"], input_text=DOC_TOML)
    assert_SUCCESS(result)
    assert result.output == "{a=1,\n b=[2, 3]}\n"
