# topmark:header:start
#
#   project      : ReflowPP
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ReflowPP in a controlled working directory.

Config discovery starts at the working directory, so tests that rely on
discovered files use `run_cli_in` with a ``tmp_path`` holding a
``reflowpp.toml`` marked ``root = true``; all other tests pass ``--no-config``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from reflowpp.cli.exit_codes import ExitCode
from reflowpp.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the ``setup_logging`` call every CLI invocation makes.

    The CLI points the root handler at the runner's temporary ``stderr``; later
    tests must not log into that stream once the runner has closed it.
    """
    root: logging.Logger = logging.getLogger()
    saved_level: int = root.level
    saved_handlers: list[logging.Handler] = root.handlers[:]
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def isolated_dir(tmp_path: Path) -> Path:
    """Return ``tmp_path`` holding an empty root config, which stops discovery there."""
    (tmp_path / "reflowpp.toml").write_text("root = true\n", encoding="utf-8")
    return tmp_path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Relative input paths and config discovery then resolve against
    ``tmp_path``, as they would for a user running ``reflowpp`` from a project
    root.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["xml", "doc.xml"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for ``-``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for commands that touch no files (``version``, ``--help``)
    or that receive ``--no-config`` and absolute paths only.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
