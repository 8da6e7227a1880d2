# topmark:header:start
#
#   project      : ReflowPP
#   file         : errors.py
#   file_relpath : src/reflowpp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ReflowPP CLI.

Commands translate library failures into these `click.ClickException`
subclasses; Click prints the message and exits with the class's `ExitCode`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from reflowpp.cli.exit_codes import ExitCode


class ReflowError(click.ClickException):
    """Base class for all ReflowPP CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text; styling happens in `show`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the project console when one is available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = ctx.obj.get("console") if ctx and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class ReflowUsageError(ReflowError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ReflowConfigError(ReflowError):
    """Error for configuration files that are missing or unusable."""

    exit_code = ExitCode.CONFIG_ERROR


class ReflowFileNotFoundError(ReflowError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ReflowInputError(ReflowError):
    """Error for malformed input documents (XML, JSON, TOML) or undecodable text."""

    exit_code = ExitCode.INPUT_ERROR


class ReflowIOError(ReflowError):
    """Error for failures reading the input or writing the output."""

    exit_code = ExitCode.IO_ERROR


class ReflowUnexpectedError(ReflowError):
    """Error for unhandled/unknown errors (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
