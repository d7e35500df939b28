# topmark:header:start
#
#   project      : TypedToml
#   file         : errors.py
#   file_relpath : src/typedtoml/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TypedToml CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Click prints the message to stderr and exits with
    the class' ``exit_code``.
"""

from __future__ import annotations

import click

from typedtoml.cli.exit_codes import ExitCode


class TypedTomlCliError(click.ClickException):
    """Base class for all TypedToml CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class CliUsageError(TypedTomlCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CliParseError(TypedTomlCliError):
    """Error for documents that are not valid TOML."""

    exit_code = ExitCode.DATA_ERROR


class CliFileNotFoundError(TypedTomlCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CliIOError(TypedTomlCliError):
    """Error for I/O or decoding errors reading the input file."""

    exit_code = ExitCode.IO_ERROR


class CliAccessError(TypedTomlCliError):
    """Error for a checked lookup that failed (missing key, wrong kind)."""

    exit_code = ExitCode.FAILURE
