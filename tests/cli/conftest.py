# topmark:header:start
#
#   project      : TypedToml
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running the TypedToml CLI through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from typedtoml.cli.exit_codes import ExitCode
from typedtoml.cli.main import cli
from typedtoml.core.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Re-install the suite's TRACE logging after each CLI run.

    The CLI group reconfigures the root logger with a handler bound to the
    runner's captured stream.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with a fresh `CliRunner`.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["get", "config.toml", "server.port", "--type", "i32"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output
