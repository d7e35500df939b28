# topmark:header:start
#
#   project      : TypedToml
#   file         : check.py
#   file_relpath : src/typedtoml/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypedToml `check` command.

Validates that a file is readable, well-formed UTF-8 and valid TOML. Prints
``valid`` on success; failures exit with ``DATA_ERROR``, ``FILE_NOT_FOUND`` or
``IO_ERROR`` (see [`ExitCode`][typedtoml.cli.exit_codes.ExitCode]).
"""

from __future__ import annotations

from pathlib import Path

import click

from typedtoml.cli.options import get_effective_verbosity
from typedtoml.cli.utils import open_document


@click.command(
    name="check",
    help="Validate that FILE is a well-formed TOML document.",
)
@click.argument(
    "file",
    type=click.Path(path_type=Path),
)
def check_command(file: Path) -> None:
    """Load FILE and report whether it parses.

    Args:
        file (Path): The TOML document to validate.
    """
    ctx = click.get_current_context()
    vlevel: int = get_effective_verbosity(ctx)

    handle = open_document(file)
    if vlevel < 0:
        return
    click.echo("valid")
    if vlevel > 0:
        click.echo(f"{file}: {len(handle.keys())} root key(s)")
