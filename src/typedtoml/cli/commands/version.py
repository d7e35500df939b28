# topmark:header:start
#
#   project      : TypedToml
#   file         : version.py
#   file_relpath : src/typedtoml/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypedToml `version` command.

Prints the current TypedToml version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from typedtoml.cli.options import get_effective_verbosity
from typedtoml.constants import TYPEDTOML_VERSION


@click.command(
    name="version",
    help="Show the current version of TypedToml.",
)
def version_command() -> None:
    """Show the current version of TypedToml."""
    ctx = click.get_current_context()
    if get_effective_verbosity(ctx) > 0:
        click.echo(f"TypedToml version: {TYPEDTOML_VERSION}")
    else:
        click.echo(TYPEDTOML_VERSION)
