# topmark:header:start
#
#   project      : TypedToml
#   file         : keys.py
#   file_relpath : src/typedtoml/cli/commands/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypedToml `keys` command.

Lists the keys of the root table, or of the table at a dotted PATH, one per
line in document order.
"""

from __future__ import annotations

from pathlib import Path

import click

from typedtoml.cli.errors import CliAccessError
from typedtoml.cli.utils import open_document
from typedtoml.core.errors import TomlAccessError
from typedtoml.handle import TomlHandle


@click.command(
    name="keys",
    help="List the keys of the root table of FILE, or of the table at PATH.",
)
@click.argument(
    "file",
    type=click.Path(path_type=Path),
)
@click.argument("path", required=False)
def keys_command(file: Path, path: str | None) -> None:
    """List table keys.

    Args:
        file (Path): The TOML document to read.
        path (str | None): Optional dotted path of a nested table.

    Raises:
        CliAccessError: If ``path`` does not resolve to a table.
    """
    handle: TomlHandle = open_document(file)
    if path is not None:
        try:
            handle = handle.get_table_at_path(path)
        except TomlAccessError as exc:
            raise CliAccessError(str(exc)) from exc

    for key in handle.keys():
        click.echo(key)
