# topmark:header:start
#
#   project      : TypedToml
#   file         : get.py
#   file_relpath : src/typedtoml/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypedToml `get` command.

Reads one typed value at a dotted PATH:

```bash
typedtoml get config.toml server.port --type i32
typedtoml get config.toml servers[1].name --default none
typedtoml get config.toml tools.ports --type i64 --array
```

Without ``--default`` the lookup is checked and any access failure exits with
``FAILURE``. With ``--default`` the default is printed instead. ``--array``
reads the homogeneous array at PATH, including nested arrays such as
``matrix[1]``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from typedtoml.accessor.kinds import kind_from_name
from typedtoml.cli.errors import CliAccessError, CliUsageError
from typedtoml.cli.options import kind_option
from typedtoml.cli.utils import format_value, open_document, parse_default
from typedtoml.core.errors import TomlAccessError
from typedtoml.core.logging import get_logger

if TYPE_CHECKING:
    from typedtoml.core.logging import TypedTomlLogger
    from typedtoml.handle import TomlHandle

logger: TypedTomlLogger = get_logger(__name__)


@click.command(
    name="get",
    help="Print the value at PATH in FILE, checked against the requested type.",
)
@click.argument(
    "file",
    type=click.Path(path_type=Path),
)
@click.argument("path")
@kind_option
@click.option(
    "--default",
    "default_raw",
    default=None,
    help="Value to print when PATH is missing or has another type.",
)
@click.option(
    "--array",
    "as_array",
    is_flag=True,
    default=False,
    help="Read a homogeneous array instead of a scalar.",
)
def get_command(
    file: Path,
    path: str,
    *,
    type_name: str,
    default_raw: str | None,
    as_array: bool,
) -> None:
    """Print a typed value.

    Args:
        file (Path): The TOML document to read.
        path (str): Dotted path of the value.
        type_name (str): Scalar kind name (``bool``, ``i32``, ``i64``, ``f32``,
            ``f64`` or ``text``).
        default_raw (str | None): Default value text; selects the defaulted lookup.
        as_array (bool): Read an array of ``type_name`` scalars.

    Raises:
        CliUsageError: On an unknown kind, a bad default, or ``--array`` with
            ``--default``.
        CliAccessError: If a checked lookup fails.
    """
    kind = kind_from_name(type_name)
    if kind is None:
        raise CliUsageError(f"Unknown value type: {type_name}")
    if as_array and default_raw is not None:
        raise CliUsageError("The '--array' and '--default' options are mutually exclusive.")

    handle: TomlHandle = open_document(file)
    logger.debug("get %s as %s from %s", path, kind.name, file)

    if as_array:
        try:
            values: list[Any] = handle.get_array_at_path(path, kind)
        except TomlAccessError as exc:
            raise CliAccessError(str(exc)) from exc
        for item in values:
            click.echo(format_value(item))
        return

    if default_raw is not None:
        value: Any = handle.at_path(path, kind, parse_default(kind, default_raw))
    else:
        try:
            value = handle.at_path(path, kind)
        except TomlAccessError as exc:
            raise CliAccessError(str(exc)) from exc
    click.echo(format_value(value))
