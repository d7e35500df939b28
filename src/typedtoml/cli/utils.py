# topmark:header:start
#
#   project      : TypedToml
#   file         : utils.py
#   file_relpath : src/typedtoml/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for TypedToml CLI commands.

Commands load their input through [`open_document`][typedtoml.cli.utils.open_document],
which maps read and parse failures onto CLI errors with distinct exit codes, and
print values through [`format_value`][typedtoml.cli.utils.format_value].
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from typedtoml.accessor.kinds import BOOL, TEXT
from typedtoml.cli.errors import (
    CliFileNotFoundError,
    CliIOError,
    CliParseError,
    CliUsageError,
)
from typedtoml.constants import PARSE_FILE_FAILED_MSG, READ_FILE_FAILED_MSG
from typedtoml.core.logging import get_logger
from typedtoml.document.model import NodeKind
from typedtoml.handle import TomlHandle
from typedtoml.io.parser import ParseFailure, parse_toml
from typedtoml.io.readers import read_toml_text

if TYPE_CHECKING:
    from pathlib import Path

    from typedtoml.accessor.kinds import ScalarKind
    from typedtoml.core.logging import TypedTomlLogger
    from typedtoml.io.parser import ParseResult

logger: TypedTomlLogger = get_logger(__name__)


def open_document(path: Path) -> TomlHandle:
    """Read and parse ``path`` into a valid handle.

    Args:
        path (Path): TOML file to load.

    Returns:
        TomlHandle: A valid handle on the document.

    Raises:
        CliFileNotFoundError: If ``path`` does not exist.
        CliIOError: If ``path`` cannot be read.
        CliParseError: If the file is not UTF-8 or not valid TOML.
    """
    label: str = str(path)
    text, err = read_toml_text(path)
    if text is None:
        if isinstance(err, FileNotFoundError):
            raise CliFileNotFoundError(f"File not found: {label}")
        if isinstance(err, UnicodeDecodeError):
            raise CliParseError(
                PARSE_FILE_FAILED_MSG % (label, ParseFailure.from_decode_error(err, label))
            )
        raise CliIOError(f"{READ_FILE_FAILED_MSG % label} ({err})")

    result: ParseResult = parse_toml(text, source_label=label)
    if result.root is None:
        raise CliParseError(PARSE_FILE_FAILED_MSG % (label, result.failure))
    logger.debug("Opened %s (%d root key(s))", label, len(result.root))
    return TomlHandle(result.root)


def format_value(value: Any) -> str:
    """Render a scalar value the way TOML spells it.

    Booleans print as ``true``/``false``, non-finite floats as ``inf``/``-inf``/``nan``,
    other floats via ``repr`` and strings raw.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return repr(value)
    return str(value)


def parse_default(kind: ScalarKind[Any], raw: str) -> Any:
    """Convert a ``--default`` string into a value of ``kind``.

    Args:
        kind (ScalarKind[Any]): Target kind of the lookup.
        raw (str): Command-line text.

    Returns:
        Any: The default value, converted to the kind's Python type.

    Raises:
        CliUsageError: If ``raw`` cannot represent a value of ``kind``.
    """
    if kind is TEXT:
        return raw
    if kind is BOOL:
        lowered: str = raw.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        raise CliUsageError(f"Invalid boolean default: {raw!r} (expected true or false)")
    try:
        if kind.node_kind is NodeKind.INTEGER:
            return int(raw)
        return float(raw)
    except ValueError as exc:
        raise CliUsageError(f"Invalid {kind.type_name} default: {raw!r}") from exc
