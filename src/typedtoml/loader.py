# topmark:header:start
#
#   project      : TypedToml
#   file         : loader.py
#   file_relpath : src/typedtoml/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML sources into [`TomlHandle`][typedtoml.handle.TomlHandle] objects.

Loading never raises. A source that cannot be read or parsed yields an invalid
handle and exactly one ERROR record on this module's logger:

```text
Failed to parse TOML string: <description> (<lb>:<le>, <cb>:<ce>)
Failed to parse TOML file '<path>': <description> <path>(<lb>:<le>, <cb>:<ce>)
Failed to read TOML file: <path>
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typedtoml.constants import (
    PARSE_FILE_FAILED_MSG,
    PARSE_STRING_FAILED_MSG,
    READ_FILE_FAILED_MSG,
)
from typedtoml.core.logging import get_logger
from typedtoml.handle import TomlHandle
from typedtoml.io.parser import ParseFailure, ParseResult, parse_toml
from typedtoml.io.readers import read_toml_text

if TYPE_CHECKING:
    from os import PathLike

    from typedtoml.core.logging import TypedTomlLogger

logger: TypedTomlLogger = get_logger(__name__)


def load_string(text: str | bytes) -> TomlHandle:
    """Parse TOML source text into a handle.

    Args:
        text (str | bytes): TOML source; ``bytes`` must be UTF-8.

    Returns:
        TomlHandle: A valid handle, or an invalid one if parsing failed.
    """
    result: ParseResult = parse_toml(text)
    if result.root is None:
        logger.error(PARSE_STRING_FAILED_MSG, result.failure)
        return TomlHandle.invalid()
    return TomlHandle(result.root)


def load_file(path: str | PathLike[str]) -> TomlHandle:
    """Read and parse a TOML file into a handle.

    The file path is used as the source label in parse-failure messages.

    Args:
        path (str | PathLike[str]): Path to a UTF-8 TOML document.

    Returns:
        TomlHandle: A valid handle, or an invalid one if reading or parsing failed.
    """
    label: str = str(path)
    text, err = read_toml_text(path)
    if isinstance(err, UnicodeDecodeError):
        logger.error(PARSE_FILE_FAILED_MSG, label, ParseFailure.from_decode_error(err, label))
        return TomlHandle.invalid()
    if text is None:
        logger.error(READ_FILE_FAILED_MSG, label)
        logger.debug("Read error for %s: %s", label, err)
        return TomlHandle.invalid()

    result: ParseResult = parse_toml(text, source_label=label)
    if result.root is None:
        logger.error(PARSE_FILE_FAILED_MSG, label, result.failure)
        return TomlHandle.invalid()
    logger.debug("Loaded %s (%d root key(s))", label, len(result.root))
    return TomlHandle(result.root)
