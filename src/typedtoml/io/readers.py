# topmark:header:start
#
#   project      : TypedToml
#   file         : readers.py
#   file_relpath : src/typedtoml/io/readers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read TOML sources from the filesystem.

The loader facade never lets an I/O error escape: it asks
[`read_toml_text`][typedtoml.io.readers.read_toml_text] for ``(text, error)`` and turns
an error into an invalid handle plus one diagnostic line.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from typedtoml.core.logging import get_logger

if TYPE_CHECKING:
    from os import PathLike

    from typedtoml.core.logging import TypedTomlLogger

logger: TypedTomlLogger = get_logger(__name__)

# A leading UTF-8 BOM is tolerated and dropped.
TOML_FILE_ENCODING: str = "utf-8-sig"


def decode_toml_bytes(data: bytes) -> str:
    """Decode TOML source bytes as strict UTF-8.

    Raises:
        UnicodeDecodeError: If ``data`` is not well-formed UTF-8.
    """
    return data.decode(TOML_FILE_ENCODING)


def read_toml_text(path: str | PathLike[str]) -> tuple[str | None, Exception | None]:
    """Read a TOML file as UTF-8 text.

    Args:
        path (str | PathLike[str]): Path to a TOML document.

    Returns:
        A tuple ``(text, error)`` where exactly one element is not ``None``:

        - ``text`` is the decoded document text.
        - ``error`` is the ``OSError`` raised while reading, or the
          ``UnicodeDecodeError`` raised while decoding.

    Notes:
        This function does not log at error level; reporting the failure is
        the caller's decision.
    """
    file_path = Path(path)
    try:
        data: bytes = file_path.read_bytes()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", file_path, exc)
        return None, exc

    try:
        text: str = decode_toml_bytes(data)
    except UnicodeDecodeError as exc:
        logger.debug("Cannot decode %s as UTF-8: %s", file_path, exc)
        return None, exc

    logger.trace("Read %d byte(s) from %s", len(data), file_path)
    return text, None
