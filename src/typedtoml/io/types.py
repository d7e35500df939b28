# topmark:header:start
#
#   project      : TypedToml
#   file         : types.py
#   file_relpath : src/typedtoml/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared TOML-related type aliases for the I/O package."""

from __future__ import annotations

import datetime
from typing import Any

# Plain-Python shapes produced by `tomlkit.TOMLDocument.unwrap()`:
TomlTable = dict[str, Any]
TomlTemporal = datetime.datetime | datetime.date | datetime.time
