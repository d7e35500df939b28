# topmark:header:start
#
#   project      : TypedToml
#   file         : constants.py
#   file_relpath : src/typedtoml/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypedToml Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TYPEDTOML_VERSION: str = get_version("typedtoml")
except PackageNotFoundError:  # running from a source checkout without metadata
    TYPEDTOML_VERSION = "0.0.0"

# Environment variable consulted by `typedtoml.core.logging.resolve_env_log_level`:
LOG_LEVEL_ENV_VAR: Final[str] = "TYPEDTOML_LOG_LEVEL"

# Diagnostic lines emitted by the loader facade (one per failed load):
PARSE_STRING_FAILED_MSG: Final[str] = "Failed to parse TOML string: %s"
PARSE_FILE_FAILED_MSG: Final[str] = "Failed to parse TOML file '%s': %s"
READ_FILE_FAILED_MSG: Final[str] = "Failed to read TOML file: %s"
