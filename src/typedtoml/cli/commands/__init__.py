# topmark:header:start
#
#   project      : TypedToml
#   file         : __init__.py
#   file_relpath : src/typedtoml/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the TypedToml CLI (``check``, ``keys``, ``get``, ``version``)."""
