# topmark:header:start
#
#   project      : TypedToml
#   file         : options.py
#   file_relpath : src/typedtoml/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the TypedToml CLI.

This module centralizes reusable options (verbosity, value kind) and their
resolution logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from typedtoml.accessor.kinds import SCALAR_KINDS
from typedtoml.cli.errors import CliUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Kind names accepted by ``--type`` (lower-case ``ScalarKind`` names).
KIND_CHOICES: list[str] = [kind.name.lower() for kind in SCALAR_KINDS]


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``verbose_count`` if positive, ``-1`` if quiet, else ``0``.

    Raises:
        CliUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CliUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    if quiet_count > 0:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` counting options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def kind_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--type`` option selecting the scalar kind of a lookup."""
    return click.option(
        "--type",
        "type_name",
        type=click.Choice(KIND_CHOICES, case_sensitive=False),
        default="text",
        show_default=True,
        help="Scalar kind the value must have.",
    )(f)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the verbosity stored on the group context (``0`` if unset)."""
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))
