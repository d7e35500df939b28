# topmark:header:start
#
#   project      : TypedToml
#   file         : main.py
#   file_relpath : src/typedtoml/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the TypedToml CLI.

Group-level options are initialized once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v``/``-q``.
- ``log_level``: internal logging level from ``TYPEDTOML_LOG_LEVEL``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typedtoml.cli.commands.check import check_command
from typedtoml.cli.commands.get import get_command
from typedtoml.cli.commands.keys import keys_command
from typedtoml.cli.commands.version import version_command
from typedtoml.cli.options import common_verbose_options, resolve_verbosity
from typedtoml.core.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from typedtoml.core.logging import TypedTomlLogger

logger: TypedTomlLogger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (verbosity and logging) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TypedToml CLI: typed, read-only access to TOML documents.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the TypedToml CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'typedtoml get FILE PATH' to read a value.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(keys_command)

cli.add_command(get_command)

if __name__ == "__main__":
    cli()
