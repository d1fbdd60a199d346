# topmark:header:start
#
#   project      : XmlSource
#   file         : main.py
#   file_relpath : src/xmlsource/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlSource command-line interface.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

import click

from xmlsource.cli.commands.dump import dump_command
from xmlsource.cli.commands.version import version_command
from xmlsource.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from xmlsource.core.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (log level & color) on the Click context.

    An explicit ``-v``/``-q`` wins over ``XMLSOURCE_LOG_LEVEL``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if (level_env is not None and not verbose and not quiet) else level_cli
    ctx.obj["log_level"] = level

    color_enabled: bool = not no_color
    ctx.obj["color_enabled"] = color_enabled
    ctx.color = color_enabled

    setup_logging(level=level, color=color_enabled)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Flatten XML config and settings files into key/value configuration.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the XmlSource CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'xmlsource dump --settings FILE' to flatten a settings file.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(dump_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
