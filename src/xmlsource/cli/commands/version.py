# topmark:header:start
#
#   project      : XmlSource
#   file         : version.py
#   file_relpath : src/xmlsource/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlSource `version` command.

Prints the current XmlSource version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from xmlsource.constants import XMLSOURCE_VERSION


@click.command(
    name="version",
    help="Show the current version of XmlSource.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Emit the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of XmlSource.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    if as_json:
        click.echo(json.dumps({"version": XMLSOURCE_VERSION}))
    else:
        click.echo(click.style(XMLSOURCE_VERSION, bold=True))
