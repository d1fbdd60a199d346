# topmark:header:start
#
#   project      : XmlSource
#   file         : dump.py
#   file_relpath : src/xmlsource/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlSource `dump` command.

Builds a layered configuration from settings and config files and prints the
merged, flattened result. Settings files are registered first and config files
after them, so config files override settings defaults; within each group the
command-line order is kept.

Config files are interpreted with the built-in `KeyValueParser`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import ParseError

import click
from defusedxml import DefusedXmlException

from xmlsource.builder import ConfigurationBuilder
from xmlsource.cli.errors import (
    XmlSourceConfigError,
    XmlSourceDataError,
    XmlSourceFileNotFoundError,
    XmlSourceIOError,
)
from xmlsource.core.errors import ConfigFileNotFoundError, DuplicateKeyError, InvalidConfigPathError
from xmlsource.core.logging import get_logger
from xmlsource.parsers.keyvalue import KeyValueParser
from xmlsource.render import OutputFormat, render

if TYPE_CHECKING:
    from xmlsource.builder import ConfigurationRoot
    from xmlsource.core.logging import XmlSourceLogger

logger: XmlSourceLogger = get_logger(__name__)


@click.command(
    name="dump",
    help="Flatten XML settings and config files and print the merged key/value pairs.",
)
@click.option(
    "--settings",
    "settings_files",
    multiple=True,
    metavar="PATH",
    help="Settings file (Setting/Value/Profile schema). Repeatable.",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    metavar="PATH",
    help="Generic config file parsed with add/remove key-value sections. Repeatable.",
)
@click.option(
    "--optional",
    is_flag=True,
    default=False,
    help="Treat missing files as empty instead of failing.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
@click.option(
    "--section",
    default=None,
    metavar="KEY",
    help="Only print entries below this section key, with the section prefix removed.",
)
def dump_command(
    *,
    settings_files: tuple[str, ...],
    config_files: tuple[str, ...],
    optional: bool,
    output_format: str,
    section: str | None,
) -> None:
    """Build the configuration and print it.

    Args:
        settings_files (tuple[str, ...]): Settings files, lowest precedence first.
        config_files (tuple[str, ...]): Generic config files, applied after settings files.
        optional (bool): Tolerate missing files.
        output_format (str): One of the `OutputFormat` values.
        section (str | None): Optional section prefix to filter on.

    Raises:
        XmlSourceConfigError: On empty paths or duplicate keys.
        XmlSourceFileNotFoundError: When a required file is missing.
        XmlSourceDataError: When a document is not well-formed XML or uses a
            forbidden construct such as an entity declaration.
        XmlSourceIOError: When a file cannot be read.
    """
    try:
        root: ConfigurationRoot = _build(settings_files, config_files, optional=optional)
    except InvalidConfigPathError as exc:
        raise XmlSourceConfigError(str(exc)) from exc
    except ConfigFileNotFoundError as exc:
        raise XmlSourceFileNotFoundError(str(exc)) from exc
    except DuplicateKeyError as exc:
        raise XmlSourceConfigError(str(exc)) from exc
    except ParseError as exc:
        raise XmlSourceDataError(f"Malformed XML: {exc}") from exc
    except DefusedXmlException as exc:
        raise XmlSourceDataError(f"Forbidden XML construct: {exc}") from exc
    except OSError as exc:
        raise XmlSourceIOError(str(exc)) from exc

    entries = root.get_section(section) if section else root
    logger.info("Rendering %d entries as %s", len(entries), output_format)
    click.echo(render(entries, OutputFormat(output_format.lower())), nl=False)


def _build(
    settings_files: tuple[str, ...],
    config_files: tuple[str, ...],
    *,
    optional: bool,
) -> ConfigurationRoot:
    builder = ConfigurationBuilder()
    for path in settings_files:
        builder.add_settings_file(path, optional)
    for path in config_files:
        builder.add_config_file(path, optional, KeyValueParser())
    return builder.build()
