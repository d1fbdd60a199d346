# topmark:header:start
#
#   project      : XmlSource
#   file         : sources.py
#   file_relpath : src/xmlsource/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration sources for XML config and settings files.

A source is an immutable description of *where* configuration comes from and
*how* to build a provider for it. Sources are registered with a
`xmlsource.builder.ConfigurationBuilder` through `add_config_file` /
`add_settings_file`, which validate eagerly:

- a ``None`` or empty path raises `InvalidConfigPathError` before any I/O;
- a required (``optional=False``) path that is not an existing file raises
  `ConfigFileNotFoundError`.

XML is not read at registration time; parse errors surface when the builder
loads the provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from xmlsource.core.errors import ConfigFileNotFoundError, InvalidConfigPathError
from xmlsource.core.logging import get_logger
from xmlsource.providers.config_file import ConfigFileConfigurationProvider
from xmlsource.providers.settings_file import SettingsFileConfigurationProvider

if TYPE_CHECKING:
    from xmlsource.builder import ConfigurationBuilder
    from xmlsource.core.logging import XmlSourceLogger
    from xmlsource.parsers.base import ConfigurationParser
    from xmlsource.providers.base import FileConfigurationProvider

logger: XmlSourceLogger = get_logger(__name__)


@dataclass(frozen=True)
class FileConfigurationSource(ABC):
    """Common fields of file-backed sources.

    Attributes:
        path (str): Path of the file to load.
        optional (bool): If True, a missing file yields an empty configuration.
    """

    path: str
    optional: bool = False

    @abstractmethod
    def build(self, builder: ConfigurationBuilder) -> FileConfigurationProvider:
        """Return a provider for this source."""


@dataclass(frozen=True)
class ConfigFileConfigurationSource(FileConfigurationSource):
    """Source for a generic ``*.config`` file.

    Attributes:
        parsers (tuple[ConfigurationParser, ...]): Parser strategies, tried in order.
    """

    parsers: tuple[ConfigurationParser, ...] = field(default_factory=tuple)

    def build(self, builder: ConfigurationBuilder) -> ConfigFileConfigurationProvider:
        """Return a `ConfigFileConfigurationProvider` for this source."""
        return ConfigFileConfigurationProvider(self)


@dataclass(frozen=True)
class SettingsFileConfigurationSource(FileConfigurationSource):
    """Source for a ``*.settings`` file."""

    def build(self, builder: ConfigurationBuilder) -> SettingsFileConfigurationProvider:
        """Return a `SettingsFileConfigurationProvider` for this source."""
        return SettingsFileConfigurationProvider(self)


def validate_source_path(path: str | None, optional: bool) -> str:
    """Validate a source path at registration time.

    Args:
        path (str | None): Path to validate.
        optional (bool): Whether the file may be missing.

    Returns:
        str: The validated path.

    Raises:
        InvalidConfigPathError: If ``path`` is None or empty.
        ConfigFileNotFoundError: If ``optional`` is False and ``path`` is not an existing file.
    """
    if not path:
        raise InvalidConfigPathError()

    if not optional and not Path(path).is_file():
        raise ConfigFileNotFoundError(path)

    return path


def add_config_file(
    builder: ConfigurationBuilder,
    path: str | None,
    optional: bool,
    *parsers: ConfigurationParser,
) -> ConfigurationBuilder:
    """Register a generic config file with ``builder``.

    Args:
        builder (ConfigurationBuilder): Builder to add the source to.
        path (str | None): Path to the ``*.config`` file.
        optional (bool): True if the file is optional.
        *parsers (ConfigurationParser): Parser strategies used to interpret the file.

    Returns:
        ConfigurationBuilder: ``builder``, for chaining.
    """
    validated: str = validate_source_path(path, optional)
    logger.debug(
        "Registering config file %s (optional=%s, parsers=%d)", validated, optional, len(parsers)
    )
    source = ConfigFileConfigurationSource(path=validated, optional=optional, parsers=parsers)
    return builder.add(source)


def add_settings_file(
    builder: ConfigurationBuilder,
    path: str | None,
    optional: bool,
) -> ConfigurationBuilder:
    """Register a settings file with ``builder``.

    Args:
        builder (ConfigurationBuilder): Builder to add the source to.
        path (str | None): Path to the ``*.settings`` file.
        optional (bool): True if the file is optional.

    Returns:
        ConfigurationBuilder: ``builder``, for chaining.
    """
    validated: str = validate_source_path(path, optional)
    logger.debug("Registering settings file %s (optional=%s)", validated, optional)
    return builder.add(SettingsFileConfigurationSource(path=validated, optional=optional))
