# topmark:header:start
#
#   project      : XmlSource
#   file         : __init__.py
#   file_relpath : src/xmlsource/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlSource package.

XmlSource flattens hierarchical XML documents into ordered, case-insensitive
``key -> value`` mappings for layered configuration. It reads two shapes:

- generic ``*.config`` files, interpreted by pluggable parser strategies;
- ``*.settings`` files (``Setting``/``Value``/``Profile``), flattened to
  ``<Name>:<Profile>`` keys.
"""

from __future__ import annotations

from xmlsource.builder import ConfigurationBuilder, ConfigurationRoot
from xmlsource.core.data import ConfigData
from xmlsource.core.errors import (
    ConfigFileNotFoundError,
    DuplicateKeyError,
    InvalidConfigPathError,
    XmlSourceError,
)
from xmlsource.core.keys import KEY_DELIMITER, compose_key
from xmlsource.parsers import ConfigurationParser, KeyValueParser
from xmlsource.providers import (
    ConfigFileConfigurationProvider,
    FileConfigurationProvider,
    SettingsFileConfigurationProvider,
)
from xmlsource.sources import (
    ConfigFileConfigurationSource,
    FileConfigurationSource,
    SettingsFileConfigurationSource,
    add_config_file,
    add_settings_file,
)

__all__: list[str] = [
    "KEY_DELIMITER",
    "ConfigData",
    "ConfigFileConfigurationProvider",
    "ConfigFileConfigurationSource",
    "ConfigFileNotFoundError",
    "ConfigurationBuilder",
    "ConfigurationParser",
    "ConfigurationRoot",
    "DuplicateKeyError",
    "FileConfigurationProvider",
    "FileConfigurationSource",
    "InvalidConfigPathError",
    "KeyValueParser",
    "SettingsFileConfigurationProvider",
    "SettingsFileConfigurationSource",
    "XmlSourceError",
    "add_config_file",
    "add_settings_file",
    "compose_key",
]
