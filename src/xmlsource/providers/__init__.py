# topmark:header:start
#
#   project      : XmlSource
#   file         : __init__.py
#   file_relpath : src/xmlsource/providers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration providers: load one XML file into a flat `ConfigData`."""

from __future__ import annotations

from xmlsource.providers.base import FileConfigurationProvider
from xmlsource.providers.config_file import ConfigFileConfigurationProvider
from xmlsource.providers.settings_file import SettingsFileConfigurationProvider

__all__: list[str] = [
    "ConfigFileConfigurationProvider",
    "FileConfigurationProvider",
    "SettingsFileConfigurationProvider",
]
