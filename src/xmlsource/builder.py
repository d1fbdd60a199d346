# topmark:header:start
#
#   project      : XmlSource
#   file         : builder.py
#   file_relpath : src/xmlsource/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layered configuration builder.

`ConfigurationBuilder` collects sources in registration order and, on
`ConfigurationBuilder.build`, turns each into a provider, loads it, and wraps
the providers in a read-only `ConfigurationRoot`.

Precedence: a key defined by a later source overrides the same key (any casing)
from an earlier one.

Example:
    ```python
    from xmlsource import ConfigurationBuilder, KeyValueParser

    root = (
        ConfigurationBuilder()
        .add_settings_file("defaults.settings", optional=False)
        .add_config_file("app.config", True, KeyValueParser())
        .build()
    )
    root["Bob:(Default)"]
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from xmlsource.core.data import fold_key
from xmlsource.core.keys import KEY_DELIMITER
from xmlsource.core.logging import get_logger
from xmlsource.sources import add_config_file, add_settings_file

if TYPE_CHECKING:
    from collections.abc import Sequence

    from xmlsource.core.logging import XmlSourceLogger
    from xmlsource.parsers.base import ConfigurationParser
    from xmlsource.providers.base import FileConfigurationProvider
    from xmlsource.sources import FileConfigurationSource

logger: XmlSourceLogger = get_logger(__name__)


class ConfigurationBuilder:
    """Collect configuration sources and build a merged `ConfigurationRoot`."""

    def __init__(self) -> None:
        self._sources: list[FileConfigurationSource] = []

    @property
    def sources(self) -> tuple[FileConfigurationSource, ...]:
        """Registered sources, in registration order."""
        return tuple(self._sources)

    def add(self, source: FileConfigurationSource) -> ConfigurationBuilder:
        """Register ``source`` and return the builder."""
        self._sources.append(source)
        return self

    def add_config_file(
        self,
        path: str | None,
        optional: bool,
        *parsers: ConfigurationParser,
    ) -> ConfigurationBuilder:
        """Register a generic config file (see `xmlsource.sources.add_config_file`)."""
        return add_config_file(self, path, optional, *parsers)

    def add_settings_file(self, path: str | None, optional: bool) -> ConfigurationBuilder:
        """Register a settings file (see `xmlsource.sources.add_settings_file`)."""
        return add_settings_file(self, path, optional)

    def build(self) -> ConfigurationRoot:
        """Build and load a provider for every registered source.

        Returns:
            ConfigurationRoot: Merged, read-only view over the loaded providers.

        Raises:
            ConfigFileNotFoundError: If a required file disappeared since registration.
            xml.etree.ElementTree.ParseError: If a document is not well-formed.
            DuplicateKeyError: If a single document yields the same key twice.
        """
        providers: list[FileConfigurationProvider] = []
        for source in self._sources:
            provider: FileConfigurationProvider = source.build(self)
            provider.load()
            providers.append(provider)
        logger.debug("Built configuration from %d provider(s)", len(providers))
        return ConfigurationRoot(providers)


class ConfigurationRoot(Mapping[str, str]):
    """Read-only merged view over loaded providers.

    Lookups are case-insensitive; the last provider defining a key wins.
    Iteration is ordered by key.
    """

    def __init__(self, providers: Sequence[FileConfigurationProvider]) -> None:
        self._providers: tuple[FileConfigurationProvider, ...] = tuple(providers)
        merged: dict[str, tuple[str, str]] = {}
        for provider in self._providers:
            for key, value in provider.data.items():
                merged[fold_key(key)] = (key, value)
        self._merged = merged

    @property
    def providers(self) -> tuple[FileConfigurationProvider, ...]:
        """Providers in precedence order (lowest first)."""
        return self._providers

    def __getitem__(self, key: str) -> str:
        return self._merged[fold_key(key)][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold_key(key) in self._merged

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._merged):
            yield self._merged[folded][0]

    def __len__(self) -> int:
        return len(self._merged)

    def get_section(self, prefix: str) -> dict[str, str]:
        """Return the entries below ``prefix`` with the prefix stripped.

        Args:
            prefix (str): Section key, e.g. ``"Bob"``.

        Returns:
            dict[str, str]: ``{"(Default)": "John", ...}`` for ``prefix="Bob"``,
            ordered by key.
        """
        folded_prefix: str = fold_key(prefix + KEY_DELIMITER)
        # fold_key preserves length, so the folded prefix marks the cut in the key too
        offset: int = len(folded_prefix)
        return {
            key[offset:]: self[key]
            for key in self
            if fold_key(key).startswith(folded_prefix)
        }
