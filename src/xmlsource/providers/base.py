# topmark:header:start
#
#   project      : XmlSource
#   file         : base.py
#   file_relpath : src/xmlsource/providers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for file-backed configuration providers.

A provider is built from a source (see `xmlsource.sources`) and has two states:

- *unloaded*: constructed, ``data`` is empty;
- *loaded*: `FileConfigurationProvider.load` completed and ``data`` holds the
  flattened entries.

`FileConfigurationProvider.load` owns the file stream: it is opened here and
closed on every exit path, including parse errors. Subclasses only implement
`FileConfigurationProvider.load_stream`.

Providers are not safe for concurrent loads; the builder loads them one by one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, TYPE_CHECKING

from xmlsource.core.data import ConfigData
from xmlsource.core.errors import ConfigFileNotFoundError
from xmlsource.core.logging import get_logger

if TYPE_CHECKING:
    from xmlsource.core.logging import XmlSourceLogger
    from xmlsource.sources import FileConfigurationSource

logger: XmlSourceLogger = get_logger(__name__)


class FileConfigurationProvider(ABC):
    """Load one configuration file into a flat `ConfigData` mapping.

    Attributes:
        source (FileConfigurationSource): The source this provider was built from.
        data (ConfigData): Published entries; empty until loaded.
    """

    def __init__(self, source: FileConfigurationSource) -> None:
        self.source = source
        self.data: ConfigData = ConfigData()
        self._loaded: bool = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.source.path!r}, loaded={self._loaded})"

    @property
    def loaded(self) -> bool:
        """Whether `load` has completed successfully."""
        return self._loaded

    def load(self) -> None:
        """Open the source file and load it.

        A missing optional file publishes an empty mapping.

        Raises:
            ConfigFileNotFoundError: If the file is missing and the source is required.
            xml.etree.ElementTree.ParseError: If the document is not well-formed.
            DuplicateKeyError: If two entries resolve to the same key.
        """
        path = Path(self.source.path)
        if not path.is_file():
            if not self.source.optional:
                raise ConfigFileNotFoundError(self.source.path)
            logger.debug("Optional configuration file %s not found, skipping", path)
            self.data = ConfigData()
            self._loaded = True
            return

        logger.debug("Loading %s with %s", path, type(self).__name__)
        with path.open("rb") as stream:
            self.load_stream(stream)
        self._loaded = True
        logger.debug("Loaded %d entries from %s", len(self.data), path)

    @abstractmethod
    def load_stream(self, stream: IO[bytes]) -> None:
        """Parse ``stream`` and assign the result to ``self.data``.

        The caller owns ``stream`` and closes it after this method returns.
        """

    def try_get(self, key: str) -> str | None:
        """Return the value stored for ``key`` (any casing), or None."""
        return self.data.get(key)
