# topmark:header:start
#
#   project      : XmlSource
#   file         : config_file.py
#   file_relpath : src/xmlsource/providers/config_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Provider for generic ``*.config`` XML files.

Only the **direct children** of the document root are inspected. Each child is
offered to the source's parser strategies in registration order (see
`xmlsource.parsers.base.dispatch_element`); children no strategy accepts are
dropped silently. The provider never descends on its own, a strategy that needs
grandchildren walks them itself.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from defusedxml import ElementTree as DefusedET

from xmlsource.core.data import ConfigData
from xmlsource.core.logging import get_logger
from xmlsource.parsers.base import dispatch_element, local_name
from xmlsource.providers.base import FileConfigurationProvider

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from xmlsource.core.logging import XmlSourceLogger
    from xmlsource.parsers.base import ConfigurationParser, ParseContext
    from xmlsource.sources import ConfigFileConfigurationSource

logger: XmlSourceLogger = get_logger(__name__)


class ConfigFileConfigurationProvider(FileConfigurationProvider):
    """Flatten a generic config file through pluggable parser strategies."""

    def __init__(self, source: ConfigFileConfigurationSource) -> None:
        super().__init__(source)
        self._parsers: tuple[ConfigurationParser, ...] = source.parsers

    def load_stream(self, stream: IO[bytes]) -> None:
        """Parse ``stream`` and publish the entries produced by the parsers.

        Args:
            stream (IO[bytes]): Readable binary stream holding the XML document.

        Raises:
            xml.etree.ElementTree.ParseError: If the document is not well-formed.
            DuplicateKeyError: If two parser outputs collide.
        """
        root: Element = DefusedET.parse(stream).getroot()

        context: ParseContext = []
        results = ConfigData()

        for child in root:
            if not dispatch_element(child, self._parsers, context, results):
                logger.debug("No parser accepted <%s>, dropping it", local_name(child))

        self.data = results
