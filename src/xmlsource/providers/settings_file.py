# topmark:header:start
#
#   project      : XmlSource
#   file         : settings_file.py
#   file_relpath : src/xmlsource/providers/settings_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Provider for ``*.settings`` files.

The settings schema is fixed:

```xml
<SettingsFile xmlns="http://schemas.microsoft.com/VisualStudio/2004/01/settings"
              CurrentProfile="(Default)">
  <Profiles />
  <Settings>
    <Setting Name="Bob" Type="System.String" Scope="User">
      <Value Profile="(Default)">John</Value>
      <Value Profile="AnotherProfile">Johanna</Value>
    </Setting>
    <Setting Name="Foo" Type="System.String" Scope="Application">
      <Value Profile="(Default)">Joe</Value>
    </Setting>
  </Settings>
</SettingsFile>
```

which flattens to:

| key                  | value   |
|----------------------|---------|
| Bob:(Default)        | John    |
| Bob:AnotherProfile   | Johanna |
| Foo:(Default)        | Joe     |

``Setting`` and ``Value`` are matched in the namespace of the root element,
whatever URI the producing tool used. ``Type`` and ``Scope`` are not emitted.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from defusedxml import ElementTree as DefusedET

from xmlsource.constants import (
    SETTINGS_ELEMENT,
    SETTINGS_NAME_ATTRIBUTE,
    SETTINGS_PROFILE_ATTRIBUTE,
    SETTINGS_VALUE_ELEMENT,
)
from xmlsource.core.data import ConfigData
from xmlsource.core.keys import compose_key
from xmlsource.core.logging import get_logger
from xmlsource.parsers.base import namespace_of, qualified_name
from xmlsource.providers.base import FileConfigurationProvider

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from xmlsource.core.logging import XmlSourceLogger
    from xmlsource.parsers.base import ParseContext

logger: XmlSourceLogger = get_logger(__name__)


class SettingsFileConfigurationProvider(FileConfigurationProvider):
    """Flatten a settings file into ``<Name>:<Profile>`` keys."""

    def load_stream(self, stream: IO[bytes]) -> None:
        """Parse ``stream`` and publish one entry per ``(Name, Profile)`` pair.

        A ``Setting`` without ``Name`` is skipped entirely; a ``Value`` without
        ``Profile`` is skipped on its own and its siblings are still read.

        Args:
            stream (IO[bytes]): Readable binary stream holding the settings document.

        Raises:
            xml.etree.ElementTree.ParseError: If the document is not well-formed.
            DuplicateKeyError: If a ``(Name, Profile)`` pair occurs twice.
        """
        root: Element = DefusedET.parse(stream).getroot()

        ns: str = namespace_of(root)
        setting_tag: str = qualified_name(ns, SETTINGS_ELEMENT)
        value_tag: str = qualified_name(ns, SETTINGS_VALUE_ELEMENT)

        context: ParseContext = []
        results = ConfigData()

        # Element.iter() includes the element itself; only descendants count.
        for setting in root.iter(setting_tag):
            if setting is root:
                continue

            name: str | None = setting.get(SETTINGS_NAME_ATTRIBUTE)
            if name is None:
                logger.trace("Skipping <%s> without %s", SETTINGS_ELEMENT, SETTINGS_NAME_ATTRIBUTE)
                continue

            values: list[Element] = setting.findall(value_tag)

            context.append(name)
            for value in values:
                profile: str | None = value.get(SETTINGS_PROFILE_ATTRIBUTE)
                if profile is None:
                    logger.trace(
                        "Skipping value of %r without %s", name, SETTINGS_PROFILE_ATTRIBUTE
                    )
                    continue
                results.add(compose_key(context, profile), _element_text(value))
            context.pop()

        self.data = results


def _element_text(element: Element) -> str:
    """Return the concatenated text content of ``element`` and its descendants."""
    return "".join(element.itertext())
