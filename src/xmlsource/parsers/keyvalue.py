# topmark:header:start
#
#   project      : XmlSource
#   file         : keyvalue.py
#   file_relpath : src/xmlsource/parsers/keyvalue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Key/value parser for ``appSettings``-style sections.

Handles sections made of ``add`` / ``remove`` action elements:

```xml
<configuration>
  <appSettings>
    <add key="Greeting" value="Hello"/>
    <add key="Retries" value="3"/>
    <remove key="Retries"/>
  </appSettings>
</configuration>
```

yields ``appSettings:Greeting = Hello``. Section tags become key segments, so
nested sections produce deeper keys (``outer:inner:Key``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xmlsource.constants import KEYVALUE_KEY_ATTRIBUTE, KEYVALUE_VALUE_ATTRIBUTE
from xmlsource.core.keys import compose_key
from xmlsource.core.logging import get_logger
from xmlsource.parsers.base import local_name

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from xmlsource.core.data import ConfigData
    from xmlsource.core.logging import XmlSourceLogger
    from xmlsource.parsers.base import ParseContext

logger: XmlSourceLogger = get_logger(__name__)

ACTION_ADD = "add"
ACTION_REMOVE = "remove"
SUPPORTED_ACTIONS: frozenset[str] = frozenset({ACTION_ADD, ACTION_REMOVE})


class KeyValueParser:
    """Parse ``<add key=... value=.../>`` and ``<remove key=.../>`` elements.

    Attributes:
        key_attribute (str): Name of the attribute carrying the key.
        value_attribute (str): Name of the attribute carrying the value.
    """

    def __init__(
        self,
        key_attribute: str = KEYVALUE_KEY_ATTRIBUTE,
        value_attribute: str = KEYVALUE_VALUE_ATTRIBUTE,
    ) -> None:
        self.key_attribute = key_attribute
        self.value_attribute = value_attribute

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(key_attribute={self.key_attribute!r}, "
            f"value_attribute={self.value_attribute!r})"
        )

    def can_parse_element(self, element: Element) -> bool:
        """Return True if ``element`` holds an ``add``/``remove`` action with a key attribute."""
        return self._has_keyed_action(element)

    def parse_element(
        self,
        element: Element,
        context: ParseContext,
        results: ConfigData,
    ) -> None:
        """Record the entries found in ``element`` into ``results``.

        Args:
            element (Element): A section or action element.
            context (ParseContext): Key segments of the enclosing sections.
            results (ConfigData): Shared result mapping.

        Raises:
            DuplicateKeyError: If an ``add`` targets a key that already exists.
        """
        if len(element) == 0:
            self._apply_action(element, context, results)
            return

        context.append(local_name(element))
        try:
            for child in element:
                if not self._has_keyed_action(child):
                    logger.trace("Ignoring <%s> without keyed actions", local_name(child))
                    continue
                self.parse_element(child, context, results)
        finally:
            context.pop()

    def _has_keyed_action(self, element: Element) -> bool:
        return any(
            local_name(node) in SUPPORTED_ACTIONS and node.get(self.key_attribute) is not None
            for node in element.iter()
        )

    def _apply_action(self, element: Element, context: ParseContext, results: ConfigData) -> None:
        key: str | None = element.get(self.key_attribute)
        if key is None:
            return

        action: str = local_name(element)
        full_key: str = compose_key(context, key)
        if action == ACTION_ADD:
            value: str | None = element.get(self.value_attribute)
            if value is None:
                logger.trace("Skipping <add key=%r> without %r", key, self.value_attribute)
                return
            results.add(full_key, value)
        elif action == ACTION_REMOVE:
            results.pop(full_key, None)
        else:
            logger.trace("Unsupported action <%s> for key %r", action, key)
