# topmark:header:start
#
#   project      : XmlSource
#   file         : base.py
#   file_relpath : src/xmlsource/parsers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser strategy protocol for generic config files.

A generic config file is any well-formed XML document. XmlSource itself does not
know what its elements mean: each top-level child of the root is offered to an
ordered list of parser strategies, and the **first** strategy whose
`ConfigurationParser.can_parse_element` returns True interprets it.

Contract for implementers:
    - ``context`` is a stack of key segments (``list[str]``, root first). Push with
      ``append`` before descending into children and ``pop`` on the way back; leave
      it as you found it.
    - ``results`` is shared by all strategies of one load. Use `ConfigData.add`
      to insert so that colliding keys fail loudly.
    - Recursion below the element handed in is the strategy's responsibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from xmlsource.core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from xml.etree.ElementTree import Element

    from xmlsource.core.data import ConfigData
    from xmlsource.core.logging import XmlSourceLogger

logger: XmlSourceLogger = get_logger(__name__)

# Key-segment stack threaded through element traversal.
ParseContext = list[str]


@runtime_checkable
class ConfigurationParser(Protocol):
    """Capability interface of a generic-config parser strategy."""

    def can_parse_element(self, element: Element) -> bool:
        """Return True if this strategy can interpret ``element``."""
        ...

    def parse_element(
        self,
        element: Element,
        context: ParseContext,
        results: ConfigData,
    ) -> None:
        """Interpret ``element`` and record its entries into ``results``."""
        ...


def local_name(element: Element) -> str:
    """Return the tag of ``element`` without its ``{namespace}`` prefix."""
    tag: str = element.tag
    return tag.rpartition("}")[2] if tag.startswith("{") else tag


def namespace_of(element: Element) -> str:
    """Return the namespace URI of ``element``, or an empty string."""
    tag: str = element.tag
    if tag.startswith("{"):
        return tag[1:].partition("}")[0]
    return ""


def qualified_name(namespace: str, name: str) -> str:
    """Return the ElementTree (Clark notation) name of ``name`` in ``namespace``."""
    return f"{{{namespace}}}{name}" if namespace else name


def dispatch_element(
    element: Element,
    parsers: Iterable[ConfigurationParser],
    context: ParseContext,
    results: ConfigData,
) -> bool:
    """Offer ``element`` to ``parsers`` in order; the first acceptor parses it.

    Later parsers are never consulted once one has accepted the element, even if
    that parser records nothing.

    Args:
        element (Element): The element to interpret.
        parsers (Iterable[ConfigurationParser]): Strategies in registration order.
        context (ParseContext): Current key-segment stack.
        results (ConfigData): Shared result mapping.

    Returns:
        bool: True if a parser accepted the element, False if it was dropped.
    """
    for parser in parsers:
        if parser.can_parse_element(element):
            logger.trace("<%s> handled by %s", local_name(element), type(parser).__name__)
            parser.parse_element(element, context, results)
            return True
    return False
