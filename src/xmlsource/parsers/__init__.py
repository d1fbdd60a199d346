# topmark:header:start
#
#   project      : XmlSource
#   file         : __init__.py
#   file_relpath : src/xmlsource/parsers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser strategies for generic XML config files."""

from __future__ import annotations

from xmlsource.parsers.base import (
    ConfigurationParser,
    ParseContext,
    dispatch_element,
    local_name,
    namespace_of,
    qualified_name,
)
from xmlsource.parsers.keyvalue import KeyValueParser

__all__: list[str] = [
    "ConfigurationParser",
    "KeyValueParser",
    "ParseContext",
    "dispatch_element",
    "local_name",
    "namespace_of",
    "qualified_name",
]
