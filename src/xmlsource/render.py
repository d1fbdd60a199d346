# topmark:header:start
#
#   project      : XmlSource
#   file         : render.py
#   file_relpath : src/xmlsource/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render flattened configuration for display.

Flat keys such as ``Bob:(Default)`` are not valid bare TOML keys; tomlkit
quotes them as needed, so the TOML output stays a single flat table.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

import tomlkit

if TYPE_CHECKING:
    from collections.abc import Mapping


class OutputFormat(str, Enum):
    """Output formats supported by ``xmlsource dump``."""

    TEXT = "text"
    JSON = "json"
    TOML = "toml"


def to_text(mapping: Mapping[str, str]) -> str:
    """Render ``key = value`` lines, one per entry, in mapping order."""
    return "".join(f"{key} = {value}\n" for key, value in mapping.items())


def to_json(mapping: Mapping[str, str]) -> str:
    """Render ``mapping`` as an indented JSON object, preserving mapping order."""
    return json.dumps(dict(mapping.items()), indent=2, ensure_ascii=False) + "\n"


def to_toml(mapping: Mapping[str, str]) -> str:
    """Render ``mapping`` as a flat TOML document.

    Args:
        mapping (Mapping[str, str]): Flat configuration entries.

    Returns:
        str: The rendered TOML document.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in mapping.items():
        doc.add(key, value)
    return cast("str", cast("Any", tomlkit).dumps(doc))


def render(mapping: Mapping[str, str], output_format: OutputFormat) -> str:
    """Render ``mapping`` in ``output_format``."""
    if output_format is OutputFormat.JSON:
        return to_json(mapping)
    if output_format is OutputFormat.TOML:
        return to_toml(mapping)
    return to_text(mapping)
