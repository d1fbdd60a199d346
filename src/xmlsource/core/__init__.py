# topmark:header:start
#
#   project      : XmlSource
#   file         : __init__.py
#   file_relpath : src/xmlsource/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, I/O-free primitives shared across XmlSource.

Included modules:

- ``keys``
  Key delimiter and helpers to compose and split hierarchical keys.

- ``data``
  `ConfigData`, the case-insensitive, key-sorted result mapping.

- ``errors``
  The XmlSource exception hierarchy.

- ``logging``
  TRACE-capable logger class and colored formatter.

Design goals:

- Keep this package free of XML and CLI dependencies.
- Safe to import from anywhere (parsers, providers, CLI, tests).
"""

from __future__ import annotations
