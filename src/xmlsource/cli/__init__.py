# topmark:header:start
#
#   project      : XmlSource
#   file         : __init__.py
#   file_relpath : src/xmlsource/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for XmlSource."""

from __future__ import annotations
