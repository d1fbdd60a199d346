# topmark:header:start
#
#   project      : XmlSource
#   file         : errors.py
#   file_relpath : src/xmlsource/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while registering and loading XML configuration sources.

Each error also derives from the matching builtin (``ValueError``,
``FileNotFoundError``, ``KeyError``) so callers that only know the builtin
contract keep working.

Malformed XML is *not* wrapped: `xml.etree.ElementTree.ParseError` propagates
unchanged from ``load()``.
"""

from __future__ import annotations


class XmlSourceError(Exception):
    """Base class for all XmlSource errors."""


class InvalidConfigPathError(XmlSourceError, ValueError):
    """Raised when a source is registered with a ``None`` or empty path."""

    def __init__(self, message: str = "Path for configuration cannot be null/empty.") -> None:
        super().__init__(message)


class ConfigFileNotFoundError(XmlSourceError, FileNotFoundError):
    """Raised when a required (non-optional) configuration file does not exist.

    Attributes:
        filename (str): The path that could not be found (set by ``FileNotFoundError``).
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not find configuration file. File: [{path}]")
        self.filename = path


class DuplicateKeyError(XmlSourceError, KeyError):
    """Raised when a key is inserted twice into the same `ConfigData`.

    Keys are compared case-insensitively, so ``Bob:(Default)`` and
    ``BOB:(default)`` collide.

    Attributes:
        key (str): The key being inserted.
        existing_key (str): The spelling already stored in the mapping.
    """

    def __init__(self, key: str, existing_key: str) -> None:
        super().__init__(key)
        self.key = key
        self.existing_key = existing_key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key
        if self.key == self.existing_key:
            return f"An item with the same key has already been added. Key: {self.key}"
        return (
            f"An item with the same key has already been added. "
            f"Key: {self.key} (conflicts with {self.existing_key})"
        )
