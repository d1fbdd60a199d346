# topmark:header:start
#
#   project      : XmlSource
#   file         : keys.py
#   file_relpath : src/xmlsource/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hierarchical configuration keys.

Configuration keys are flat strings whose segments are joined by
`KEY_DELIMITER`. A settings entry for profile ``(Default)`` of setting ``Bob``
becomes ``Bob:(Default)``.

These helpers are pure and perform no I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

KEY_DELIMITER: Final[str] = ":"


def compose_key(context: Iterable[str], name: str) -> str:
    """Join a context stack and a terminal segment into one key.

    Args:
        context (Iterable[str]): Path segments ordered root first, i.e. the order in
            which they were pushed onto the stack.
        name (str): Terminal segment.

    Returns:
        str: The delimited key, e.g. ``"Bob:(Default)"``.
    """
    return KEY_DELIMITER.join([*context, name])


def combine(*segments: str) -> str:
    """Join path segments with `KEY_DELIMITER`."""
    return KEY_DELIMITER.join(segments)


def get_section_key(path: str) -> str:
    """Return the last segment of ``path``.

    Args:
        path (str): A delimited key.

    Returns:
        str: The segment after the last delimiter, or ``path`` itself when it
        holds no delimiter.
    """
    return path.rpartition(KEY_DELIMITER)[2]


def get_parent_path(path: str) -> str | None:
    """Return ``path`` without its last segment, or None for a top-level key."""
    parent, sep, _ = path.rpartition(KEY_DELIMITER)
    return parent if sep else None
