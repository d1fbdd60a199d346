# topmark:header:start
#
#   project      : XmlSource
#   file         : data.py
#   file_relpath : src/xmlsource/core/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Case-insensitive, key-sorted mapping produced by configuration providers.

`ConfigData` is the flat ``key -> value`` result of loading one source:

- keys compare case-insensitively (``"Bob:(Default)" == "bob:(default)"``);
- iteration is ordered by the folded key, not by insertion;
- the first spelling of a key is preserved and reported back;
- `ConfigData.add` refuses duplicates, while item assignment overwrites.

Example:
    ```python
    data = ConfigData()
    data.add("Foo:(Default)", "Joe")
    data.add("Bob:(Default)", "John")
    assert list(data) == ["Bob:(Default)", "Foo:(Default)"]
    assert data["BOB:(DEFAULT)"] == "John"
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping

from xmlsource.core.errors import DuplicateKeyError


def fold_key(key: str) -> str:
    """Return the comparison form of ``key`` (ordinal, case-insensitive).

    Each character is upper-cased on its own. Characters whose upper case is not
    a single character (``"ß"`` -> ``"SS"``) are kept as they are, so the folded
    key always has the same length as ``key`` and ``"Straße"`` never matches
    ``"STRASSE"``.

    Args:
        key (str): Key to fold.

    Returns:
        str: The folded key, used for equality and ordering.
    """
    return "".join(upper if len(upper := char.upper()) == 1 else char for char in key)


class ConfigData(MutableMapping[str, str]):
    """Mutable ``str -> str`` mapping with case-insensitive keys and sorted iteration."""

    __slots__ = ("_entries",)

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        # folded key -> (original key, value)
        self._entries: dict[str, tuple[str, str]] = {}
        if initial is not None:
            for key, value in initial.items():
                self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Insert a new entry.

        Args:
            key (str): Key to insert.
            value (str): Value to associate with ``key``.

        Raises:
            DuplicateKeyError: If ``key`` is already present under any casing.
        """
        folded: str = fold_key(key)
        existing: tuple[str, str] | None = self._entries.get(folded)
        if existing is not None:
            raise DuplicateKeyError(key, existing[0])
        self._entries[folded] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._entries[fold_key(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded: str = fold_key(key)
        existing: tuple[str, str] | None = self._entries.get(folded)
        original: str = existing[0] if existing is not None else key
        self._entries[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        del self._entries[fold_key(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold_key(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._entries):
            yield self._entries[folded][0]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
