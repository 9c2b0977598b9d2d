# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Key-value storage and the line records of a config file.

A section keeps two views of the same keys: the ordered list (what gets
iterated and written) and the dict of cells (what gets looked up).
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Sequence

from .consts import LineKind
from .value import ConfigValue, Scalar

__all__ = [
    'ConfigLine', 'ConfigSection', 'TrackedSection', 'KeyNotFound',
    'find', 'removeElement'
]

MISSING: Any = object()


class KeyNotFound(KeyError):
    """Lookup of a key the section does not hold."""
    pass


def find[T](seq: Sequence[T], value: T) -> int:
    """Index of `value` in `seq`, or -1."""
    for i, elem in enumerate(seq):
        if elem == value:
            return i
    return -1


def removeElement[T](seq: list[T], value: T) -> None:
    """Erase the first occurrence of `value`, if any."""
    if (i := find(seq, value)) != -1:
        del seq[i]


@dataclass
class ConfigLine:
    kind: LineKind
    # key name for VALUE, bare name for SECTION, raw text otherwise.
    content: str = ''


class ConfigSection(Mapping[str, ConfigValue]):
    """Ordered `str: ConfigValue` storage of one flat config,
    or of one section of a sectioned config.

    Unlike a plain dict, `self[key]` never raises: an absent key is
    created with an empty value. Use `get()` or `in` for lookups
    that must not create anything.
    """
    def __init__(self) -> None:
        self._keys: list[str] = []
        self._dict: dict[str, ConfigValue] = {}

    def _append(self, key: str, cell: ConfigValue) -> None:
        self._keys.append(key)
        self._dict[key] = cell

    def insert(self, key: str, value: Scalar | ConfigValue) -> None:
        """Add `key` only if it is not there yet (first write wins)."""
        if key not in self._dict:
            self._append(key, ConfigValue.of(value))

    def update(self, key: str, value: Scalar | ConfigValue) -> None:
        """Replace the value of an existing `key`, keeping its position."""
        if key in self._dict:
            self._dict[key] = ConfigValue.of(value)

    def __getitem__(self, key: str) -> ConfigValue:
        if key not in self._dict:
            self._append(key, ConfigValue())
        return self._dict[key]

    def __setitem__(self, key: str, value: Scalar | ConfigValue) -> None:
        if key not in self._dict:
            self._append(key, ConfigValue.of(value))
        else:
            self._dict[key] = ConfigValue.of(value)

    def get(self, key: str, default: Any = MISSING) -> ConfigValue:
        if key in self._dict:
            return self._dict[key]
        if default is MISSING:
            raise KeyNotFound(key)
        return default

    def remove(self, key: str) -> None:
        if key in self._dict:
            removeElement(self._keys, key)
            del self._dict[key]

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def pop(self, key: str, default: Any = MISSING) -> str:
        """Remove `key` and return its current text."""
        if key not in self._dict:
            if default is MISSING:
                raise KeyNotFound(key)
            return default
        text = self._dict[key].data
        self.remove(key)
        return text

    def exists(self, key: str) -> bool:
        return key in self._dict

    def __contains__(self, key: object) -> bool:
        return key in self._dict

    def clear(self) -> None:
        self._keys.clear()
        self._dict.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return '%s(%r)' % (
            type(self).__name__, {k: self._dict[k].data for k in self._keys})


class TrackedSection(ConfigSection):
    """... is a section bound to a list of line records.

    Each live key owns exactly one VALUE record in `lines`,
    appended when the key shows up and dropped when it goes away.
    Other records (comments and so on) are left alone.
    """
    def __init__(self, lines: list[ConfigLine] | None = None) -> None:
        super().__init__()
        self.lines: list[ConfigLine] = [] if lines is None else lines

    def _append(self, key: str, cell: ConfigValue) -> None:
        self.lines.append(ConfigLine(LineKind.VALUE, key))
        super()._append(key, cell)

    def _drop_record(self, key: str) -> None:
        for i, line in enumerate(self.lines):
            if line.kind is LineKind.VALUE and line.content == key:
                del self.lines[i]
                break

    def remove(self, key: str) -> None:
        if key in self._dict:
            self._drop_record(key)
            super().remove(key)

    def clear(self) -> None:
        self.lines[:] = [
            i for i in self.lines if i.kind is not LineKind.VALUE]
        super().clear()
