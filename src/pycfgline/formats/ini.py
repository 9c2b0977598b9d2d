# -*- coding: utf-8 -*-
# @Time: 2024/10/13 15:20
# @Author: Kariko Lin
"""Flat INI handler.

No sections here, the whole file is one run of
```ini
# comment
key = value
```
lines, with comments and blank lines kept where they were.

The parser *is* the section, but by owning one rather than inheriting:
every mutation is forwarded to a `TrackedSection` sharing the parser's
line list, so a key never exists without its line record.
"""

from collections.abc import ItemsView, Iterator, KeysView, ValuesView
from typing import Any

from ..consts import PAIRING, LineKind
from ..model import MISSING, TrackedSection
from ..parser import Parser
from ..value import ConfigValue, Scalar

__all__ = ['IniParser']


class IniParser(Parser):
    def __init__(self, path: str = '', encoding: str = 'utf-8') -> None:
        """Load `path` right away if given; check `getError()` after."""
        super().__init__(path, encoding)
        self._section = TrackedSection(self.lines)
        self._readFile()

    @property
    def section(self) -> TrackedSection:
        """The underlying key-value store."""
        return self._section

    # --- section API, forwarded ---

    def insert(self, key: str, value: Scalar | ConfigValue) -> None:
        self._section.insert(key, value)

    def update(self, key: str, value: Scalar | ConfigValue) -> None:
        self._section.update(key, value)

    def get(self, key: str, default: Any = MISSING) -> ConfigValue:
        return self._section.get(key, default)

    def remove(self, key: str) -> None:
        self._section.remove(key)

    def pop(self, key: str, default: Any = MISSING) -> str:
        return self._section.pop(key, default)

    def exists(self, key: str) -> bool:
        return self._section.exists(key)

    def keys(self) -> KeysView[str]:
        return self._section.keys()

    def values(self) -> ValuesView[ConfigValue]:
        return self._section.values()

    def items(self) -> ItemsView[str, ConfigValue]:
        return self._section.items()

    def clear(self) -> None:
        """Drop all values, comments and blank lines alike."""
        self.erase()

    def __getitem__(self, key: str) -> ConfigValue:
        return self._section[key]

    def __setitem__(self, key: str, value: Scalar | ConfigValue) -> None:
        self._section[key] = value

    def __delitem__(self, key: str) -> None:
        self._section.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._section

    def __iter__(self) -> Iterator[str]:
        return iter(self._section)

    def __len__(self) -> int:
        return len(self._section)

    def __repr__(self) -> str:
        return f'IniParser({self._fn!r}, {len(self)} keys)'

    # --- line model ---

    def erase(self) -> None:
        super().erase()
        self._section.clear()

    def _parse(self, rawlines: list[str]) -> None:
        for lineno, i in enumerate(rawlines, 1):
            if self.isComment(i):
                self.appendLine(LineKind.COMMENT, i)
            elif self.isEmptyLine(i):
                self.appendLine(LineKind.BLANK, i)
            elif self.isValue(i):
                if (pair := self.extractValue(i)) is None:
                    self._skip(lineno, i, 'missing key')
                elif pair[0] in self._section:
                    # first one wins, no second record.
                    self._skip(lineno, i, f'duplicate key "{pair[0]}"')
                else:
                    self._section.insert(*pair)
            else:
                self._skip(lineno, i, 'not a key-value pair')

    def _dump(self) -> Iterator[str]:
        for i in self.lines:
            if i.kind is LineKind.VALUE:
                yield f'{i.content}{PAIRING}{self._section.get(i.content)}'
            else:
                yield i.content
