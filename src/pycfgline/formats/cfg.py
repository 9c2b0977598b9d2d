# -*- coding: utf-8 -*-
# @Time: 2024/10/14 22:05
# @Author: Kariko Lin
"""Sectioned CFG handler.

```cfg
# comment
[section]
key = value
# section scoped comment
key2 = value2

[another]
...
```
A section body runs from its header until the first blank line (or EOF).
That blank line is consumed, and one is written back after each section.

Top-level records are headers, blank lines and comments between sections.
Each section keeps its own records (its values and the comments inside
its body), so comments inside a body get written back in place.
"""

from collections.abc import Iterator

from ..consts import PAIRING, LineKind
from ..model import ConfigLine, TrackedSection, removeElement
from ..parser import Parser

__all__ = ['CfgParser', 'SectionNotFound']


class SectionNotFound(KeyError):
    pass


class CfgParser(Parser):
    def __init__(self, path: str = '', encoding: str = 'utf-8') -> None:
        """Load `path` right away if given; check `getError()` after."""
        super().__init__(path, encoding)
        self._keys: list[str] = []
        self._sections: dict[str, TrackedSection] = {}
        self._readFile()

    def addSection(self, name: str) -> None:
        """Add an empty section, unless there is one already."""
        if name not in self._sections:
            self._keys.append(name)
            self.appendLine(LineKind.SECTION, name)
            self._sections[name] = TrackedSection()

    def removeSection(self, name: str) -> None:
        if name in self._sections:
            removeElement(self._keys, name)
            self.removeLine(name, LineKind.SECTION)
            del self._sections[name]

    def section(self, name: str) -> TrackedSection:
        if name not in self._sections:
            raise SectionNotFound(name)
        return self._sections[name]

    def sections(self) -> list[str]:
        """Section names, in file (or creation) order."""
        return list(self._keys)

    def clear(self) -> None:
        self._keys.clear()
        self._sections.clear()
        super().erase()

    def erase(self) -> None:
        self.clear()

    # `parser[sect][key]`, where only the key is created on demand.
    def __getitem__(self, name: str) -> TrackedSection:
        return self.section(name)

    def __delitem__(self, name: str) -> None:
        self.removeSection(name)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f'CfgParser({self._fn!r}, {len(self)} sections)'

    # --- line model ---

    def _parse(self, rawlines: list[str]) -> None:
        total, lineno = len(rawlines), 0
        while lineno < total:
            i = rawlines[lineno]
            lineno += 1
            if self.isComment(i):
                self.appendLine(LineKind.COMMENT, i)
            elif self.isEmptyLine(i):
                self.appendLine(LineKind.BLANK, i)
            elif self.isSection(i):
                if not (name := self.extractSection(i)):
                    self._skip(lineno, i, 'empty section name')
                    continue
                self.addSection(name)
                lineno = self._parseBody(self._sections[name], rawlines, lineno)
            elif self.isValue(i):
                self._skip(lineno, i, 'key-value pair outside of any section')
            else:
                self._skip(lineno, i, 'not a section header')

    def _parseBody(
        self, sect: TrackedSection, rawlines: list[str], lineno: int
    ) -> int:
        """Consume a section body starting at `lineno` (0-based).

        Returns the index right after the terminating blank line, or EOF.
        """
        while lineno < len(rawlines):
            i = rawlines[lineno]
            lineno += 1
            if self.isEmptyLine(i):
                break
            elif self.isComment(i):
                sect.lines.append(ConfigLine(LineKind.COMMENT, i))
            elif self.isSection(i):
                # no blank line in between, keys below still belong here.
                self._skip(lineno, i, 'section header inside an open section')
            elif (pair := self.extractValue(i)) is not None:
                # later assignments override earlier ones.
                sect[pair[0]] = pair[1]
            elif self.isValue(i):
                self._skip(lineno, i, 'missing key')
            else:
                self._skip(lineno, i, 'not a key-value pair')
        return lineno

    def _dump(self) -> Iterator[str]:
        for i in self.lines:
            if i.kind is not LineKind.SECTION:
                yield i.content
                continue
            sect = self._sections[i.content]
            yield f'[{i.content}]'
            for j in sect.lines:
                if j.kind is LineKind.VALUE:
                    yield f'{j.content}{PAIRING}{sect.get(j.content)}'
                else:
                    yield j.content
            yield ''
