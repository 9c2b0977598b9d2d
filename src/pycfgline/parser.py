# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Line model shared by all config formats.

A parser keeps the file as an ordered list of `ConfigLine` records.
Blank and comment lines are stored as they were read, while value and
section records only name what they stand for; the actual values are
looked up when writing. So whatever got changed in memory is written
out in the place the file originally had it.

File level problems (missing file, unopenable file, undecodable bytes,
values the codec cannot encode) are *not* raised. They end up in
`getError()`, and it's up to the caller to check it after `load()`,
`reload()` or `save()`.
"""

import logging
from abc import abstractmethod
from collections.abc import Iterator
from os import sep
from os.path import dirname, exists
from warnings import warn

from .abstract import FileHandler
from .consts import (
    ASSIGN_MARK, COMMENT_MARK, EOL, SECTION_CLOSE, SECTION_OPEN,
    ConfigError, LineKind, ParserState
)
from .model import ConfigLine

__all__ = ['Parser', 'MalformedLineWarning']

_log = logging.getLogger(__name__)

# warnings point at the first frame outside of this package.
_PACKAGE_PREFIX = dirname(__file__) + sep


class MalformedLineWarning(UserWarning):
    """A line was dropped while reading since it means nothing to the format."""
    pass


class Parser(FileHandler):
    def __init__(self, path: str = '', encoding: str = 'utf-8') -> None:
        super().__init__(path, encoding)
        self.lines: list[ConfigLine] = []
        self._error = ConfigError.NO_ERROR
        self._loaded = False

    # --- state ---

    @property
    def path(self) -> str:
        return self._fn

    def getPath(self) -> str:
        return self._fn

    @property
    def error(self) -> ConfigError:
        return self._error

    def getError(self) -> ConfigError:
        return self._error

    def flush(self) -> None:
        """Clear the error state."""
        self._error = ConfigError.NO_ERROR

    @property
    def state(self) -> ParserState:
        if self._error is not ConfigError.NO_ERROR:
            return ParserState.ERROR
        return ParserState.LOADED if self._loaded else ParserState.UNLOADED

    # --- lifecycle ---

    def load(self, path: str) -> None:
        self.flush()
        self.erase()
        self._fn = path
        self.resetCodec()
        self._readFile()

    def reload(self) -> None:
        self.erase()
        self._readFile()

    def save(self, path: str | None = None) -> None:
        """Write to `path` (which is then kept), or to the current path.

        Nothing happens without any path at all.
        """
        if path:
            self._fn = path
        self.write()

    def erase(self) -> None:
        """Drop every record. Formats extend this to drop their values."""
        self.lines.clear()
        self._loaded = False

    def _readFile(self) -> None:
        if self._fn:
            self.read()

    # --- file passes ---

    def read(self) -> None:
        if not exists(self._fn):
            _log.warning('Config file "%s" not found.', self._fn)
            self._error = ConfigError.FILE_NOT_FOUND
            return
        try:
            rawlines = self.readlines()
        except OSError as e:
            _log.warning('Unable to open "%s" for reading: %s', self._fn, e)
            self._error = ConfigError.FILE_OPEN_ERROR
            return
        except (UnicodeDecodeError, LookupError) as e:
            _log.warning('Unable to decode "%s": %s', self._fn, e)
            self._error = ConfigError.FILE_READ_ERROR
            return
        self._parse(rawlines)
        self._loaded = True
        _log.debug('Read %d records from "%s".', len(self.lines), self._fn)

    def write(self) -> None:
        if not self._fn:
            return
        try:
            self.writelines(i + EOL for i in self._dump())
        except OSError as e:
            _log.warning('Unable to open "%s" for writing: %s', self._fn, e)
            self._error = ConfigError.FILE_OPEN_ERROR
        except UnicodeEncodeError as e:
            _log.warning('Unable to encode "%s" as %s: %s',
                         self._fn, self._codec, e)
            self._error = ConfigError.FILE_WRITE_ERROR

    @abstractmethod
    def _parse(self, rawlines: list[str]) -> None:
        """Classify `rawlines` into records and values."""
        raise NotImplementedError

    @abstractmethod
    def _dump(self) -> Iterator[str]:
        """Yield output lines, without terminators."""
        raise NotImplementedError

    # --- records ---

    def appendLine(self, kind: LineKind, content: str = '') -> None:
        self.lines.append(ConfigLine(kind, content))

    def removeLine(self, content: str, kind: LineKind | None = None) -> None:
        """Remove the first record with the given content (and kind)."""
        for i, line in enumerate(self.lines):
            if line.content == content and kind in (None, line.kind):
                del self.lines[i]
                break

    # --- line classifiers ---

    @staticmethod
    def isComment(line: str) -> bool:
        return line.strip().startswith(COMMENT_MARK)

    @staticmethod
    def isEmptyLine(line: str) -> bool:
        return not line.strip()

    @staticmethod
    def isValue(line: str) -> bool:
        return ASSIGN_MARK in line

    @staticmethod
    def isSection(line: str) -> bool:
        line = line.strip()
        return line.startswith(SECTION_OPEN) and line.endswith(SECTION_CLOSE)

    @staticmethod
    def extractValue(line: str) -> tuple[str, str] | None:
        """Split at the first `=`. None if there is no usable key."""
        if ASSIGN_MARK not in line:
            return None
        key, val = line.split(ASSIGN_MARK, 1)
        key = key.strip()
        if not key:
            return None
        return key, val.strip()

    @staticmethod
    def extractSection(line: str) -> str:
        return line.strip()[1:-1].strip()

    def _skip(self, lineno: int, line: str, reason: str) -> None:
        _log.debug('%s:%d skipped (%s): %r', self._fn, lineno, reason, line)
        warn(f'{self._fn}:{lineno}: {reason}, line skipped: {line!r}',
             MalformedLineWarning, skip_file_prefixes=(_PACKAGE_PREFIX,))
