# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Iterable

from chardet import detect as guess_codec

__all__ = ['FileHandler']

_log = logging.getLogger(__name__)


class FileHandler(metaclass=ABCMeta):
    """Whole-file text access for one path.

    Each pass opens and closes its own handle.
    `OSError` and `UnicodeDecodeError` are left to the caller.
    """
    def __init__(self, filename: str = '', encoding: str = 'utf-8') -> None:
        self._fn = filename
        self._codec = encoding
        # what the caller asked for, before any sniffing.
        self._initcodec = encoding

    @property
    def encoding(self) -> str:
        """Codec used for the next read or write.

        May change after a read, if the file had to be sniffed.
        """
        return self._codec

    def _decode_file(self) -> str:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = guess_codec(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}

        # may raise UnicodeDecodeError once more, and that's a read error.
        buf = raw.decode(codec['encoding'])
        if codec['encoding'].lower() != self._codec.lower():
            _log.info('"%s" is not %s, decoded as %s instead.',
                      self._fn, self._codec, codec['encoding'])
            self._codec = codec['encoding']
        return buf

    def resetCodec(self) -> None:
        """Forget a sniffed codec, back to the one given at construction."""
        self._codec = self._initcodec

    def readlines(self) -> list[str]:
        """Lines of the file, terminators stripped.

        Only LF (or CRLF) ends a line. Form feeds, U+2028 and the other
        breaks `str.splitlines()` knows of are kept as value text.
        """
        try:
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                buf = fp.read()
        except UnicodeDecodeError:
            buf = self._decode_file()
        lines = buf.split('\n')
        if lines[-1] == '':
            lines.pop()
        return [i[:-1] if i.endswith('\r') else i for i in lines]

    def writelines(self, lines: Iterable[str]) -> None:
        """Overwrite the file with `lines`, each carrying its own terminator.

        Text is encoded before the file gets opened, so `UnicodeEncodeError`
        leaves the file untouched.
        """
        raw = ''.join(lines).encode(self._codec)
        with open(self._fn, 'wb') as fp:
            fp.write(raw)

    @abstractmethod
    def read(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def write(self) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
