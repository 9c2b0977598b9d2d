# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : Kariko Lin

from enum import Enum


class ConfigError(int, Enum):
    """File level error states, polled through `Parser.getError()`."""
    NO_ERROR = 0
    FILE_NOT_FOUND = 1
    FILE_OPEN_ERROR = 2
    FILE_READ_ERROR = 3
    FILE_WRITE_ERROR = 4


class LineKind(int, Enum):
    BLANK = 0
    COMMENT = 1
    SECTION = 2
    VALUE = 3


# one converter per member, see `value.CONVERTERS`.
class ValueKind(str, Enum):
    INT = 'int'
    FLOAT = 'float'
    BOOL = 'bool'
    CHAR = 'char'
    STRING = 'str'


class ParserState(str, Enum):
    UNLOADED = 'unloaded'
    LOADED = 'loaded'
    ERROR = 'error'


class ConfigFormat(str, Enum):
    INI = 'ini'  # flat
    CFG = 'cfg'  # sectioned


COMMENT_MARK = '#'
ASSIGN_MARK = '='
SECTION_OPEN = '['
SECTION_CLOSE = ']'

# what gets written between key and value.
PAIRING = ' = '
EOL = '\n'

# file suffixes recognized by `formats.openConfig()`.
SUFFIXES = {
    '.ini': ConfigFormat.INI,
    '.cfg': ConfigFormat.CFG,
    '.conf': ConfigFormat.CFG,
}
