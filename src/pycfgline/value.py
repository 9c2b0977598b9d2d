# -*- encoding: utf-8 -*-
# @File   : value.py
# @Time   : 2024/10/12 21:40:17
# @Author : Kariko Lin

"""Single scalar stored as text.

Nothing about the type is kept: `ConfigValue.get()` decides how to read
the text back, with the kind the caller asks for.
"""

from dataclasses import dataclass
from re import ASCII
from re import compile as regex
from typing import Callable

from .consts import ValueKind

__all__ = ['ConfigValue', 'ConversionError', 'Scalar', 'CONVERTERS']

Scalar = int | float | bool | str

_INT_LITERAL = regex(r'[+-]?\d+', ASCII)
_FLOAT_LITERAL = regex(
    r'[+-]?((\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|inf|infinity|nan)', ASCII)


class ConversionError(ValueError):
    """The stored text is not a valid literal of the requested kind."""
    def __init__(self, text: str, kind: ValueKind) -> None:
        super().__init__(
            f'String value {text!r} is non convertible to type {kind.value}')
        self.text = text
        self.kind = kind


def _to_int(text: str) -> int:
    if not _INT_LITERAL.fullmatch(text):
        raise ConversionError(text, ValueKind.INT)
    return int(text)


def _to_float(text: str) -> float:
    if not _FLOAT_LITERAL.fullmatch(text.lower()):
        raise ConversionError(text, ValueKind.FLOAT)
    return float(text)


def _to_bool(text: str) -> bool:
    # only the literals we write ourselves.
    if text not in ('true', 'false'):
        raise ConversionError(text, ValueKind.BOOL)
    return text == 'true'


def _to_char(text: str) -> str:
    if len(text) != 1:
        raise ConversionError(text, ValueKind.CHAR)
    return text


CONVERTERS: dict[ValueKind, Callable[[str], Scalar]] = {
    ValueKind.INT: _to_int,
    ValueKind.FLOAT: _to_float,
    ValueKind.BOOL: _to_bool,
    ValueKind.CHAR: _to_char,
    ValueKind.STRING: str,
}


def toText(value: 'Scalar | ConfigValue') -> str:
    """Canonical text of a supported scalar.

    `bool` is checked before `int` since it is a subclass of it,
    and floats follow C `%f` (e.g. `1.0` -> `1.000000`).
    """
    if isinstance(value, ConfigValue):
        return value.data
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return '%f' % value
    if isinstance(value, str):
        return value
    raise TypeError(
        f'unsupported value type {type(value).__name__!r}, '
        'expecting int, float, bool or str.')


@dataclass
class ConfigValue:
    data: str = ''

    @classmethod
    def of(cls, value: 'Scalar | ConfigValue') -> 'ConfigValue':
        return cls(toText(value))

    def set(self, value: 'Scalar | ConfigValue') -> None:
        self.data = toText(value)

    def get(self, kind: ValueKind = ValueKind.STRING) -> Scalar:
        """Parse the text as `kind`.

        Raises `ConversionError` if the whole text is not a literal of it.
        """
        return CONVERTERS[ValueKind(kind)](self.data)

    def toInt(self) -> int:
        return _to_int(self.data)

    def toFloat(self) -> float:
        return _to_float(self.data)

    def toBool(self) -> bool:
        return _to_bool(self.data)

    def toChar(self) -> str:
        return _to_char(self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigValue):
            return self.data == other.data
        if isinstance(other, str):
            return self.data == other
        return NotImplemented

    def __str__(self) -> str:
        return self.data
