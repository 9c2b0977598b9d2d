# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/03/22 02:43:33
# @Author : Chloride
from os.path import splitext

from ..consts import SUFFIXES, ConfigFormat
from .cfg import CfgParser, SectionNotFound
from .ini import IniParser

__all__ = [
    'IniParser', 'CfgParser', 'SectionNotFound',
    'FORMATS', 'newConfig', 'openConfig'
]

FORMATS: dict[ConfigFormat, type[IniParser] | type[CfgParser]] = {
    ConfigFormat.INI: IniParser,
    ConfigFormat.CFG: CfgParser,
}


def _resolve(path: str, fmt: ConfigFormat | str | None) -> ConfigFormat:
    if fmt is not None:
        return ConfigFormat(fmt)
    suffix = splitext(path)[1].lower()
    if suffix not in SUFFIXES:
        raise ValueError(
            f'Unable to tell the config format of "{path}", '
            'pass `fmt` explicitly.')
    return SUFFIXES[suffix]


def newConfig(
    fmt: ConfigFormat | str, encoding: str = 'utf-8'
) -> IniParser | CfgParser:
    """An empty, unbound parser of the given format."""
    return FORMATS[ConfigFormat(fmt)](encoding=encoding)


def openConfig(
    path: str,
    fmt: ConfigFormat | str | None = None,
    encoding: str = 'utf-8'
) -> IniParser | CfgParser:
    """Load `path` with the parser `fmt` names, or the one its suffix implies.

    Like the constructors, file errors are left in `getError()`;
    only an unknown format raises (`ValueError`).
    """
    return FORMATS[_resolve(path, fmt)](path, encoding)
