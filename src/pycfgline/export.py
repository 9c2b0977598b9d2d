# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/10/20 17:02:41
# @Author : Kariko Lin

"""Convert configs to and from plain dicts, YAML and JSON.

Only the key-value data travels; comments and blank lines do not.
Values are exported as the text they are stored as, e.g.
```yaml
AppInfo:
  name: Demo
  version: '1.000000'
```
"""

import json
from collections.abc import Mapping
from typing import Any

import yaml

from .consts import ConfigFormat
from .formats import CfgParser, IniParser, newConfig

__all__ = [
    'toDict', 'fromDict',
    'dumpYAML', 'loadYAML', 'dumpJSON', 'loadJSON'
]

FlatDict = dict[str, str]
NestedDict = dict[str, dict[str, str]]


def toDict(parser: IniParser | CfgParser) -> FlatDict | NestedDict:
    if isinstance(parser, CfgParser):
        return {
            name: {k: v.data for k, v in parser[name].items()}
            for name in parser
        }
    return {k: v.data for k, v in parser.items()}


def fromDict(
    data: Mapping[str, Any],
    fmt: ConfigFormat | str | None = None
) -> IniParser | CfgParser:
    """Build an unsaved parser from `data`.

    Without `fmt`, any mapping value makes it a CFG (sectioned) config.
    `None` values become empty strings.
    """
    if not isinstance(data, Mapping):
        raise ValueError(
            f'expecting a mapping at top level, got {type(data).__name__}.')
    if fmt is None:
        nested = any(isinstance(v, Mapping) for v in data.values())
        fmt = ConfigFormat.CFG if nested else ConfigFormat.INI
    ret = newConfig(fmt)
    if isinstance(ret, IniParser):
        for k, v in data.items():
            ret[str(k)] = '' if v is None else v
        return ret

    for name, pairs in data.items():
        if not isinstance(pairs, Mapping):
            raise ValueError(
                f'"{name}" is not a section (got {type(pairs).__name__}).')
        ret.addSection(str(name))
        sect = ret[str(name)]
        for k, v in pairs.items():
            sect[str(k)] = '' if v is None else v
    return ret


def dumpYAML(
    parser: IniParser | CfgParser, filename: str, encoding: str = 'utf-8'
) -> None:
    with open(filename, 'w', encoding=encoding) as fp:
        yaml.safe_dump(
            toDict(parser), fp, allow_unicode=True, sort_keys=False)


def loadYAML(
    filename: str,
    fmt: ConfigFormat | str | None = None,
    encoding: str = 'utf-8'
) -> IniParser | CfgParser:
    with open(filename, 'r', encoding=encoding) as fp:
        data = yaml.safe_load(fp)
    return fromDict(data or {}, fmt)


def dumpJSON(
    parser: IniParser | CfgParser, filename: str,
    encoding: str = 'utf-8', indent: int = 2
) -> None:
    with open(filename, 'w', encoding=encoding) as fp:
        json.dump(toDict(parser), fp, ensure_ascii=False, indent=indent)


def loadJSON(
    filename: str,
    fmt: ConfigFormat | str | None = None,
    encoding: str = 'utf-8'
) -> IniParser | CfgParser:
    with open(filename, 'r', encoding=encoding) as fp:
        data = json.load(fp)
    return fromDict(data, fmt)
