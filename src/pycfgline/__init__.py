# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:18:03
# @Author : Kariko Lin

import logging

from .consts import ConfigError, ConfigFormat, LineKind, ParserState, ValueKind
from .value import ConfigValue, ConversionError
from .model import ConfigLine, ConfigSection, KeyNotFound, TrackedSection
from .parser import MalformedLineWarning, Parser
from .formats import (
    CfgParser, IniParser, SectionNotFound, newConfig, openConfig
)
from .export import (
    dumpJSON, dumpYAML, fromDict, loadJSON, loadYAML, toDict
)

__all__ = [
    'ConfigError', 'ConfigFormat', 'LineKind', 'ParserState', 'ValueKind',
    'ConfigValue', 'ConversionError',
    'ConfigLine', 'ConfigSection', 'TrackedSection', 'KeyNotFound',
    'Parser', 'MalformedLineWarning',
    'IniParser', 'CfgParser', 'SectionNotFound', 'newConfig', 'openConfig',
    'toDict', 'fromDict', 'dumpYAML', 'loadYAML', 'dumpJSON', 'loadJSON'
]

__version__ = '1.1.0'

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
