# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 20:01:52
# @Author : Kariko Lin

import logging

from .ini import (
    IniDocument, IniSection,
    IniParser, IniJsonParser, IniYamlParser,
    loads, dumps, load, dump,
    IniError, InvalidExtensionError, IniFileNotFoundError,
    IniSyntaxError, DuplicateSectionError, IniValueError,
    EmptySelectorError, SectionNotFoundError, KeyNotFoundError
)

__version__ = '0.2.0'

__all__ = [
    'IniDocument', 'IniSection',
    'IniParser', 'IniJsonParser', 'IniYamlParser',
    'loads', 'dumps', 'load', 'dump',
    'IniError', 'InvalidExtensionError', 'IniFileNotFoundError',
    'IniSyntaxError', 'DuplicateSectionError', 'IniValueError',
    'EmptySelectorError', 'SectionNotFoundError', 'KeyNotFoundError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
