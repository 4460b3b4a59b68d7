# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:36:53
# @Author : Kariko Lin

from .errors import (
    IniError,
    InvalidExtensionError,
    IniFileNotFoundError,
    IniSyntaxError,
    DuplicateSectionError,
    IniValueError,
    EmptySelectorError,
    SectionNotFoundError,
    KeyNotFoundError
)
from .model import IniSection, IniDocument
from .parser import IniParser, loads, dumps, load, dump
from .exchange import IniJsonParser, IniYamlParser
