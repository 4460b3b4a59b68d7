# -*- encoding: utf-8 -*-
# @File   : exchange.py
# @Time   : 2024/10/13 01:02:19
# @Author : Kariko Lin

"""Exchange an INI document with JSON and YAML.

Both keep the same two-level shape:

    ```yaml
    NETWORK:
      host: example.com
      port: '7878'
    ```

Plain scalars got stringified while reading (so `port: 7878` is fine),
and `null` becomes an empty value.
"""

import json
import logging
from typing import Any

import yaml

from ..abstract import FileHandler
from .errors import IniValueError
from .model import IniDocument


def _to_document(src: Any, origin: str) -> IniDocument:
    if src is None:  # empty yaml
        return IniDocument()
    if not isinstance(src, dict):
        raise IniValueError(f'{origin}: top level should be a mapping.')
    ret = IniDocument()
    for sect, pairs in src.items():
        if pairs is None:
            pairs = {}
        if not isinstance(pairs, dict):
            raise IniValueError(
                f'{origin}: section "{sect}" should be a mapping.')
        ret[str(sect)] = {}
        for k, v in pairs.items():
            if isinstance(v, (dict, list)):
                raise IniValueError(
                    f'{origin}: [{sect}] "{k}" is not a plain value.')
            ret.set_value(str(sect), str(k), '' if v is None else str(v))
    return ret


class IniJsonParser(FileHandler[IniDocument]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            try:
                src = json.load(fp)
            except json.JSONDecodeError as e:
                raise IniValueError(f'{self._fn}: {e}') from e
        return _to_document(src, self._fn)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False, indent=indent)
        logging.info(f'{len(instance)} section(s) saved to {self._fn}')


class IniYamlParser(FileHandler[IniDocument]):
    """Only the plain mapping of mappings is supported,
    anchors and tags make no sense for INI."""

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            try:
                src = yaml.safe_load(fp)
            except yaml.YAMLError as e:
                raise IniValueError(f'{self._fn}: {e}') from e
        return _to_document(src, self._fn)

    def write(self, instance: IniDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            # pyyaml quotes '7878' itself, so it won't read back as int.
            yaml.safe_dump(
                instance.to_dict(), fp,
                allow_unicode=True,
                sort_keys=False)
        logging.info(f'{len(instance)} section(s) saved to {self._fn}')
