# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:31:07
# @Author : Kariko Lin

"""
Basically a flat INI structure: `section -> key -> value`, all `str`.

No inheritance, no `[#include]`, no header pairs outside any section.
Order of sections and keys is NOT something to rely on.
"""

from collections.abc import Mapping, MutableMapping
from typing import Iterator

from .errors import (
    DuplicateSectionError,
    EmptySelectorError,
    IniValueError,
    KeyNotFoundError,
    SectionNotFoundError
)
from .scanner import COMMENT_PREFIXES


def _single_line(text: str) -> bool:
    # the readers only break lines on these.
    return '\n' not in text and '\r' not in text


def _selector(text: str) -> str:
    if not (text := text.strip()):
        raise EmptySelectorError()
    return text


def _check_section(name: str) -> str:
    name = _selector(name)
    if not _single_line(name) or '[' in name or ']' in name:
        raise IniValueError(f'bad section name: {name!r}')
    return name


def _check_pair(key: str, value: str) -> tuple[str, str]:
    key, value = _selector(key), value.strip()
    if (
        not _single_line(key) or '=' in key
        or key.startswith(COMMENT_PREFIXES + ('[',))
    ):
        raise IniValueError(f'bad key: {key!r}')
    # a line ending with ']' but not starting with '[' is malformed.
    if not _single_line(value) or value.endswith(']'):
        raise IniValueError(f'bad value of {key!r}: {value!r}')
    return key, value


class IniSection(MutableMapping[str, str]):
    """INI section dict.

    Keys and values are trimmed on assignment, and rejected
    (`IniValueError`) when they could not be read back as they are.
    Re-assigning a key simply overrides it.
    """

    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        if key not in self._data:
            raise KeyNotFoundError(self._name, key)
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        key, value = _check_pair(key, value)
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._data:
            raise KeyNotFoundError(self._name, key)
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """INI file representation. Supports the following (comments aside):

        ```ini
        [section]
        key = val
        key2=val = with equal sign

        [another]
        key = val666
        ```

    The same section could not be declared twice in one file,
    while a repeated key just overrides the former one.
    """

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        if key not in self.__raw:
            raise SectionNotFoundError(key)
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # never keep a ref to the external section/dict.
        key = _check_section(key)
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self.__raw:
            raise SectionNotFoundError(key)
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return f'<IniDocument {list(self.__raw.values())!r}>'

    def add_section(self, name: str) -> IniSection:
        """Declare a new empty section and return it.

        Raises `DuplicateSectionError` if it is already there.
        """
        name = _check_section(name)
        if name in self.__raw:
            raise DuplicateSectionError(name)
        ret = self.__raw[name] = IniSection(name)
        return ret

    def section_names(self) -> list[str]:
        return list(self.__raw)

    def get_value(self, section: str, key: str) -> str:
        """Look up `key` in `section`.

        Raises:
            EmptySelectorError: either argument is empty.
            SectionNotFoundError: no such section.
            KeyNotFoundError: the section has no such key.
        """
        section, key = _selector(section), _selector(key)
        return self[section][key]

    def set_value(self, section: str, key: str, value: str) -> None:
        """Set `key` of `section` to `value`, creating the section if absent.

        Empty value is fine, empty section name or key is not.
        """
        section = _check_section(section)
        key, value = _check_pair(key, value)
        if section not in self.__raw:
            self.__raw[section] = IniSection(section)
        self.__raw[section][key] = value

    def merge(self, another: Mapping[str, Mapping[str, str]]) -> None:
        """Merge `another` into self, section by section.

        Keys from `another` override ours.
        """
        for decl, data in another.items():
            decl = _check_section(decl)
            if decl not in self.__raw:
                self.__raw[decl] = IniSection(decl)
            self.__raw[decl].update(data)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__raw.items()}
