# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os.path import splitext


class FileHandler[T](metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @property
    def extension(self) -> str:
        """Lower-cased suffix of the handled file, dot included."""
        return splitext(self._fn)[1].lower()

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
