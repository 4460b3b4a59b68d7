# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:10:45
# @Author : Kariko Lin

"""Read and write flat INI text.

Note: the reader is **fail-fast**. It stops at the first line it could
not understand, and never hands back a half-read document:

    - a pair before any `[section]`,
    - a section declared twice,
    - `[missing bracket` / `missing bracket]`,
    - `= value without key`, or any line without `=`.

Comments (`;` or `#`) only take whole lines,
so `key = a ; b` gives the value `a ; b`.
"""

import logging
from collections.abc import Iterable
from io import StringIO
from os.path import exists
from warnings import warn

import chardet

from ..abstract import FileHandler
from .errors import (
    DuplicateSectionError,
    IniFileNotFoundError,
    IniSyntaxError,
    IniValueError,
    InvalidExtensionError
)
from .model import IniDocument, IniSection
from .scanner import COMMENT_PREFIXES, LineKind, classify

INI_EXTENSION = '.ini'
CANONICAL_DELIMITER = ' = '


class IniParser(FileHandler[IniDocument]):
    FALLBACK_ENCODING = 'latin-1'

    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: Iterable[str],
        ins: IniDocument | None = None, *,
        comment_prefixes: tuple[str, ...] = COMMENT_PREFIXES
    ) -> IniDocument:
        """Build a document from decoded lines (a text stream will do).

        If there is no special needs, just call `self.read()`.

        Raises:
            IniSyntaxError: on the first malformed line,
                or a pair before any section.
            DuplicateSectionError: on a section declared twice.
        """
        if ins is None:
            ins = IniDocument()
        this_sect: IniSection | None = None
        for lineno, line in enumerate(buf, 1):
            if lineno == 1:
                line = line.removeprefix('\ufeff')  # utf-8 BOM
            i = classify(line, lineno, comment_prefixes)
            match i.kind:
                case LineKind.BLANK | LineKind.COMMENT:
                    continue
                case LineKind.SECTION:
                    if i.key in ins:
                        raise DuplicateSectionError(i.key, lineno)
                    this_sect = ins.add_section(i.key)
                case LineKind.PAIR:
                    if this_sect is None:
                        raise IniSyntaxError(
                            lineno, line, 'key-value pair before any section')
                    try:
                        this_sect[i.key] = i.value
                    except IniValueError as e:
                        # e.g. `#key` with `#` not taken as comment here.
                        raise IniSyntaxError(lineno, line, str(e)) from e
                case _:
                    raise IniSyntaxError(lineno, line, i.reason)
        return ins

    @staticmethod
    def loads(text: str) -> IniDocument:
        return IniParser.readstream(StringIO(text))

    @staticmethod
    def dumps(
        instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = CANONICAL_DELIMITER
    ) -> str:
        """Render `instance` as INI text.

        Args:
            blank_lines: how many lines between sections?
            delimiter: how to connect key with value? Must be `=`
                with optional spaces around, or it won't read back.
        """
        if (
            delimiter.strip() != '='
            or '\n' in delimiter or '\r' in delimiter
        ):
            raise ValueError(f'unreadable pair delimiter: {delimiter!r}')
        buffers = []
        for sect, data in instance.items():
            lines = [f'[{sect}]']
            lines.extend(f'{k}{delimiter}{v}' for k, v in data.items())
            buffers.append('\n'.join(lines) + '\n')
        return ('\n' * blank_lines).join(buffers)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            warn(f'unsure about the encoding of {filename}, try utf-8.')
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            logging.warning(
                f'{filename} is not {codec["encoding"]}, '
                f'decode as {IniParser.FALLBACK_ENCODING}.')
            buf = raw.decode(IniParser.FALLBACK_ENCODING)
        return StringIO(buf)

    def _check_extension(self) -> None:
        if self.extension != INI_EXTENSION:
            raise InvalidExtensionError(self._fn)

    def read(self) -> IniDocument:
        """Read the file the `IniParser` instance points to.

        Raises:
            InvalidExtensionError: the file is not an `.ini`.
            IniFileNotFoundError: the file doesn't exist.
            IniSyntaxError, DuplicateSectionError: see `readstream()`.
        """
        self._check_extension()
        if not exists(self._fn):
            raise IniFileNotFoundError(self._fn)
        logging.debug(f'reading {self}')
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.warning(
                f'failed to decode {self._fn} as '
                f'{self._codec or "default encoding"}, detecting...')
            return self.readstream(self._decode_file(self._fn))

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = CANONICAL_DELIMITER
    ) -> None:
        """Save to *one* INI file. See `dumps()` for the options."""
        self._check_extension()
        text = self.dumps(
            instance, blank_lines=blank_lines, delimiter=delimiter)
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            fp.write(text)
        logging.info(f'{len(instance)} section(s) saved to {self._fn}')

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'


def loads(text: str) -> IniDocument:
    return IniParser.loads(text)


def dumps(instance: IniDocument, **kwargs) -> str:
    return IniParser.dumps(instance, **kwargs)


def load(filename: str, encoding: str | None = None) -> IniDocument:
    return IniParser(filename, encoding).read()


def dump(
    instance: IniDocument, filename: str,
    encoding: str | None = None, **kwargs
) -> None:
    IniParser(filename, encoding).write(instance, **kwargs)
