# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

"""Everything the INI layer may raise.

Parsing is fail-fast: the first bad line aborts the whole read,
so a caught `IniSyntaxError` means the document is unusable.
"""


class IniError(Exception):
    """Base class of all INI errors."""
    pass


class InvalidExtensionError(IniError):
    """The file path does not end with `.ini`."""

    def __init__(self, filename: str) -> None:
        super().__init__(
            f'the file should have an ini extension (.ini): {filename}')
        self.filename = filename


class IniFileNotFoundError(IniError, FileNotFoundError):
    """The INI file to read does not exist."""

    def __init__(self, filename: str) -> None:
        IniError.__init__(self, f"the file doesn't exist: {filename}")
        self.filename = filename

    def __str__(self) -> str:
        return self.args[0]


class IniSyntaxError(IniError):
    """A line that is neither blank, comment, header nor pair."""

    def __init__(self, lineno: int, line: str, reason: str) -> None:
        super().__init__(f'line {lineno}: {reason}: {line.strip()!r}')
        self.lineno = lineno
        self.line = line
        self.reason = reason


class DuplicateSectionError(IniError):
    def __init__(self, section: str, lineno: int | None = None) -> None:
        msg = f'section [{section}] already exists'
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        super().__init__(msg)
        self.section = section
        self.lineno = lineno


class IniValueError(IniError, ValueError):
    """Text the INI form could not carry back on the next read."""
    pass


class EmptySelectorError(IniValueError):
    """Section name or key is empty."""

    def __init__(self) -> None:
        super().__init__("section name or key can't be empty")


# KeyError subclasses, so that `in` and `.get()` of the mapping
# protocol still work on top of them.
class SectionNotFoundError(IniError, KeyError):
    def __init__(self, section: str) -> None:
        super().__init__(f"section [{section}] doesn't exist")
        self.section = section

    def __str__(self) -> str:
        return self.args[0]


class KeyNotFoundError(IniError, KeyError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(f"key {key!r} doesn't exist in [{section}]")
        self.section = section
        self.key = key

    def __str__(self) -> str:
        return self.args[0]
