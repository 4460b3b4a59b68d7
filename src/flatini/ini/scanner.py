# -*- encoding: utf-8 -*-
# @File   : scanner.py
# @Time   : 2024/10/12 22:05:31
# @Author : Kariko Lin

"""Line classifier.

Each line is judged on its own, after stripping surrounding blanks:

    ```ini
    ; comment (so is `# comment`)
    [section]
    key = value = still value  ; <- no inline comment, all of it is value.
    ```

Whether a pair may appear at this point is up to the builder,
the scanner only tells what kind of line it is.
"""

from enum import Enum
from typing import NamedTuple

COMMENT_PREFIXES = (';', '#')


class LineKind(str, Enum):
    BLANK = 'blank'
    COMMENT = 'comment'
    SECTION = 'section'
    PAIR = 'pair'
    MALFORMED = 'malformed'


class ScannedLine(NamedTuple):
    """One classified line.

    `key` holds the section name for `SECTION` lines,
    `reason` is only set for `MALFORMED` ones.
    """
    kind: LineKind
    lineno: int
    text: str
    key: str | None = None
    value: str | None = None
    reason: str | None = None


def _malformed(lineno: int, text: str, reason: str) -> ScannedLine:
    return ScannedLine(LineKind.MALFORMED, lineno, text, reason=reason)


def classify(
    line: str, lineno: int,
    comment_prefixes: tuple[str, ...] = COMMENT_PREFIXES
) -> ScannedLine:
    text = line.strip()
    if not text:
        return ScannedLine(LineKind.BLANK, lineno, text)
    if text.startswith(comment_prefixes):
        return ScannedLine(LineKind.COMMENT, lineno, text)

    opened, closed = text[0] == '[', text[-1] == ']'
    if opened != closed:
        return _malformed(lineno, text, 'mismatched brackets')
    if opened:
        if text.count('[') != 1 or text.count(']') != 1:
            return _malformed(
                lineno, text, "section header needs exactly one '[' and ']'")
        name = text[1:-1].strip()
        if not name:
            return _malformed(lineno, text, 'empty section name')
        return ScannedLine(LineKind.SECTION, lineno, text, key=name)

    if '=' not in text:
        return _malformed(lineno, text, "missing '='")
    key, value = text.split('=', 1)
    if not (key := key.strip()):
        return _malformed(lineno, text, 'value without key')
    return ScannedLine(LineKind.PAIR, lineno, text, key, value.strip())
