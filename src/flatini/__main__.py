# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/13 02:14:40
# @Author : Kariko Lin

"""Command line entry: `python -m flatini <command> ...`"""

import argparse
import sys
from os.path import splitext

from .abstract import FileHandler
from .ini import (
    IniDocument,
    IniError,
    IniJsonParser,
    IniParser,
    IniYamlParser
)

_HANDLERS: dict[str, type[FileHandler[IniDocument]]] = {
    '.ini': IniParser,
    '.json': IniJsonParser,
    '.yaml': IniYamlParser,
    '.yml': IniYamlParser,
}


def _handler(filename: str) -> FileHandler[IniDocument]:
    # unknown suffixes go to IniParser, which complains about it.
    ext = splitext(filename)[1].lower()
    return _HANDLERS.get(ext, IniParser)(filename)


def cmd_show(args: argparse.Namespace) -> None:
    print(IniParser.dumps(_handler(args.file).read()), end='')


def cmd_sections(args: argparse.Namespace) -> None:
    for i in _handler(args.file).read().section_names():
        print(i)


def cmd_get(args: argparse.Namespace) -> None:
    doc = _handler(args.file).read()
    print(doc.get_value(args.section, args.key))


def cmd_set(args: argparse.Namespace) -> None:
    doc = _handler(args.file).read()
    doc.set_value(args.section, args.key, args.value)
    _handler(args.output or args.file).write(doc)


def cmd_convert(args: argparse.Namespace) -> None:
    _handler(args.dst).write(_handler(args.src).read())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='flatini',
        description='Inspect, edit and convert flat INI files.',
    )
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('show', help='Print the file in canonical form')
    p.add_argument('file')
    p.set_defaults(func=cmd_show)

    p = sub.add_parser('sections', help='List section names')
    p.add_argument('file')
    p.set_defaults(func=cmd_sections)

    p = sub.add_parser('get', help='Print one value')
    p.add_argument('file')
    p.add_argument('section')
    p.add_argument('key')
    p.set_defaults(func=cmd_get)

    p = sub.add_parser('set', help='Set one value and save')
    p.add_argument('file')
    p.add_argument('section')
    p.add_argument('key')
    p.add_argument('value')
    p.add_argument('-o', '--output', help='Save here instead of in place')
    p.set_defaults(func=cmd_set)

    p = sub.add_parser(
        'convert', help='Convert between .ini, .json and .yaml by suffix')
    p.add_argument('src')
    p.add_argument('dst')
    p.set_defaults(func=cmd_convert)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (IniError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
