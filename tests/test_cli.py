"""
Tests for the `flatini` command line.
"""

import json

import pytest

from flatini.__main__ import main
from flatini.ini import load

CONFIG = '[NETWORK]\nhost = example.com\nport = 7878\n'


@pytest.fixture
def ini_file(tmp_path):
    path = tmp_path / 'config.ini'
    path.write_text(CONFIG, encoding='utf-8')
    return path


def test_show(ini_file, capsys):
    assert main(['show', str(ini_file)]) == 0
    assert capsys.readouterr().out == CONFIG


def test_sections(ini_file, capsys):
    assert main(['sections', str(ini_file)]) == 0
    assert capsys.readouterr().out == 'NETWORK\n'


def test_get(ini_file, capsys):
    assert main(['get', str(ini_file), 'NETWORK', 'port']) == 0
    assert capsys.readouterr().out == '7878\n'


def test_get_missing_key(ini_file, capsys):
    assert main(['get', str(ini_file), 'NETWORK', 'user']) == 1
    assert capsys.readouterr().err.startswith('Error: ')


def test_set_in_place(ini_file):
    assert main(['set', str(ini_file), 'database', 'host', 'localhost']) == 0
    assert load(str(ini_file)).get_value('database', 'host') == 'localhost'


def test_set_to_output(ini_file, tmp_path):
    out = tmp_path / 'out.ini'
    assert main([
        'set', str(ini_file), 'NETWORK', 'host', 'ex.com', '-o', str(out)
    ]) == 0
    assert load(str(out)).get_value('NETWORK', 'host') == 'ex.com'
    assert load(str(ini_file)).get_value('NETWORK', 'host') == 'example.com'


def test_convert_to_json(ini_file, tmp_path):
    out = tmp_path / 'config.json'
    assert main(['convert', str(ini_file), str(out)]) == 0
    assert json.loads(out.read_text(encoding='utf-8')) == {
        'NETWORK': {'host': 'example.com', 'port': '7878'}}


def test_convert_back_from_yaml(ini_file, tmp_path):
    mid, out = tmp_path / 'config.yaml', tmp_path / 'back.ini'
    assert main(['convert', str(ini_file), str(mid)]) == 0
    assert main(['convert', str(mid), str(out)]) == 0
    assert load(str(out)) == load(str(ini_file))


def test_syntax_error(tmp_path, capsys):
    path = tmp_path / 'failed.ini'
    path.write_text('[NETWORK\nhost = x\n')
    assert main(['show', str(path)]) == 1
    assert 'line 1' in capsys.readouterr().err


def test_bad_extension(tmp_path, capsys):
    path = tmp_path / 'config.txt'
    path.write_text(CONFIG)
    assert main(['show', str(path)]) == 1
    assert '.ini' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(['show', str(tmp_path / 'nope.ini')]) == 1
    assert "doesn't exist" in capsys.readouterr().err


def test_convert_broken_json(tmp_path, capsys):
    src = tmp_path / 'broken.json'
    src.write_text('{"S": {"k": ')
    assert main(['convert', str(src), str(tmp_path / 'out.ini')]) == 1
    assert capsys.readouterr().err.startswith('Error: ')
    assert not (tmp_path / 'out.ini').exists()


def test_show_broken_yaml(tmp_path, capsys):
    src = tmp_path / 'broken.yaml'
    src.write_text('S: [unclosed\n')
    assert main(['show', str(src)]) == 1
    assert 'broken.yaml' in capsys.readouterr().err
