"""
Unit tests for the line classifier.
"""

import pytest

from flatini.ini.scanner import LineKind, classify


class TestClassify:
    """Test cases for classify()."""

    @pytest.mark.parametrize('line', ['', '   ', '\t\n', '\n'])
    def test_blank(self, line):
        assert classify(line, 1).kind is LineKind.BLANK

    @pytest.mark.parametrize('line', [
        '; comment', '  ;indented', '# hash comment', '#', ';[not a section',
    ])
    def test_comment(self, line):
        assert classify(line, 1).kind is LineKind.COMMENT

    def test_hash_is_plain_text_without_prefix(self):
        result = classify('# a = b', 1, comment_prefixes=(';',))
        assert result.kind is LineKind.PAIR
        assert result.key == '# a'

    def test_section(self):
        result = classify('  [ NETWORK ]  \n', 7)
        assert result.kind is LineKind.SECTION
        assert result.key == 'NETWORK'
        assert result.lineno == 7

    def test_section_keeps_inner_spaces(self):
        assert classify('[my section]', 1).key == 'my section'

    @pytest.mark.parametrize('line', ['[NETWORK', 'NETWORK]', '[', ']'])
    def test_mismatched_brackets(self, line):
        result = classify(line, 3)
        assert result.kind is LineKind.MALFORMED
        assert result.reason == 'mismatched brackets'

    @pytest.mark.parametrize('line', ['[[a]]', '[a][b]', '[a]b]'])
    def test_extra_brackets(self, line):
        assert classify(line, 1).kind is LineKind.MALFORMED

    def test_empty_section_name(self):
        result = classify('[   ]', 1)
        assert result.kind is LineKind.MALFORMED
        assert result.reason == 'empty section name'

    def test_pair(self):
        result = classify('  host =  example.com  ', 2)
        assert result.kind is LineKind.PAIR
        assert (result.key, result.value) == ('host', 'example.com')

    def test_pair_without_spaces(self):
        result = classify('key2=value2', 1)
        assert (result.key, result.value) == ('key2', 'value2')

    def test_split_on_first_equal_sign(self):
        result = classify('a=b=c', 1)
        assert (result.key, result.value) == ('a', 'b=c')

    def test_empty_value(self):
        result = classify('key =', 1)
        assert result.kind is LineKind.PAIR
        assert result.value == ''

    def test_no_inline_comment(self):
        assert classify('key = a ; b', 1).value == 'a ; b'

    def test_internal_whitespace_in_key(self):
        assert classify('my key = v', 1).key == 'my key'

    @pytest.mark.parametrize('line', ['= value', '   =value', '='])
    def test_value_without_key(self, line):
        result = classify(line, 1)
        assert result.kind is LineKind.MALFORMED
        assert result.reason == 'value without key'

    def test_missing_equal_sign(self):
        result = classify('password', 9)
        assert result.kind is LineKind.MALFORMED
        assert result.lineno == 9
        assert result.text == 'password'

    def test_value_ending_with_bracket_is_malformed(self):
        assert classify('key = [x]', 1).kind is LineKind.MALFORMED
