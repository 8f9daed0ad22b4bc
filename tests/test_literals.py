"""
Test suite for the lexscan sub-scanners: strings, numbers and comments.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lexscan.scanner import scan, scan_partial
from lexscan.config import ScannerConfig
from lexscan.tokens import Token
from lexscan.errors import UnexpectedEofError
from lexscan.languages import LUA_CONFIG


C_LIKE = ScannerConfig(
    name="c-like",
    keywords=("int", "return"),
    symbols=("==", "=", ";", "*", "/", "(", ")"),
    single_line_comment="//",
    multi_line_comment_start="/*",
    multi_line_comment_end="*/",
)


def lex(source, config=LUA_CONFIG):
    return scan(source, config).tokens()


class TestStrings(unittest.TestCase):

    def test_plain_and_empty(self):
        self.assertEqual(lex('"hello"'), [Token.string("hello")])
        self.assertEqual(lex('""'), [Token.string("")])

    def test_escapes(self):
        self.assertEqual(lex(r'"a\nb"'), [Token.string("a\nb")])
        self.assertEqual(lex(r'"a\tb"'), [Token.string("a\tb")])
        self.assertEqual(lex(r'"\""'), [Token.string('"')])
        self.assertEqual(lex(r'"\\"'), [Token.string("\\")])
        # unknown escapes keep the character, drop the backslash
        self.assertEqual(lex(r'"a\qb"'), [Token.string("aqb")])

    def test_span_includes_quotes_and_escapes(self):
        data = scan(r'"a\nb"', LUA_CONFIG)
        self.assertEqual(data.token_lens, [6])
        self.assertEqual(data.lexeme(0), r'"a\nb"')

    def test_literal_newline_counts_lines(self):
        data = scan('"a\nb" x', LUA_CONFIG)
        self.assertEqual(data.tokens(), [Token.string("a\nb"), Token.identifier("x")])
        self.assertEqual(data.token_lines, [1, 2])

    def test_non_ascii_content(self):
        self.assertEqual(lex('"héllo wörld ✓"'), [Token.string("héllo wörld ✓")])

    def test_unterminated_after_escape(self):
        data, error = scan_partial('"abc\\', LUA_CONFIG)
        self.assertIsInstance(error, UnexpectedEofError)
        self.assertEqual(error.offset, 0)
        self.assertEqual(data.tokens(), [Token.string("abc")])
        self.assertEqual(data.token_lens, [6])

    def test_unterminated_on_later_line(self):
        data, error = scan_partial('x\ny = "ab\ncd', LUA_CONFIG)
        self.assertEqual((error.line, error.column, error.offset), (2, 5, 6))
        self.assertEqual(data.tokens()[-1], Token.string("ab\ncd"))
        self.assertEqual(data.token_lines[-1], 2)


class TestNumbers(unittest.TestCase):

    def test_decimal(self):
        self.assertEqual(lex("42"), [Token.number("42", 42)])
        self.assertEqual(lex("007"), [Token.number("007", 7)])
        self.assertEqual(lex("3.14"), [Token.number("3.14", 3.14)])

    def test_values_are_floats(self):
        token = lex("10")[0]
        self.assertIsInstance(token.value, float)
        self.assertEqual(token.value, 10.0)

    def test_dot_without_fraction(self):
        self.assertEqual(lex("1."), [Token.number("1", 1), Token.symbol(".")])
        self.assertEqual(lex("1..2"), [Token.number("1", 1), Token.symbol(".."), Token.number("2", 2)])
        self.assertEqual(lex(".5"), [Token.symbol("."), Token.number("5", 5)])

    def test_no_exponent(self):
        self.assertEqual(lex("1e5"), [Token.number("1", 1), Token.identifier("e5")])

    def test_hexadecimal(self):
        self.assertEqual(lex("0xff"), [Token.number("0xff", 255)])
        self.assertEqual(lex("0XFF"), [Token.number("0xFF", 255)])
        self.assertEqual(lex("0x1aB"), [Token.number("0x1aB", 0x1ab)])

    def test_binary(self):
        self.assertEqual(lex("0b101"), [Token.number("0b101", 5)])
        self.assertEqual(lex("0B11"), [Token.number("0b11", 3)])

    def test_prefixed_stops_at_invalid_digit(self):
        self.assertEqual(lex("0x1g"), [Token.number("0x1", 1), Token.identifier("g")])
        self.assertEqual(lex("0b102"), [Token.number("0b10", 2), Token.number("2", 2)])

    def test_prefix_without_digits(self):
        self.assertEqual(lex("0x"), [Token.number("0", 0), Token.identifier("x")])
        self.assertEqual(lex("0b2"), [Token.number("0", 0), Token.identifier("b2")])

    def test_prefix_needs_leading_zero(self):
        self.assertEqual(lex("5x"), [Token.number("5", 5), Token.identifier("x")])
        self.assertEqual(lex("1b01"), [Token.number("1", 1), Token.identifier("b01")])

    def test_short_buffers(self):
        self.assertEqual(lex("0"), [Token.number("0", 0)])
        self.assertEqual(lex("9"), [Token.number("9", 9)])
        self.assertEqual(lex("1.5"), [Token.number("1.5", 1.5)])

    def test_huge_hex_literal(self):
        token = lex("0x" + "f" * 300)[0]
        self.assertEqual(token.value, float("inf"))


class TestComments(unittest.TestCase):

    def test_single_line_excludes_newline(self):
        data = scan("-- hi\nx", LUA_CONFIG)
        self.assertEqual(data.tokens(), [Token.comment("-- hi"), Token.identifier("x")])
        self.assertEqual(data.token_starts, [0, 6])
        self.assertEqual(data.token_lens, [5, 1])
        self.assertEqual(data.token_lines, [1, 2])

    def test_single_line_at_end_of_input(self):
        data = scan("x -- tail", LUA_CONFIG)
        self.assertEqual(data.token_lens, [1, 7])

    def test_multi_line_spans_lines(self):
        data = scan("--[[a\nb]] x", LUA_CONFIG)
        self.assertEqual(data.tokens(), [Token.comment("--[[a\nb]]"), Token.identifier("x")])
        self.assertEqual(data.token_lens, [9, 1])
        self.assertEqual(data.token_lines, [1, 2])

    def test_nested(self):
        comment = "--[[ a --[[ b ]] c ]]"
        data = scan(comment + "x", LUA_CONFIG)
        self.assertEqual(data.tokens(), [Token.comment(comment), Token.identifier("x")])

    def test_c_like_nested(self):
        self.assertEqual(lex("a /* b /* c */ d */ e", C_LIKE), [
            Token.identifier("a"), Token.comment("/* b /* c */ d */"), Token.identifier("e"),
        ])

    def test_markers_inside_quotes_are_ignored(self):
        comment = '--[[ "]]" ]]'
        self.assertEqual(lex(comment), [Token.comment(comment)])

    def test_escaped_quote_does_not_open_string(self):
        comment = r'--[[ \" ]]'
        self.assertEqual(lex(comment + " x"), [Token.comment(comment), Token.identifier("x")])

    def test_unterminated_multi_line(self):
        data, error = scan_partial("x --[[ abc\ndef", LUA_CONFIG)
        self.assertIsInstance(error, UnexpectedEofError)
        self.assertEqual((error.line, error.offset), (1, 2))
        self.assertEqual(data.tokens(), [Token.identifier("x"), Token.comment("--[[ abc\ndef")])
        self.assertEqual(data.token_lens, [1, 12])

    def test_unterminated_by_open_quote(self):
        _, error = scan_partial('--[[ " ]]', LUA_CONFIG)
        self.assertIsInstance(error, UnexpectedEofError)

    def test_c_like_single_line(self):
        self.assertEqual(lex("int a; // note\nreturn a;", C_LIKE), [
            Token.keyword("int"), Token.identifier("a"), Token.symbol(";"),
            Token.comment("// note"),
            Token.keyword("return"), Token.identifier("a"), Token.symbol(";"),
        ])


if __name__ == '__main__':
    unittest.main()
