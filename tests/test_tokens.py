"""
Tests for the token model.

Author: xwest
"""

import dataclasses
import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.lexer import Scanner
from lox.lexer.tokens import Token, TokenType, format_number, type_text


class TestTokenDisplay(unittest.TestCase):
    """Test the debug form of tokens."""

    def test_punctuation(self):
        self.assertEqual(str(Token(TokenType.LEFT_PAREN, "(", None, 1)), "( ( ")
        self.assertEqual(str(Token(TokenType.RIGHT_BRACE, "}", None, 1)), "} } ")

    def test_two_character_operator(self):
        self.assertEqual(str(Token(TokenType.BANG_EQUAL, "!=", None, 1)), "!= != ")

    def test_keyword(self):
        self.assertEqual(str(Token(TokenType.WHILE, "while", None, 4)), "WHILE while ")

    def test_identifier(self):
        self.assertEqual(str(Token(TokenType.IDENTIFIER, "count", "count", 1)), "ID(count) count count")

    def test_string(self):
        token = Token(TokenType.STRING, '"foo bar"', "foo bar", 1)
        self.assertEqual(str(token), 'STRING(foo bar) "foo bar" foo bar')

    def test_numbers(self):
        self.assertEqual(str(Token(TokenType.NUMBER, "20", 20.0, 1)), "NUM(20) 20 20")
        self.assertEqual(str(Token(TokenType.NUMBER, "3.14", 3.14, 1)), "NUM(3.14) 3.14 3.14")

    def test_eof(self):
        self.assertEqual(str(Token(TokenType.EOF, "", None, 1)), "EOF  ")

    def test_format_number(self):
        self.assertEqual(format_number(0.0), "0")
        self.assertEqual(format_number(45.67), "45.67")
        self.assertEqual(format_number(1e21), "1000000000000000000000")
        self.assertEqual(format_number(0.0000001), "0.0000001")
        self.assertEqual(format_number(1.5e-10), "0.00000000015")

    def test_small_fraction_from_scanner(self):
        token = Scanner("0.0000001").scan_all()[0]
        self.assertEqual(str(token), "NUM(0.0000001) 0.0000001 0.0000001")

    def test_type_text(self):
        self.assertEqual(type_text(TokenType.SLASH), "/")
        self.assertEqual(type_text(TokenType.GREATER_EQUAL), ">=")
        self.assertEqual(type_text(TokenType.NIL), "NIL")


class TestTokenValue(unittest.TestCase):
    """Test construction rules and value semantics."""

    def test_tokens_are_immutable(self):
        token = Token(TokenType.PLUS, "+", None, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.lexeme = "-"

    def test_literal_kinds_require_value(self):
        for token_type in (TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER):
            with self.assertRaises(ValueError):
                Token(token_type, "x", None, 1)

    def test_line_must_be_positive(self):
        with self.assertRaises(ValueError):
            Token(TokenType.PLUS, "+", None, 0)

    def test_equality_ignores_offset(self):
        self.assertEqual(
            Token(TokenType.DOT, ".", None, 1, offset=3),
            Token(TokenType.DOT, ".", None, 1, offset=9),
        )
        self.assertNotEqual(
            Token(TokenType.DOT, ".", None, 1),
            Token(TokenType.DOT, ".", None, 2),
        )

    def test_classification(self):
        number = Token(TokenType.NUMBER, "1", 1.0, 1)
        keyword = Token(TokenType.CLASS, "class", None, 1)
        operator = Token(TokenType.LESS_EQUAL, "<=", None, 1)

        self.assertTrue(number.is_literal)
        self.assertFalse(number.is_keyword)
        self.assertTrue(keyword.is_keyword)
        self.assertFalse(keyword.is_operator)
        self.assertTrue(operator.is_operator)
        self.assertFalse(operator.is_literal)


if __name__ == '__main__':
    unittest.main()
