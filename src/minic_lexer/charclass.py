"""Character classes and the read-only tables the scanner dispatches on."""

import string
from types import MappingProxyType

from minic_lexer.tokens import TokenKind

KEYWORDS = frozenset({"int", "float", "if", "else", "while", "return", "void"})

WHITESPACE = frozenset(" \t\n\r")

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)

# Kind of each operator/delimiter character when it is not the start of a
# two-character operator.
SINGLE_CHAR_TOKENS = MappingProxyType(
    {
        "+": TokenKind.ARITHMETIC_OPERATOR,
        "-": TokenKind.ARITHMETIC_OPERATOR,
        "*": TokenKind.ARITHMETIC_OPERATOR,
        "/": TokenKind.ARITHMETIC_OPERATOR,
        "=": TokenKind.ASSIGNMENT_OPERATOR,
        "<": TokenKind.DELIMITER,
        ">": TokenKind.DELIMITER,
        ";": TokenKind.DELIMITER,
        "(": TokenKind.DELIMITER,
        ")": TokenKind.DELIMITER,
        "{": TokenKind.DELIMITER,
        "}": TokenKind.DELIMITER,
    }
)

# Checked before SINGLE_CHAR_TOKENS; every key starts with a single-char token.
TWO_CHAR_OPERATORS = MappingProxyType(
    {
        "==": TokenKind.RELATIONAL_OPERATOR,
        "<=": TokenKind.RELATIONAL_OPERATOR,
        ">=": TokenKind.RELATIONAL_OPERATOR,
    }
)


def is_letter(char: str) -> bool:
    return char in _LETTERS


def is_digit(char: str) -> bool:
    return char in _DIGITS


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_keyword(lexeme: str) -> bool:
    return lexeme in KEYWORDS


def is_single_char_token(char: str) -> bool:
    return char in SINGLE_CHAR_TOKENS
