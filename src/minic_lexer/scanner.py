from minic_lexer.charclass import (
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_OPERATORS,
    is_digit,
    is_keyword,
    is_letter,
    is_single_char_token,
    is_whitespace,
)
from minic_lexer.tokens import Token, TokenKind


def scan(source: str) -> list[Token]:
    """Split ``source`` into classified tokens.

    Never raises: a character that starts no token is emitted as an
    ``ERROR`` token and scanning resumes at the next character. There is no
    end-of-input token.
    """
    tokens: list[Token] = []
    index = 0
    length = len(source)

    while index < length:
        char = source[index]
        if is_whitespace(char):
            index += 1
            continue

        if is_letter(char):
            value, index = _read_word(source, index)
            kind = TokenKind.KEYWORD if is_keyword(value) else TokenKind.IDENTIFIER
            tokens.append(Token(kind, value))
            continue

        if is_digit(char):
            value, index = _read_integer(source, index)
            tokens.append(Token(TokenKind.INTEGER, value))
            continue

        if is_single_char_token(char):
            token, index = _read_operator(source, index)
            tokens.append(token)
            continue

        tokens.append(Token(TokenKind.ERROR, char))
        index += 1

    return tokens


def _read_word(source: str, index: int) -> tuple[str, int]:
    start = index
    index += 1
    while index < len(source) and (is_letter(source[index]) or is_digit(source[index])):
        index += 1
    return source[start:index], index


def _read_integer(source: str, index: int) -> tuple[str, int]:
    start = index
    index += 1
    while index < len(source) and is_digit(source[index]):
        index += 1
    return source[start:index], index


def _read_operator(source: str, index: int) -> tuple[Token, int]:
    pair = source[index : index + 2]
    kind = TWO_CHAR_OPERATORS.get(pair)
    if kind is not None:
        return Token(kind, pair), index + 2

    char = source[index]
    return Token(SINGLE_CHAR_TOKENS[char], char), index + 1
