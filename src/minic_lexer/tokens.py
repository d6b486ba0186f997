from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    RELATIONAL_OPERATOR = "RELATIONAL_OPERATOR"
    ARITHMETIC_OPERATOR = "ARITHMETIC_OPERATOR"
    ASSIGNMENT_OPERATOR = "ASSIGNMENT_OPERATOR"
    DELIMITER = "DELIMITER"
    ERROR = "ERROR"


@dataclass(slots=True, frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
