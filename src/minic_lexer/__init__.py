from minic_lexer.config import LexerConfig
from minic_lexer.errors import ConfigurationError, LexerError, SourceReadError
from minic_lexer.runner import ScanResult, run
from minic_lexer.scanner import scan
from minic_lexer.tokens import Token, TokenKind

__all__ = [
    "ConfigurationError",
    "LexerConfig",
    "LexerError",
    "ScanResult",
    "SourceReadError",
    "Token",
    "TokenKind",
    "run",
    "scan",
]
