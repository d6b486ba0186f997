from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from minic_lexer.log import get_logger
from minic_lexer.scanner import scan
from minic_lexer.source import read_source
from minic_lexer.tokens import Token, TokenKind

logger = get_logger(__name__)


@dataclass(slots=True)
class ScanResult:
    path: str
    source: str
    tokens: list[Token] = field(default_factory=list)

    @property
    def errors(self) -> list[Token]:
        return [token for token in self.tokens if token.kind is TokenKind.ERROR]

    @property
    def ok(self) -> bool:
        return not self.errors

    def counts(self) -> dict[TokenKind, int]:
        return dict(Counter(token.kind for token in self.tokens))


def run(path: str | Path, encoding: str = "utf-8") -> ScanResult:
    source = read_source(path, encoding=encoding)
    tokens = scan(source)
    result = ScanResult(path=str(path), source=source, tokens=tokens)

    error_count = len(result.errors)
    logger.info("scanned %s: %d tokens, %d errors", path, len(tokens), error_count)
    if error_count:
        unexpected = "".join(token.lexeme for token in result.errors)
        logger.warning("unrecognized characters in %s: %r", path, unexpected)

    return result
