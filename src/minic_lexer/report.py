"""Text rendering of a scan for the console."""

from __future__ import annotations

import json
from collections.abc import Iterable

from tabulate import tabulate

from minic_lexer.tokens import Token

HEADERS = ("Type", "Value")
SOURCE_RULE = "-" * 19


def format_source(name: str, source: str) -> str:
    return f"--- Source Code Read from {name} ---\n{source}\n{SOURCE_RULE}"


def _display_lexeme(lexeme: str) -> str:
    # tabulate strips whitespace, so control characters would print as empty cells
    return lexeme if lexeme.isprintable() else repr(lexeme)[1:-1]


def format_tokens(tokens: Iterable[Token], table_format: str = "table") -> str:
    if table_format == "json":
        return json.dumps(
            [{"kind": token.kind.value, "lexeme": token.lexeme} for token in tokens], indent=2
        )

    rows = [(token.kind.value, _display_lexeme(token.lexeme)) for token in tokens]

    # disable_numparse keeps INTEGER lexemes such as "007" verbatim
    if table_format == "tsv":
        table = tabulate(
            rows, headers=HEADERS, tablefmt="tsv", disable_numparse=True, stralign=None
        )
    else:
        table = tabulate(rows, headers=HEADERS, tablefmt="simple", disable_numparse=True)
    return f"--- Lexical Analysis Results ---\n{table}"
