from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from minic_lexer.config import LOG_LEVELS, TABLE_FORMATS, LexerConfig
from minic_lexer.errors import ConfigurationError, SourceReadError
from minic_lexer.log import configure_logging
from minic_lexer.report import format_source, format_tokens
from minic_lexer.runner import run

PROMPT = "Enter the source code filename (e.g., example.txt): "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minic-lexer",
        description="Tokenize a small C-like source file and print the tokens.",
    )
    parser.add_argument("file", nargs="?", help="source file; prompted for when omitted")
    parser.add_argument(
        "--format", dest="table_format", choices=TABLE_FORMATS, help="output format"
    )
    parser.add_argument(
        "--no-source",
        dest="show_source",
        action="store_false",
        default=None,
        help="do not echo the source text before the results",
    )
    parser.add_argument("--encoding", help="source file encoding (default utf-8)")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, help="logging level"
    )
    return parser


def _prompt_filename() -> str:
    print(PROMPT, end="", flush=True)
    line = sys.stdin.readline()
    words = line.split()
    return words[0] if words else ""


def _resolve_config(args: argparse.Namespace) -> LexerConfig:
    overrides = {
        "encoding": args.encoding,
        "table_format": args.table_format,
        "show_source": args.show_source,
        "log_level": args.log_level,
    }
    return replace(
        LexerConfig.from_env(),
        **{key: value for key, value in overrides.items() if value is not None},
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    filename = args.file or _prompt_filename()
    if not filename:
        print("error: no source file given", file=sys.stderr)
        return 2

    try:
        result = run(filename, encoding=config.encoding)
    except SourceReadError as exc:
        print(exc, file=sys.stderr)
        return 1

    if config.table_format == "json":
        print(format_tokens(result.tokens, "json"))
        return 0

    if config.show_source:
        print(format_source(filename, result.source))
        print()
    print(format_tokens(result.tokens, config.table_format))
    return 0
