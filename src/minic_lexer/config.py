"""Runtime settings for the command line shell."""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass

from minic_lexer.errors import ConfigurationError

TABLE_FORMATS = ("table", "json", "tsv")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class LexerConfig:
    encoding: str = "utf-8"
    table_format: str = "table"
    show_source: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"unknown encoding {self.encoding!r}", cause=exc) from exc
        if self.table_format not in TABLE_FORMATS:
            raise ConfigurationError(
                f"unknown output format {self.table_format!r}; "
                f"expected one of {', '.join(TABLE_FORMATS)}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> LexerConfig:
        """Build a config from ``MINIC_LEXER_*`` variables, defaulting the rest."""
        env = os.environ if environ is None else environ
        defaults = cls()

        show_source = defaults.show_source
        raw_show = env.get("MINIC_LEXER_SHOW_SOURCE")
        if raw_show is not None:
            show_source = raw_show.strip().lower() not in _FALSE_VALUES

        return cls(
            encoding=env.get("MINIC_LEXER_ENCODING") or defaults.encoding,
            table_format=env.get("MINIC_LEXER_FORMAT") or defaults.table_format,
            show_source=show_source,
            log_level=env.get("MINIC_LEXER_LOG_LEVEL") or defaults.log_level,
        )
