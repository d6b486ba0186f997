import pytest

from minic_lexer.config import LexerConfig
from minic_lexer.errors import ConfigurationError


def test_defaults():
    config = LexerConfig()
    assert config.encoding == "utf-8"
    assert config.table_format == "table"
    assert config.show_source is True
    assert config.log_level == "WARNING"


def test_from_env_reads_prefixed_variables():
    config = LexerConfig.from_env(
        environ={
            "MINIC_LEXER_ENCODING": "latin-1",
            "MINIC_LEXER_FORMAT": "json",
            "MINIC_LEXER_SHOW_SOURCE": "off",
            "MINIC_LEXER_LOG_LEVEL": "debug",
        }
    )
    assert config == LexerConfig(
        encoding="latin-1", table_format="json", show_source=False, log_level="DEBUG"
    )


def test_from_env_with_empty_environment_uses_defaults():
    assert LexerConfig.from_env(environ={}) == LexerConfig()


def test_from_env_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("MINIC_LEXER_FORMAT", "tsv")
    assert LexerConfig.from_env().table_format == "tsv"


@pytest.mark.parametrize("value", ["1", "yes", "true", "anything"])
def test_show_source_truthy_values(value):
    assert LexerConfig.from_env(environ={"MINIC_LEXER_SHOW_SOURCE": value}).show_source


def test_unknown_format_is_rejected():
    with pytest.raises(ConfigurationError, match="output format"):
        LexerConfig(table_format="xml")


def test_unknown_log_level_is_rejected():
    with pytest.raises(ConfigurationError, match="log level"):
        LexerConfig.from_env(environ={"MINIC_LEXER_LOG_LEVEL": "loud"})


def test_unknown_encoding_is_rejected():
    with pytest.raises(ConfigurationError, match="encoding") as excinfo:
        LexerConfig(encoding="bogus")
    assert isinstance(excinfo.value.cause, LookupError)


def test_unknown_encoding_from_env_is_rejected():
    with pytest.raises(ConfigurationError, match="encoding"):
        LexerConfig.from_env(environ={"MINIC_LEXER_ENCODING": "no-such-codec"})
