import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    for name in (
        "MINIC_LEXER_ENCODING",
        "MINIC_LEXER_FORMAT",
        "MINIC_LEXER_SHOW_SOURCE",
        "MINIC_LEXER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("minic_lexer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
