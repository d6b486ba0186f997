from minic_lexer.errors import ConfigurationError, LexerError, SourceReadError


def test_source_read_error_names_the_file():
    cause = FileNotFoundError("missing")
    err = SourceReadError("prog.c", cause=cause)

    assert isinstance(err, LexerError)
    assert err.path == "prog.c"
    assert err.cause is cause
    assert str(err) == (
        "Error: Could not open the file 'prog.c'. Please check the path and filename."
    )


def test_configuration_error_is_lexer_error():
    err = ConfigurationError("bad")
    assert isinstance(err, LexerError)
    assert err.cause is None
    assert str(err) == "bad"
