from pathlib import Path

from minic_lexer.errors import SourceReadError
from minic_lexer.log import get_logger

logger = get_logger(__name__)


def read_source(path: str | Path, encoding: str = "utf-8") -> str:
    """Read the whole file at ``path`` as one decoded string."""
    source_path = Path(path)
    try:
        text = source_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, cause=exc) from exc

    logger.debug("read %d characters from %s", len(text), source_path)
    return text
