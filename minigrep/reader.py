"""Load the file to search."""

import logging
from pathlib import Path

from .config.settings import settings

from .exceptions import FileReadError
from .models import Config

logger = logging.getLogger(__name__)


def read_file(source: Config | str | Path, encoding: str | None = None) -> str:
    """Read a whole file as text.

    Args:
        source: A Config (its filename is used) or a path
        encoding: Text encoding (defaults to settings.encoding)

    Raises:
        FileReadError: If the file cannot be opened or decoded, or the encoding is unknown
    """
    path = source.filename if isinstance(source, Config) else str(source)
    encoding = encoding or settings.encoding

    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            contents = f.read()
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FileReadError(path, f"not valid {encoding} text") from e
    except LookupError as e:
        raise FileReadError(path, f"unknown encoding {encoding}") from e

    logger.debug(f"Read {len(contents)} characters from {path}")
    return contents
