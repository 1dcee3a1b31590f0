"""Build a search config from a command-line argument vector."""

import logging
from typing import Sequence

from .config.settings import Settings

from .exceptions import InsufficientArgumentsError
from .models import Config

logger = logging.getLogger(__name__)

# program name, query, filename
MIN_ARGS = 3


def build_config(
    args: Sequence[str],
    debug: bool = False,
    ignore_case: bool | None = None,
) -> Config:
    """Validate an argument vector and build a Config from it.

    args[0] is the program name, args[1] the query and args[2] the filename.
    Anything after that is ignored.

    Args:
        args: Argument vector, program name first
        debug: Log the parsed query and filename
        ignore_case: Match mode; read from MINIGREP_IGNORE_CASE when None

    Raises:
        InsufficientArgumentsError: If fewer than two arguments follow the program name
    """
    if len(args) < MIN_ARGS:
        raise InsufficientArgumentsError()

    query, filename = args[1], args[2]

    if debug:
        logger.info(f"Searching for {query}")
        logger.info(f"In file {filename}")

    if ignore_case is None:
        ignore_case = Settings().ignore_case

    return Config(query=query, filename=filename, ignore_case=ignore_case)


def parse_config(args: Sequence[str]) -> Config:
    """Build a Config with debug logging on."""
    return build_config(args, debug=True)
