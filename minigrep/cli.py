"""Command-line entry point."""

import logging
import sys
from typing import Sequence

from .config.settings import settings

from .arguments import build_config
from .exceptions import ConfigurationError, FileReadError
from .runner import run

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Run minigrep and return the process exit code."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if argv is None:
        argv = sys.argv

    try:
        config = build_config(argv, debug=settings.debug)
    except ConfigurationError as e:
        print(f"Problem parsing arguments; ERROR: {e}", file=sys.stderr)
        return 1

    try:
        run(config)
    except FileReadError as e:
        logger.debug(f"Run failed for {config.filename}", exc_info=True)
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
