"""Read, search and report for one config."""

import logging
import sys
from typing import TextIO

from .models import Config, SearchResult
from .reader import read_file
from .search import search

logger = logging.getLogger(__name__)


def format_finding(index: int, result: SearchResult) -> str:
    return f"Finding #{index} at line {result.line_number} :: {result.line}"


def run(config: Config, out: TextIO | None = None) -> list[SearchResult]:
    """Search config.filename for config.query and print each finding.

    Raises:
        FileReadError: If the file cannot be read; nothing is printed
    """
    if out is None:
        out = sys.stdout

    contents = read_file(config)
    results = search(config.query, contents, ignore_case=config.ignore_case)

    for index, result in enumerate(results, start=1):
        print(format_finding(index, result), file=out)

    logger.debug(f"{len(results)} findings in {config.filename}")
    return results
