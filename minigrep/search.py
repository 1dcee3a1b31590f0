"""Line-oriented substring search."""

import logging
from enum import Enum
from typing import Iterator

from .models import SearchResult

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "---> No results found"


class MatchMode(Enum):
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"

    @classmethod
    def from_flag(cls, ignore_case: bool) -> "MatchMode":
        return cls.INSENSITIVE if ignore_case else cls.SENSITIVE

    def normalize(self, text: str) -> str:
        # Plain lower(), not casefold(): "ß" stays "ß".
        return text.lower() if self is MatchMode.INSENSITIVE else text


def iter_lines(contents: str) -> Iterator[str]:
    """Yield lines split on "\\n", dropping a trailing "\\r" from each.

    A trailing newline does not produce an empty last line, and empty
    contents yield nothing. Unlike str.splitlines(), form feeds and other
    Unicode separators stay inside the line.
    """
    if not contents:
        return
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def search(query: str, contents: str, ignore_case: bool = False) -> list[SearchResult]:
    """Return every line of contents that contains query.

    Args:
        query: Literal text to look for
        contents: Text to search
        ignore_case: Compare after lowercasing both sides

    Returns:
        One SearchResult per matching line, in line order. The line text is
        returned as it appears in contents.
    """
    mode = MatchMode.from_flag(ignore_case)
    needle = mode.normalize(query)

    results = [
        SearchResult(line_number=i, line=line)
        for i, line in enumerate(iter_lines(contents), start=1)
        if needle in mode.normalize(line)
    ]

    if not results:
        logger.info(NO_RESULTS_MESSAGE)

    return results


def search_case_insensitive(query: str, contents: str) -> list[SearchResult]:
    return search(query, contents, ignore_case=True)
