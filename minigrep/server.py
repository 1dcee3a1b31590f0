"""FastMCP server exposing file search as a tool."""

import logging
import os
from pathlib import Path

from fastmcp import FastMCP

from minigrep.config.settings import settings
from minigrep.exceptions import FileReadError
from minigrep.reader import read_file
from minigrep.search import search

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 10_000
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB

mcp = FastMCP(
    "minigrep",
    instructions="Line search in a single text file. Call search_file with a query and a file path.",
)


def _search_file(query: str, path: str, ignore_case: bool | None = None) -> list[dict]:
    if not query:
        return [{"error": "Query cannot be empty"}]
    if len(query) > MAX_QUERY_LENGTH:
        return [{"error": f"Query too long (max {MAX_QUERY_LENGTH} characters)"}]

    if ignore_case is None:
        ignore_case = settings.ignore_case

    file_path = Path(os.path.expanduser(path))
    if not file_path.is_file():
        logger.warning(f"Invalid path provided: {path}")
        return [{"error": f"File not found: {path}"}]
    if file_path.stat().st_size > MAX_FILE_SIZE:
        return [{"error": f"File too large (max {MAX_FILE_SIZE} bytes)"}]

    try:
        contents = read_file(file_path)
    except FileReadError as e:
        logger.error(f"Read error: {e}")
        return [{"error": str(e)}]

    results = search(query, contents, ignore_case=ignore_case)
    logger.info(f"search_file returned {len(results)} findings for {path}")

    if not results:
        return [{"message": "No results found", "query": query}]

    return [
        {"finding": i, "line_number": r.line_number, "line": r.line}
        for i, r in enumerate(results, start=1)
    ]


@mcp.tool()
async def search_file(query: str, path: str, ignore_case: bool | None = None) -> list[dict]:
    """Find the lines of a text file that contain a query string.

    Args:
        query: Literal text to look for (no regular expressions)
        path: Path to the file to search
        ignore_case: Ignore case when matching (defaults to MINIGREP_IGNORE_CASE)

    Returns:
        One entry per matching line with finding index, line number and line text
    """
    return _search_file(query, path, ignore_case)


def main() -> None:
    """Main entry point for MCP server."""
    logger.info("Starting minigrep MCP server...")
    try:
        mcp.run()
    except Exception as e:
        logger.exception(f"Server error: {e}")
        raise SystemExit(1)
    finally:
        logger.info("Server stopped")


if __name__ == "__main__":
    main()
