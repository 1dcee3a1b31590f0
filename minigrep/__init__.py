"""minigrep: search a file for lines containing a query."""

from .arguments import build_config, parse_config
from .exceptions import (
    ConfigurationError,
    FileReadError,
    InsufficientArgumentsError,
    MinigrepError,
)
from .models import Config, SearchResult
from .reader import read_file
from .runner import run
from .search import MatchMode, search, search_case_insensitive

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigurationError",
    "FileReadError",
    "InsufficientArgumentsError",
    "MatchMode",
    "MinigrepError",
    "SearchResult",
    "build_config",
    "parse_config",
    "read_file",
    "run",
    "search",
    "search_case_insensitive",
]
