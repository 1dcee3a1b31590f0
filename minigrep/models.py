"""Shared data models for the minigrep package."""

from dataclasses import dataclass

from .config.settings import Settings


@dataclass(frozen=True)
class Config:
    """Validated search configuration."""

    query: str
    filename: str
    ignore_case: bool = False

    @classmethod
    def new(cls, query: str, filename: str) -> "Config":
        """Build a config, taking ignore_case from MINIGREP_IGNORE_CASE."""
        return cls(query=query, filename=filename, ignore_case=Settings().ignore_case)


@dataclass(frozen=True)
class SearchResult:
    """A matching line and its 1-based line number."""

    line_number: int
    line: str
