"""Shared fixtures for minigrep tests."""

import pytest

POEM = """\
Rust:
safe, fast, productive.
needle in the haystack
Pick three."""


@pytest.fixture
def poem() -> str:
    return POEM


@pytest.fixture
def poem_file(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text(POEM + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("MINIGREP_IGNORE_CASE", raising=False)
    monkeypatch.delenv("MINIGREP_ENCODING", raising=False)
