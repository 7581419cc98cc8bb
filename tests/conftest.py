"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

logging.getLogger("livemd_extractor").setLevel(logging.DEBUG)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

MARKER = '<!-- livebook:{"force_markdown":true} -->'


@pytest.fixture
def sample_path() -> Path:
    """Path to the sample Livebook notebook."""
    return FIXTURES_DIR / "sample.md.livemd"


@pytest.fixture
def sample_content(sample_path: Path) -> str:
    """Content of the sample Livebook notebook."""
    return sample_path.read_text(encoding="utf-8")


@pytest.fixture
def marker() -> str:
    """The force_markdown annotation."""
    return MARKER


@pytest.fixture
def simple_document() -> str:
    """Real cell, force_markdown cell, real cell."""
    return (
        "```elixir\na = 1\n```\n\n"
        f"{MARKER}\n\n"
        "```elixir\nb = 2\n```\n\n"
        "```elixir\nc = 3\n```\n"
    )
