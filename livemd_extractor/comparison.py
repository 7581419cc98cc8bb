"""Check that two extractors agree on the joined executable code."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .extractors.base import BaseCellExtractor

logger = logging.getLogger(__name__)


@dataclass
class ComparisonResult:
    """Outcome of running one document through both extractors."""
    name: str
    reference_output: str
    candidate_output: str

    @property
    def passed(self) -> bool:
        return self.reference_output == self.candidate_output


def built_in_cases() -> list[tuple[str, str]]:
    """Documents both extractors must agree on."""
    return [
        (
            "Simple case with force_markdown",
            "# Title\n\n"
            "```elixir\na = 1\n```\n\n"
            '<!-- livebook:{"force_markdown":true} -->\n\n'
            "```elixir\nb = 2\n```\n\n"
            "```elixir\nc = 3\n```\n",
        ),
        (
            "Multiple force_markdown blocks",
            "```elixir\nreal1 = 1\n```\n\n"
            '<!-- livebook:{"force_markdown":true} -->\n\n'
            "```elixir\nfake1 = 2\n```\n\n"
            "```elixir\nreal2 = 3\n```\n\n"
            '<!-- livebook:{"force_markdown":true} -->\n\n'
            "```elixir\nfake2 = 4\n```\n\n"
            "```elixir\nreal3 = 5\n```\n",
        ),
        (
            "Complex code with Mix.install",
            "```elixir\nMix.install([\n  {:req, \"~> 0.5.16\"}\n])\n```\n\n"
            "```elixir\n# Real code\na = 5\n```\n\n"
            '<!-- livebook:{"force_markdown":true} -->\n\n'
            "```elixir\nb = 3\n```\n\n"
            "```elixir\nc = \"final\"\n```\n",
        ),
    ]


def compare_extractors(
    cases: Iterable[tuple[str, str]],
    reference: BaseCellExtractor,
    candidate: BaseCellExtractor,
) -> list[ComparisonResult]:
    """
    Run every case through both extractors.

    Args:
        cases: (name, document) pairs
        reference: Extractor whose output is taken as correct
        candidate: Extractor under test

    Returns:
        One result per case, in input order
    """
    results = []
    for name, content in cases:
        result = ComparisonResult(
            name=name,
            reference_output=reference.extract_executable_code(content),
            candidate_output=candidate.extract_executable_code(content),
        )
        if result.passed:
            logger.info(f"{name}: outputs match ({len(result.candidate_output)} chars)")
        else:
            logger.warning(f"{name}: outputs differ")
        results.append(result)
    return results
