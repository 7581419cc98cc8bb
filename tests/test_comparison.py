"""Tests for comparing extractors."""

from livemd_extractor.comparison import ComparisonResult, built_in_cases, compare_extractors
from livemd_extractor.extractors.base import BaseCellExtractor
from livemd_extractor.extractors.livebook import LivebookCellExtractor
from livemd_extractor.extractors.regex import RegexCellExtractor


class ConstantExtractor(BaseCellExtractor):
    """Extractor that always returns the same string."""

    def __init__(self, output: str):
        super().__init__()
        self.output = output

    def extract_executable_code(self, content: str) -> str:
        return self.output


class TestCompareExtractors:
    """Test compare_extractors."""

    def test_built_in_cases_agree(self):
        results = compare_extractors(
            built_in_cases(), RegexCellExtractor(), LivebookCellExtractor()
        )

        assert len(results) == 3
        assert all(result.passed for result in results)
        assert results[0].candidate_output == "a = 1\n\nc = 3"

    def test_sample_agrees(self, sample_content):
        results = compare_extractors(
            [("sample", sample_content)], RegexCellExtractor(), LivebookCellExtractor()
        )

        assert results[0].passed

    def test_mismatch_reported(self):
        results = compare_extractors(
            [("one", "x"), ("two", "y")], ConstantExtractor("a"), ConstantExtractor("b")
        )

        assert [result.name for result in results] == ["one", "two"]
        assert not any(result.passed for result in results)

    def test_result_passed(self):
        assert ComparisonResult("case", "a", "a").passed
        assert not ComparisonResult("case", "a", "b").passed
