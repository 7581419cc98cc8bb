"""Tests for extractor factory."""

from livemd_extractor.constants import is_livebook_file
from livemd_extractor.extractors.factory import create_extractor
from livemd_extractor.extractors.livebook import LivebookCellExtractor
from livemd_extractor.extractors.regex import RegexCellExtractor


class TestExtractorFactory:
    """Test the extractor factory."""

    def test_create_livebook_extractor_by_kind(self):
        assert isinstance(create_extractor(kind='livebook'), LivebookCellExtractor)
        assert isinstance(create_extractor(kind='Scanner'), LivebookCellExtractor)

    def test_create_regex_extractor_by_kind(self):
        assert isinstance(create_extractor(kind='regex'), RegexCellExtractor)
        assert isinstance(create_extractor(kind='legacy'), RegexCellExtractor)

    def test_create_by_extension(self):
        assert isinstance(create_extractor(file_path='notebook.livemd'), LivebookCellExtractor)
        assert isinstance(create_extractor(file_path='sample.md.livemd'), LivebookCellExtractor)
        assert isinstance(create_extractor(file_path='README.md'), LivebookCellExtractor)

    def test_extension_case_insensitive(self):
        assert isinstance(create_extractor(file_path='Notebook.LIVEMD'), LivebookCellExtractor)

    def test_is_livebook_file(self):
        assert is_livebook_file('guide.markdown')
        assert not is_livebook_file('notes.txt')
        assert not is_livebook_file('livemd')

    def test_language_passed_through(self):
        extractor = create_extractor(kind='regex', language='erlang')

        assert extractor.language == 'erlang'

    def test_unsupported(self):
        assert create_extractor(kind='html') is None
        assert create_extractor(file_path='index.rst') is None
        assert create_extractor() is None
