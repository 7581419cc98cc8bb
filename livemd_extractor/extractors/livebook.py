"""Scanner-based Livebook cell extractor and the module-level API."""

import logging

from ..constants import DEFAULT_LANGUAGE
from .base import BaseCellExtractor
from .classifier import annotate_cells, filter_cells, join_cells
from .exceptions import ExtractionError
from .scanner import DocumentScanner

logger = logging.getLogger(__name__)


class LivebookCellExtractor(BaseCellExtractor):
    """Extract Livebook code cells, skipping force_markdown examples."""

    name = "livebook"

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        super().__init__(language)
        self.scanner = DocumentScanner(language)

    def extract_code_cells(self, content: str) -> list[str]:
        """
        Extract executable code cells.

        Raises:
            ExtractionError: The document could not be scanned
        """
        return filter_cells(self.scanner.scan(content))

    def extract_all_code_cells(self, content: str) -> list[tuple[str, bool]]:
        """
        Extract every code cell with its force_markdown flag.

        Raises:
            ExtractionError: The document could not be scanned
        """
        return annotate_cells(self.scanner.scan(content))

    def extract_executable_code(self, content: str) -> str:
        """Joined executable code; an empty string when scanning fails."""
        try:
            cells = self.extract_code_cells(content)
        except ExtractionError as e:
            logger.warning(f"Could not extract code, returning empty string: {e}")
            return ""
        return join_cells(cells)


def extract_code_cells(document: str, language: str = DEFAULT_LANGUAGE) -> list[str]:
    """
    Extract all real code cells from a Livebook document.

    Cells marked with force_markdown are left out.

    Example:
        >>> extract_code_cells('```elixir\\na = 1\\n```\\n')
        ['a = 1\\n']
    """
    return LivebookCellExtractor(language).extract_code_cells(document)


def extract_all_code_cells(document: str, language: str = DEFAULT_LANGUAGE) -> list[tuple[str, bool]]:
    """Extract every code cell as a (content, is_doc_only) pair."""
    return LivebookCellExtractor(language).extract_all_code_cells(document)


def extract_executable_code(document: str, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Extract executable code as one string.

    Scan failures are swallowed and give an empty string, so callers of this
    function never see an ExtractionError.
    """
    return LivebookCellExtractor(language).extract_executable_code(document)
