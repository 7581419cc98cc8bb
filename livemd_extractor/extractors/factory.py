"""Factory for creating cell extractors."""

from ..constants import DEFAULT_LANGUAGE, is_livebook_file
from .base import BaseCellExtractor
from .livebook import LivebookCellExtractor
from .regex import RegexCellExtractor


def create_extractor(
    kind: str | None = None,
    file_path: str | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> BaseCellExtractor | None:
    """
    Create an extractor by name or from a file extension.

    Args:
        kind: Optional extractor name ('livebook', 'scanner', 'regex', 'legacy')
        file_path: Optional file path to determine type from extension
        language: Fence language tag

    Returns:
        Extractor instance or None if nothing matches
    """
    if kind:
        kind = kind.lower()
        if kind in ['livebook', 'scanner']:
            return LivebookCellExtractor(language)
        elif kind in ['regex', 'legacy']:
            return RegexCellExtractor(language)
        return None

    if file_path and is_livebook_file(file_path):
        return LivebookCellExtractor(language)

    return None
