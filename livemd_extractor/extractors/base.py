"""Abstract base class for all cell extractors."""

from abc import ABC, abstractmethod

from ..constants import DEFAULT_LANGUAGE


class BaseCellExtractor(ABC):
    """Abstract base class for all cell extractors."""

    name = "base"

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self.language = language

    @abstractmethod
    def extract_executable_code(self, content: str) -> str:
        """
        Extract the executable code of a document as a single string.

        Args:
            content: Full Livebook markdown document

        Returns:
            Executable cells joined by blank lines, or an empty string
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(language={self.language!r})"
