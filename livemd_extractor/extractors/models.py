"""Node types produced by the document scanner."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """A force_markdown annotation; flags the next code block as doc-only."""
    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class CodeBlock:
    """Content of one tagged fence."""
    content: str
    is_doc_only: bool = False
    start: int = 0          # Offset of the opening backticks
    end: int = 0            # Offset just past the closing backticks

    @property
    def is_executable(self) -> bool:
        return not self.is_doc_only

    def as_pair(self) -> tuple[str, bool]:
        """Return the (content, is_doc_only) view of this block."""
        return self.content, self.is_doc_only


Node = Marker | CodeBlock
