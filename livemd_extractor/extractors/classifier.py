"""Views over the scanner's node sequence."""

from collections.abc import Iterable

from ..constants import CELL_SEPARATOR
from .models import CodeBlock, Node


def code_blocks(nodes: Iterable[Node]) -> list[CodeBlock]:
    """Keep only the code blocks, in document order."""
    return [node for node in nodes if isinstance(node, CodeBlock)]


def filter_cells(nodes: Iterable[Node]) -> list[str]:
    """Contents of executable blocks."""
    return [block.content for block in code_blocks(nodes) if block.is_executable]


def annotate_cells(nodes: Iterable[Node]) -> list[tuple[str, bool]]:
    """(content, is_doc_only) for every block, doc-only ones included."""
    return [block.as_pair() for block in code_blocks(nodes)]


def join_cells(cells: Iterable[str]) -> str:
    """
    Join cells into a single source string.

    Each cell loses its trailing whitespace, cells are separated by one blank
    line and the result is stripped.
    """
    return CELL_SEPARATOR.join(cell.rstrip() for cell in cells).strip()
