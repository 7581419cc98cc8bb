"""Extract executable Elixir code cells from Livebook markdown."""

from .constants import __version__
from .extractors import (
    CodeBlock,
    DocumentScanner,
    ExtractionError,
    IncompleteScanError,
    LivebookCellExtractor,
    Marker,
    RegexCellExtractor,
    UnterminatedFenceError,
    create_extractor,
    extract_all_code_cells,
    extract_code_cells,
    extract_executable_code,
    scan_document,
)

__all__ = [
    'CodeBlock',
    'DocumentScanner',
    'ExtractionError',
    'IncompleteScanError',
    'LivebookCellExtractor',
    'Marker',
    'RegexCellExtractor',
    'UnterminatedFenceError',
    '__version__',
    'create_extractor',
    'extract_all_code_cells',
    'extract_code_cells',
    'extract_executable_code',
    'scan_document',
]
