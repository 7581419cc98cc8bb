"""Code cell extractors for Livebook documents."""

from .base import BaseCellExtractor
from .classifier import annotate_cells, filter_cells, join_cells
from .exceptions import ExtractionError, IncompleteScanError, UnterminatedFenceError
from .factory import create_extractor
from .livebook import (
    LivebookCellExtractor,
    extract_all_code_cells,
    extract_code_cells,
    extract_executable_code,
)
from .models import CodeBlock, Marker
from .regex import RegexCellExtractor
from .scanner import DocumentScanner, scan_document

__all__ = [
    'BaseCellExtractor',
    'CodeBlock',
    'DocumentScanner',
    'ExtractionError',
    'IncompleteScanError',
    'LivebookCellExtractor',
    'Marker',
    'RegexCellExtractor',
    'UnterminatedFenceError',
    'annotate_cells',
    'create_extractor',
    'extract_all_code_cells',
    'extract_code_cells',
    'extract_executable_code',
    'filter_cells',
    'join_cells',
    'scan_document',
]
