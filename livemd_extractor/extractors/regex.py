"""Line-based extractor kept as a reference for the scanner."""

import logging
import re

from ..constants import DEFAULT_LANGUAGE, FENCE
from .base import BaseCellExtractor
from .classifier import join_cells

logger = logging.getLogger(__name__)


class RegexCellExtractor(BaseCellExtractor):
    """Extract cells line by line with regular expressions.

    A marker must sit on its own line and fences must open at the start of a
    line. Unclosed fences run to the end of the document.
    """

    name = "regex"

    MARKER_LINE_PATTERN = re.compile(
        r'^\s*<!--\s*livebook:\s*\{\s*"force_markdown"\s*:\s*true\s*\}\s*-->\s*$'
    )

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        super().__init__(language)
        self.fence_pattern = re.compile(rf'^{re.escape(FENCE + language)}')

    def extract_executable_code(self, content: str) -> str:
        return join_cells(self.extract_code_cells(content))

    def extract_code_cells(self, content: str) -> list[str]:
        """Find executable cells in the document."""
        cells = []
        lines = content.split('\n')
        skip_next = False
        i = 0

        while i < len(lines):
            line = lines[i]

            if self.MARKER_LINE_PATTERN.match(line):
                skip_next = True
                i += 1
                continue

            if self.fence_pattern.match(line):
                i += 1
                code_lines = []

                while i < len(lines):
                    if lines[i].strip().startswith(FENCE):
                        break
                    code_lines.append(lines[i])
                    i += 1
                else:
                    logger.debug("Unclosed fence, extracting until end of document")

                if skip_next:
                    logger.debug("Skipping force_markdown cell")
                else:
                    cells.append('\n'.join(code_lines))
                skip_next = False
                i += 1
                continue

            if line.strip():
                skip_next = False
            i += 1

        return cells
