"""Single-pass scanner for Livebook markdown documents.

The scanner walks the document once with an index cursor. At every position
it looks ahead for a force_markdown marker comment, then for an opening fence
tagged with the configured language. Anything else is ordinary content and is
skipped one character at a time.
"""

import json
import logging
import re

from ..constants import COMMENT_OPEN, DEFAULT_LANGUAGE, FENCE, FORCE_MARKDOWN_KEY
from .exceptions import IncompleteScanError, UnterminatedFenceError
from .models import CodeBlock, Marker, Node

logger = logging.getLogger(__name__)


class DocumentScanner:
    """Turn a document into an ordered list of Marker and CodeBlock nodes."""

    # <!-- livebook:{...} --> with optional whitespace around the delimiters,
    # followed by any blank lines. The payload runs up to the first closing
    # brace before -->, json.loads decides whether it is an object.
    MARKER_PATTERN = re.compile(
        r'<!--[ \t\n]*livebook:[ \t\n]*(\{.*?\})[ \t\n]*-->[ \t\n]*',
        re.DOTALL,
    )

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if not language:
            raise ValueError("language tag must not be empty")
        self.language = language
        self.fence_open = FENCE + language

    def scan(self, document: str) -> list[Node]:
        """
        Scan the whole document.

        Args:
            document: Full document text

        Returns:
            Nodes in document order

        Raises:
            UnterminatedFenceError: An opening fence is never closed
            IncompleteScanError: Input was left unconsumed
        """
        if not isinstance(document, str):
            raise TypeError(f"document must be str, not {type(document).__name__}")

        nodes: list[Node] = []
        pending_marker = False
        pos = 0
        length = len(document)

        while pos < length:
            marker_end = self._match_marker(document, pos)
            if marker_end is not None:
                nodes.append(Marker(start=pos, end=marker_end))
                pending_marker = True
                pos = marker_end
                continue

            body_start = self._match_fence_open(document, pos)
            if body_start is not None:
                close = document.find(FENCE, body_start)
                if close == -1:
                    raise UnterminatedFenceError(pos)
                block = CodeBlock(
                    content=document[body_start:close],
                    is_doc_only=pending_marker,
                    start=pos,
                    end=close + len(FENCE),
                )
                logger.debug(
                    f"Code block at offset {pos} ({len(block.content)} chars, doc_only={block.is_doc_only})"
                )
                nodes.append(block)
                pending_marker = False
                pos = block.end
                continue

            # Ordinary content; only whitespace may sit between a marker and its block
            if pending_marker and not document[pos].isspace():
                logger.debug(f"Marker not followed by a code block, dropped at offset {pos}")
                pending_marker = False
            pos += 1

        if pos != length:
            raise IncompleteScanError(pos, document[pos:])

        if pending_marker:
            logger.debug("Discarding marker at end of document")

        return nodes

    def _match_marker(self, document: str, pos: int) -> int | None:
        """Return the end offset of a force_markdown marker at pos, if any."""
        if not document.startswith(COMMENT_OPEN, pos):
            return None

        match = self.MARKER_PATTERN.match(document, pos)
        if not match:
            return None

        try:
            payload = json.loads(match.group(1))
        except json.JSONDecodeError:
            logger.debug(f"Ignoring livebook comment with invalid payload at offset {pos}")
            return None

        if not isinstance(payload, dict) or payload.get(FORCE_MARKDOWN_KEY) is not True:
            return None

        return match.end()

    def _match_fence_open(self, document: str, pos: int) -> int | None:
        """Return the offset where the body of a tagged fence at pos starts."""
        if not document.startswith(self.fence_open, pos):
            return None

        newline = document.find('\n', pos + len(self.fence_open))
        if newline == -1:
            return None

        return newline + 1


def scan_document(document: str, language: str = DEFAULT_LANGUAGE) -> list[Node]:
    """Scan a document with a one-off scanner for the given fence language."""
    return DocumentScanner(language).scan(document)
