"""Errors raised while scanning a Livebook document."""


class ExtractionError(Exception):
    """Base exception for scan failures.

    Carries the character offset where scanning stopped and a short reason.
    """

    def __init__(self, position: int, reason: str):
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} (at offset {position})")


class UnterminatedFenceError(ExtractionError):
    """An opening fence has no closing fence before end of input."""

    def __init__(self, position: int):
        super().__init__(position, "unterminated code fence")


class IncompleteScanError(ExtractionError):
    """The scan loop stopped with input left over."""

    def __init__(self, position: int, remaining: str):
        self.remaining = remaining
        super().__init__(position, f"parsing incomplete, remaining: {remaining!r}")
