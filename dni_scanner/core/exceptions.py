"""
Domain errors raised by the extraction engine.

Only the front side can fail a scan. Missing fields and back-side
problems degrade to a partial record instead of raising.
"""


class ScannerError(Exception):
    """Base class for every error raised by the scanner core."""


class ParsingError(ScannerError):
    """Front-side OCR text is empty or has nothing left after normalization."""

    def __init__(self, message: str, side: str = "front"):
        super().__init__(message)
        self.side = side
