"""
Per-call scanning state over a NormalizedText.

Not thread-safe: one ExtractionContext per extraction call.
"""

from collections.abc import Callable, Iterator
from typing import Any

from dni_scanner.core.entities.normalized_text import NormalizedText


class ExtractionContext:
    """Lines of one OCR side plus a cursor over them."""

    def __init__(self, normalized: NormalizedText):
        self.lines = normalized.lines
        self.text = normalized.text
        self.cursor = 0

    def scan(self, start: int = 0) -> Iterator[tuple[int, str]]:
        """Yield (index, line), keeping the cursor on the yielded line."""
        for index in range(start, len(self.lines)):
            self.cursor = index
            yield index, self.lines[index]

    def peek_next(self) -> str | None:
        """Line right after the cursor, or None at the end."""
        index = self.cursor + 1
        if index < len(self.lines):
            return self.lines[index]
        return None

    def line_bounds(self, offset: int) -> tuple[int, int]:
        """[start, end) of the line containing the character offset in self.text."""
        start = self.text.rfind("\n", 0, offset) + 1
        end = self.text.find("\n", offset)
        return start, len(self.text) if end == -1 else end


# A strategy reads the context and returns a value or None
Strategy = Callable[[ExtractionContext], Any]


def _succeeded(value: Any) -> bool:
    if isinstance(value, tuple):
        return any(v is not None for v in value)
    return value is not None


def run_strategies(
    strategies: list[tuple[str, Strategy]],
    ctx: ExtractionContext,
) -> tuple[Any, str | None]:
    """
    Run (name, strategy) pairs in order; first success wins.

    Returns:
        (value, strategy_name), or (None, None) when all fail.
    """
    for name, strategy in strategies:
        ctx.cursor = 0
        value = strategy(ctx)
        if _succeeded(value):
            return value, name
    return None, None
