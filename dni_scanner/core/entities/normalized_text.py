"""
Entity: Normalized Text

Line-oriented view of one OCR blob after cleaning. Ephemeral:
built per extraction call and never cached.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedText:
    """Ordered, non-empty, whitespace-collapsed lines."""
    lines: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def __len__(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return self.text
