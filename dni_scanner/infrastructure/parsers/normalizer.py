"""
Text normalizer: raw OCR blob -> NormalizedText.

Pure functions. Line structure is preserved because most field
heuristics work on "this line / the next line".
"""

import unicodedata

from dni_scanner.core.entities.normalized_text import NormalizedText
from dni_scanner.infrastructure.parsers.formatting import collapse_whitespace
from dni_scanner.infrastructure.parsers.patterns import FRONT_NOISE_PATTERN, LINE_BREAK_PATTERN


def normalize(raw_text: str | None, strip_noise: bool = False) -> NormalizedText:
    """
    Clean an OCR blob line by line.

    Args:
        raw_text: Text as returned by the OCR engine (may be None).
        strip_noise: Also drop every character that is not a letter,
            digit, whitespace, "/", "." or "-" (front side).

    Returns:
        NormalizedText; empty when nothing survives the cleaning.
    """
    if not raw_text:
        return NormalizedText()

    # NFC keeps decomposed accents ("A" + U+0301) from being stripped as noise
    text = unicodedata.normalize("NFC", raw_text)

    lines = []
    for line in LINE_BREAK_PATTERN.split(text):
        if strip_noise:
            line = FRONT_NOISE_PATTERN.sub("", line)
        line = collapse_whitespace(line)
        if line:
            lines.append(line)

    return NormalizedText(lines=tuple(lines))


def normalize_front(raw_text: str | None) -> NormalizedText:
    return normalize(raw_text, strip_noise=True)


def normalize_back(raw_text: str | None) -> NormalizedText:
    return normalize(raw_text, strip_noise=False)
