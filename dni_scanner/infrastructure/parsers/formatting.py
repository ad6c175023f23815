"""
Cleaning helpers shared by the front and back parsers.
"""

from dni_scanner.infrastructure.parsers.patterns import (
    MAX_NAME_WORDS,
    MIN_NAME_WORD_LENGTH,
    NAME_PATTERN,
    WHITESPACE_PATTERN,
)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def title_case_words(text: str) -> str:
    """
    Capitalize the first letter of every word and lower-case the rest.

    Unlike str.title(), letters after "-" or "'" stay lower-case:
    "PEREZ-GOMEZ" -> "Perez-gomez".
    """
    words = collapse_whitespace(text).lower().split(" ")
    return " ".join(w[0].upper() + w[1:] for w in words if w)


def clean_name(name: str) -> str:
    return title_case_words(name)


def is_valid_name(text: str | None, max_words: int = MAX_NAME_WORDS) -> bool:
    """Letters/accents/hyphens only, 1..max_words words of 2+ chars each."""
    if text is None or len(text) < 2:
        return False

    if not NAME_PATTERN.fullmatch(text):
        return False

    words = text.split()
    if not words or len(words) > max_words:
        return False

    return all(len(w) >= MIN_NAME_WORD_LENGTH for w in words)


def format_tax_id(prefix: str, number: str, check: str) -> str:
    """NN-NNNNNNNN-N; a 7-digit DNI in the middle is zero-padded."""
    return f"{prefix}-{number.zfill(8)}-{check}"
