"""
Pattern library for Argentine DNI text.

Precompiled, module-level and read-only: shared safely by every
extractor instance and thread.
"""

import re

# ─── Numeric shapes ───────────────────────────────────────

# 7-8 digits, optionally grouped in thousands: 12.345.678 / 1.234.567 / 12345678
ID_NUMBER_PATTERN = re.compile(r"\b(\d{1,3}\.?\d{3}\.?\d{3}|\d{7,8})\b", re.ASCII)

# dd/mm/yyyy or dd-mm-yyyy
NUMERIC_DATE_PATTERN = re.compile(r"\b(\d{2})[/-](\d{2})[/-](\d{4})\b", re.ASCII)

# "15 MAR / MAR 1985", "05 NOV/ NOV 2001" (matched against upper-cased text)
LETTERED_DATE_PATTERN = re.compile(r"\b(\d{2})\s+([A-Z]{3})[/\s]+[A-Z]{3}\s+(\d{4})\b", re.ASCII)

# CUIL: 20-12345678-1, 20 - 12345678 - 1
TAX_ID_DASHED_PATTERN = re.compile(r"\b(\d{2})\s*-\s*(\d{7,8})\s*-\s*(\d)\b", re.ASCII)

# CUIL: 20123456781 (only when labeled)
TAX_ID_LABELED_PATTERN = re.compile(r"CUIL[:\s]*(\d{11})", re.ASCII | re.IGNORECASE)

# Spanish + English three-letter month abbreviations
MONTHS = {
    "ENE": "01", "JAN": "01",
    "FEB": "02",
    "MAR": "03",
    "ABR": "04", "APR": "04",
    "MAY": "05",
    "JUN": "06",
    "JUL": "07",
    "AGO": "08", "AUG": "08",
    "SEP": "09",
    "OCT": "10",
    "NOV": "11",
    "DIC": "12", "DEC": "12",
}

# ─── Text shapes ──────────────────────────────────────────

NAME_PATTERN = re.compile(r"[a-zA-ZáéíóúÁÉÍÓÚñÑüÜ\s-]+")

WHITESPACE_PATTERN = re.compile(r"\s+")

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

# Anything but letters, digits, whitespace, "/", "." and "-"
FRONT_NOISE_PATTERN = re.compile(r"[^\w\s/.\-]|_")

# Leading ":" / whitespace left over after a label
LEADING_SEPARATOR_PATTERN = re.compile(r"^[:\s]+")

# ─── Keywords ─────────────────────────────────────────────

SURNAME_KEYWORDS = ("APELLIDO", "SURNAME")
GIVEN_NAME_KEYWORDS = ("NOMBRE", "NAME")
BIRTH_DATE_LABELS = ("FECHA DE NACIMIENTO", "DATE OF BIRTH")
DOMICILE_KEYWORD = "DOMICILIO"
BIRTHPLACE_KEYWORDS = ("LUGAR DE NACIMIENTO", "LUGAR NACIMIENTO", "LUGAR NAC")
TAX_ID_KEYWORD = "CUIL"

FIELD_KEYWORDS = (
    *SURNAME_KEYWORDS,
    *GIVEN_NAME_KEYWORDS,
    *BIRTH_DATE_LABELS,
    DOMICILE_KEYWORD,
    *BIRTHPLACE_KEYWORDS,
    TAX_ID_KEYWORD,
)

NON_FIELD_KEYWORDS = (
    "REPUBLICA", "ARGENTINA", "DOCUMENTO", "NACIONAL", "IDENTIDAD",
    "DNI", "SEXO", "NACIONALIDAD", "EJEMPLAR",
)

BACK_NON_FIELD_KEYWORDS = ("MINISTRO", "PULGAR")

# Header lines that look like names but never are
NON_NAME_HEADERS = ("ARGENTINA", "EJEMPLAR", "SEXO", "SEX")

# A back-side line containing one of these starts another field
ADDRESS_STOP_WORDS = ("LUGAR", "NACIMIENTO", TAX_ID_KEYWORD, DOMICILE_KEYWORD, *BACK_NON_FIELD_KEYWORDS)

# ─── Heuristic windows ────────────────────────────────────

DATE_GUARD_BEFORE = 3
DATE_GUARD_AFTER = 15

BIRTH_YEAR_MIN = 1900
BIRTH_YEAR_MAX = 2010

MAX_NAME_WORDS = 6
MIN_NAME_WORD_LENGTH = 2


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Case-insensitive substring test against a keyword tuple."""
    upper = text.upper()
    return any(kw in upper for kw in keywords)


def contains_keywords(text: str) -> bool:
    """True when the text holds any field or non-field DNI keyword."""
    return contains_any(text, FIELD_KEYWORDS) or contains_any(text, NON_FIELD_KEYWORDS)
