"""
Adapter: DNI Front Side Parser.

Recovers ID number, birth date, surname and given name from the
OCR text of the front of an Argentine DNI. Each field is resolved by
an ordered list of strategies; the first one that returns a value wins.

Strategies:
    id_number   → digit_run
    birth_date  → labeled_lettered_date, numeric_date
    names       → keyword_anchor, line_heuristic
"""

import logging
import re

from dni_scanner.core.entities.normalized_text import NormalizedText
from dni_scanner.core.entities.structured_record import StructuredRecord
from dni_scanner.core.exceptions import ParsingError
from dni_scanner.core.interfaces.extraction_observer import IExtractionObserver
from dni_scanner.core.interfaces.side_extractor import IFrontExtractor
from dni_scanner.infrastructure.observers.logging_observer import LoggingExtractionObserver
from dni_scanner.infrastructure.parsers.context import ExtractionContext, run_strategies
from dni_scanner.infrastructure.parsers.formatting import clean_name, is_valid_name
from dni_scanner.infrastructure.parsers.normalizer import normalize_front
from dni_scanner.infrastructure.parsers.patterns import (
    BIRTH_DATE_LABELS,
    BIRTH_YEAR_MAX,
    BIRTH_YEAR_MIN,
    DATE_GUARD_AFTER,
    DATE_GUARD_BEFORE,
    GIVEN_NAME_KEYWORDS,
    ID_NUMBER_PATTERN,
    LEADING_SEPARATOR_PATTERN,
    LETTERED_DATE_PATTERN,
    MAX_NAME_WORDS,
    MONTHS,
    NON_NAME_HEADERS,
    NUMERIC_DATE_PATTERN,
    SURNAME_KEYWORDS,
    contains_any,
    contains_keywords,
)

logger = logging.getLogger(__name__)

# "/ Surname" right after "Apellido"
BILINGUAL_COUNTERPART_PATTERN = re.compile(r"^/\s*[A-Za-z]+")

# Plural label: "APELLIDOS PEREZ" leaves "S PEREZ" after the keyword
PLURAL_SUFFIX_PATTERN = re.compile(r"^[sS]\b")

# "Nombre / Name" header; SURNAME contains NAME, hence the word boundary
GIVEN_NAME_LINE_PATTERN = re.compile(r"NOMBRE|\bNAME\b")


class FrontSideParser(IFrontExtractor):
    """
    Keyword + regex parser for the DNI front.

    Missing fields are left as None; only an empty text raises.
    """

    SIDE = "front"

    def __init__(
        self,
        observer: IExtractionObserver | None = None,
        birth_year_min: int = BIRTH_YEAR_MIN,
        birth_year_max: int = BIRTH_YEAR_MAX,
        date_guard_before: int = DATE_GUARD_BEFORE,
        date_guard_after: int = DATE_GUARD_AFTER,
        max_name_words: int = MAX_NAME_WORDS,
    ):
        self._observer = observer or LoggingExtractionObserver()
        self._birth_year_min = birth_year_min
        self._birth_year_max = birth_year_max
        self._guard_before = date_guard_before
        self._guard_after = date_guard_after
        self._max_name_words = max_name_words

        self._field_strategies = {
            "id_number": [
                ("digit_run", self._id_from_digit_runs),
            ],
            "birth_date": [
                ("labeled_lettered_date", self._date_from_label),
                ("numeric_date", self._date_from_numeric),
            ],
        }
        self._name_strategies = [
            ("keyword_anchor", self._names_from_keywords),
            ("line_heuristic", self._names_from_heuristic),
        ]

    def extract(self, ocr_text: str | NormalizedText | None) -> StructuredRecord:
        """Parse the front OCR text into a new record."""
        if isinstance(ocr_text, NormalizedText):
            normalized = ocr_text
            self._observer.scan_started(self.SIDE, len(normalized.text))
        else:
            self._observer.scan_started(self.SIDE, len(ocr_text or ""))
            if ocr_text is None or not ocr_text.strip():
                raise ParsingError("Front OCR text is empty")
            normalized = normalize_front(ocr_text)

        if normalized.is_empty():
            raise ParsingError("Front OCR text has no usable lines after normalization")

        self._observer.text_normalized(self.SIDE, normalized.text)

        ctx = ExtractionContext(normalized)
        record = StructuredRecord()

        for field, strategies in self._field_strategies.items():
            value, strategy = run_strategies(strategies, ctx)
            setattr(record, field, value)
            self._report(field, value, strategy)

        names, strategy = run_strategies(self._name_strategies, ctx)
        record.surname, record.given_name = names or (None, None)
        self._report("surname", record.surname, strategy)
        self._report("given_name", record.given_name, strategy)

        return record

    # ─── ID number ──────────────────────────────────────────

    def _id_from_digit_runs(self, ctx: ExtractionContext) -> str | None:
        for match in ID_NUMBER_PATTERN.finditer(ctx.text):
            digits = match.group(1).replace(".", "")
            if not 7 <= len(digits) <= 8:
                continue
            if self._near_date_punctuation(ctx, match.start()):
                logger.debug(f"Skipping {digits}: looks like part of a date")
                continue
            return digits
        return None

    def _near_date_punctuation(self, ctx: ExtractionContext, position: int) -> bool:
        """True if "/" or "-" sits 3 chars before .. 15 chars after position, same line."""
        line_start, line_end = ctx.line_bounds(position)
        start = max(line_start, position - self._guard_before)
        end = min(line_end, position + self._guard_after)
        window = ctx.text[start:end]
        return "/" in window or "-" in window

    # ─── Birth date ─────────────────────────────────────────

    def _date_from_label(self, ctx: ExtractionContext) -> str | None:
        """Lettered date ("15 MAR/ MAR 1985") on or right after the birth-date label."""
        for _, line in ctx.scan():
            upper = line.upper()
            if not contains_any(upper, BIRTH_DATE_LABELS):
                continue

            following = ctx.peek_next()
            search_text = upper if following is None else f"{upper} {following.upper()}"

            for match in LETTERED_DATE_PATTERN.finditer(search_text):
                day, month, year = match.groups()
                month_number = MONTHS.get(month)
                if month_number:
                    return f"{day}/{month_number}/{year}"
        return None

    def _date_from_numeric(self, ctx: ExtractionContext) -> str | None:
        """First dd/mm/yyyy whose year falls in the birth-year window."""
        for match in NUMERIC_DATE_PATTERN.finditer(ctx.text):
            day, month, year = match.groups()
            if (
                1 <= int(day) <= 31
                and 1 <= int(month) <= 12
                and self._birth_year_min <= int(year) <= self._birth_year_max
            ):
                return f"{day}/{month}/{year}"
        return None

    # ─── Names ──────────────────────────────────────────────

    def _names_from_keywords(self, ctx: ExtractionContext) -> tuple[str | None, str | None]:
        surname = None
        given_name = None

        for _, line in ctx.scan():
            upper = line.upper()
            has_surname_kw = contains_any(upper, SURNAME_KEYWORDS)
            is_given_name_line = GIVEN_NAME_LINE_PATTERN.search(upper) is not None

            if surname is None and has_surname_kw and not is_given_name_line:
                surname = self._value_near_label(ctx, line, SURNAME_KEYWORDS)

            if given_name is None and not has_surname_kw and contains_any(upper, GIVEN_NAME_KEYWORDS):
                given_name = self._value_near_label(ctx, line, GIVEN_NAME_KEYWORDS)

        return surname, given_name

    def _value_near_label(self, ctx: ExtractionContext, line: str, keywords: tuple[str, str]) -> str | None:
        """Text after the label on the same line, else the next line if it looks like a name."""
        same_line = self._text_after_label(line, keywords)
        if same_line and is_valid_name(same_line, self._max_name_words):
            return clean_name(same_line)

        following = ctx.peek_next()
        if following and is_valid_name(following, self._max_name_words) and not contains_keywords(following):
            return clean_name(following)

        return None

    @staticmethod
    def _text_after_label(line: str, keywords: tuple[str, str]) -> str | None:
        """Label remainder: "Apellido / Surname: PEREZ" → PEREZ."""
        spanish, english = keywords
        upper = line.upper()

        keyword = spanish
        index = upper.find(spanish)
        if index == -1:
            keyword = english
            index = upper.find(english)
        if index == -1:
            return None

        rest = PLURAL_SUFFIX_PATTERN.sub("", line[index + len(keyword):], count=1)
        rest = LEADING_SEPARATOR_PATTERN.sub("", rest)
        rest = BILINGUAL_COUNTERPART_PATTERN.sub("", rest, count=1)
        if keyword == spanish:
            rest = re.sub(rf"^{english}S?\b", "", rest, count=1, flags=re.IGNORECASE)
        rest = LEADING_SEPARATOR_PATTERN.sub("", rest).strip()

        if not rest or rest.startswith("/"):
            return None
        return rest

    def _names_from_heuristic(self, ctx: ExtractionContext) -> tuple[str | None, str | None]:
        """First name-like line → surname, next different one → given name."""
        surname = None
        given_name = None

        for _, line in ctx.scan():
            if len(line) <= 3 or not is_valid_name(line, self._max_name_words) or contains_keywords(line):
                continue

            cleaned = clean_name(line)
            if surname is None:
                if not contains_any(line, NON_NAME_HEADERS):
                    surname = cleaned
                continue

            if cleaned.lower() != surname.lower():
                given_name = cleaned
                break

        return surname, given_name

    # ─── Helpers ────────────────────────────────────────────

    def _report(self, field: str, value: str | None, strategy: str | None) -> None:
        if value is not None:
            self._observer.field_extracted(self.SIDE, field, value, strategy or "")
        else:
            self._observer.field_missed(self.SIDE, field)
