"""
Adapter: DNI Back Side Parser.

Adds tax ID (CUIL), domicile and birthplace to a record built from
the front. Best effort: each field is extracted independently and a
failure in one never blocks the others or surfaces to the caller.
"""

import logging

from dni_scanner.core.entities.normalized_text import NormalizedText
from dni_scanner.core.entities.structured_record import StructuredRecord
from dni_scanner.core.interfaces.extraction_observer import IExtractionObserver
from dni_scanner.core.interfaces.side_extractor import IBackExtractor
from dni_scanner.infrastructure.observers.logging_observer import LoggingExtractionObserver
from dni_scanner.infrastructure.parsers.context import ExtractionContext, run_strategies
from dni_scanner.infrastructure.parsers.formatting import format_tax_id, title_case_words
from dni_scanner.infrastructure.parsers.normalizer import normalize_back
from dni_scanner.infrastructure.parsers.patterns import (
    ADDRESS_STOP_WORDS,
    BIRTHPLACE_KEYWORDS,
    DOMICILE_KEYWORD,
    LEADING_SEPARATOR_PATTERN,
    TAX_ID_DASHED_PATTERN,
    TAX_ID_LABELED_PATTERN,
    contains_any,
)

logger = logging.getLogger(__name__)

MIN_ADDRESS_LENGTH = 5
MIN_BIRTHPLACE_LENGTH = 2


class BackSideParser(IBackExtractor):
    """
    Keyword + regex parser for the DNI back.

    Strategies:
        tax_id      → dashed, labeled_undashed
        address     → keyword_anchor (joins OCR-wrapped lines)
        birthplace  → keyword_anchor (same line, else next line)
    """

    SIDE = "back"

    def __init__(self, observer: IExtractionObserver | None = None):
        self._observer = observer or LoggingExtractionObserver()
        self._field_strategies = {
            "tax_id": [
                ("dashed", self._tax_id_dashed),
                ("labeled_undashed", self._tax_id_labeled),
            ],
            "address": [
                ("keyword_anchor", self._address_from_keyword),
            ],
            "birthplace": [
                ("keyword_anchor", self._birthplace_from_keyword),
            ],
        }

    def extract_into(self, ocr_text: str | NormalizedText | None, record: StructuredRecord) -> None:
        """Augment the record in place; never raises."""
        if isinstance(ocr_text, NormalizedText):
            normalized = ocr_text
            self._observer.scan_started(self.SIDE, len(normalized.text))
        else:
            self._observer.scan_started(self.SIDE, len(ocr_text or ""))
            if ocr_text is None or not ocr_text.strip():
                self._observer.side_skipped(self.SIDE, "back OCR text is empty")
                return
            normalized = normalize_back(ocr_text)

        if normalized.is_empty():
            self._observer.side_skipped(self.SIDE, "no usable lines after normalization")
            return

        self._observer.text_normalized(self.SIDE, normalized.text)

        found = 0
        for field, strategies in self._field_strategies.items():
            ctx = ExtractionContext(normalized)
            try:
                value, strategy = run_strategies(strategies, ctx)
            except Exception as e:
                self._observer.back_side_failed(e)
                value, strategy = None, None

            if value is not None:
                setattr(record, field, value)
                self._observer.field_extracted(self.SIDE, field, value, strategy)
                found += 1
            else:
                self._observer.field_missed(self.SIDE, field)

        if found == 0:
            self._observer.side_skipped(self.SIDE, "no back-side field recognized")

    # ─── Tax ID (CUIL) ──────────────────────────────────────

    @staticmethod
    def _tax_id_dashed(ctx: ExtractionContext) -> str | None:
        """20-12345678-1 or 20 - 12345678 - 1 anywhere in the text."""
        match = TAX_ID_DASHED_PATTERN.search(ctx.text)
        if match:
            return format_tax_id(*match.groups())
        return None

    @staticmethod
    def _tax_id_labeled(ctx: ExtractionContext) -> str | None:
        """CUIL: 20123456781 → 20-12345678-1"""
        match = TAX_ID_LABELED_PATTERN.search(ctx.text)
        if match:
            digits = match.group(1)
            return format_tax_id(digits[:2], digits[2:10], digits[10])
        return None

    # ─── Domicile ───────────────────────────────────────────

    def _address_from_keyword(self, ctx: ExtractionContext) -> str | None:
        for _, line in ctx.scan():
            index = line.upper().find(DOMICILE_KEYWORD)
            if index == -1:
                continue

            value = LEADING_SEPARATOR_PATTERN.sub("", line[index + len(DOMICILE_KEYWORD):]).strip()

            following = ctx.peek_next()
            if following is not None and self._is_address_continuation(following):
                if not value:
                    value = following
                elif value.endswith("-"):
                    # "AV SIEMPRE-" + "VIVA 742": OCR broke the line on a hyphen
                    value = f"{value[:-1].rstrip()} {following}"
                else:
                    value = f"{value} {following}"
                logger.debug(f"Address continued on next line: {following!r}")

            if len(value) > MIN_ADDRESS_LENGTH:
                return title_case_words(value)

        return None

    @staticmethod
    def _is_address_continuation(line: str) -> bool:
        return (
            len(line) > MIN_ADDRESS_LENGTH
            and not contains_any(line, ADDRESS_STOP_WORDS)
            and TAX_ID_DASHED_PATTERN.search(line) is None
        )

    # ─── Birthplace ─────────────────────────────────────────

    @staticmethod
    def _birthplace_from_keyword(ctx: ExtractionContext) -> str | None:
        for _, line in ctx.scan():
            upper = line.upper()
            keyword = next((kw for kw in BIRTHPLACE_KEYWORDS if kw in upper), None)
            if keyword is None:
                continue

            index = upper.find(keyword)
            same_line = LEADING_SEPARATOR_PATTERN.sub("", line[index + len(keyword):]).strip()
            if len(same_line) > MIN_BIRTHPLACE_LENGTH:
                return title_case_words(same_line)

            following = ctx.peek_next()
            if following and len(following) > MIN_BIRTHPLACE_LENGTH:
                return title_case_words(following)

        return None
