"""
Adapter: Logging Extraction Observer.

Forwards extraction events to the standard logging module.
"""

import logging

from dni_scanner.core.interfaces.extraction_observer import IExtractionObserver

logger = logging.getLogger(__name__)


class LoggingExtractionObserver(IExtractionObserver):
    """Default observer: one log record per extraction event."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def scan_started(self, side: str, text_length: int) -> None:
        self._log.info(f"=== Parsing {side} side (length: {text_length}) ===")

    def text_normalized(self, side: str, normalized: str) -> None:
        self._log.debug(f"Normalized {side} text: {normalized!r}")

    def field_extracted(self, side: str, field: str, value: str, strategy: str) -> None:
        self._log.info(f"[{side}] {field} = {value!r} (via {strategy})")

    def field_missed(self, side: str, field: str) -> None:
        self._log.warning(f"[{side}] could not extract {field}")

    def side_skipped(self, side: str, reason: str) -> None:
        self._log.warning(f"[{side}] skipped: {reason}")

    def back_side_failed(self, error: Exception) -> None:
        self._log.error(f"Back side parsing failed, keeping front data: {error}", exc_info=error)
