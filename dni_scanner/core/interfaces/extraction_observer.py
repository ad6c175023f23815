"""
Contract: Extraction Observer

Receives events from the extractors (fields found, fields missed,
back-side faults). Extractors never touch global logging state
directly; the caller decides where the events go.
"""

from abc import ABC, abstractmethod


class IExtractionObserver(ABC):
    """
    Port: Extraction Observer

    side is "front" or "back"; field is the record attribute name
    (ex: "id_number", "tax_id").
    """

    @abstractmethod
    def scan_started(self, side: str, text_length: int) -> None:
        ...

    @abstractmethod
    def text_normalized(self, side: str, normalized: str) -> None:
        ...

    @abstractmethod
    def field_extracted(self, side: str, field: str, value: str, strategy: str) -> None:
        ...

    @abstractmethod
    def field_missed(self, side: str, field: str) -> None:
        ...

    @abstractmethod
    def side_skipped(self, side: str, reason: str) -> None:
        """Soft failure: nothing to extract on this side."""
        ...

    @abstractmethod
    def back_side_failed(self, error: Exception) -> None:
        """An exception escaped back-side extraction and was swallowed."""
        ...


class NullExtractionObserver(IExtractionObserver):
    """Discards every event."""

    def scan_started(self, side: str, text_length: int) -> None:
        pass

    def text_normalized(self, side: str, normalized: str) -> None:
        pass

    def field_extracted(self, side: str, field: str, value: str, strategy: str) -> None:
        pass

    def field_missed(self, side: str, field: str) -> None:
        pass

    def side_skipped(self, side: str, reason: str) -> None:
        pass

    def back_side_failed(self, error: Exception) -> None:
        pass
