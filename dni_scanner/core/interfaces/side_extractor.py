"""
Contract: Side Extractors

One extractor per document face. The front extractor builds the
record; the back extractor only augments an existing one.
Any implementation (keyword/regex, layout-aware, external service)
must respect these contracts.
"""

from abc import ABC, abstractmethod

from dni_scanner.core.entities.normalized_text import NormalizedText
from dni_scanner.core.entities.structured_record import StructuredRecord


class IFrontExtractor(ABC):
    """
    Port: Front Extractor

    Recovers ID number, birth date, surname and given name.
    """

    @abstractmethod
    def extract(self, ocr_text: str | NormalizedText | None) -> StructuredRecord:
        """
        Extract the front-side fields.

        Args:
            ocr_text: Raw OCR text or an already normalized block.

        Returns:
            StructuredRecord with the front fields that could be found.

        Raises:
            ParsingError: the text is empty or has no usable lines.
        """
        ...


class IBackExtractor(ABC):
    """
    Port: Back Extractor

    Recovers tax ID, domicile and birthplace into an existing record.
    """

    @abstractmethod
    def extract_into(self, ocr_text: str | NormalizedText | None, record: StructuredRecord) -> None:
        """
        Augment the record in place. Never raises; an empty or
        unreadable back side leaves the record unchanged.
        """
        ...
