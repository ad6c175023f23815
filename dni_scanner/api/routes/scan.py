"""
Routes: POST /scan, /scan/detailed, /debug/normalize
"""

from fastapi import APIRouter

from dni_scanner.api.schemas.requests import NormalizeRequest, ScanRequest
from dni_scanner.api.schemas.responses import (
    ErrorResponse,
    NormalizeResponse,
    RecordResponse,
    ScanDetailResponse,
)
from dni_scanner.config.settings import get_settings
from dni_scanner.core.use_cases.scan_document import ScanDocumentUseCase
from dni_scanner.infrastructure.observers.logging_observer import LoggingExtractionObserver
from dni_scanner.infrastructure.parsers import (
    BackSideParser,
    FrontSideParser,
    normalize_back,
    normalize_front,
)

router = APIRouter()

# Lazy singleton
_use_case = None


def _get_use_case() -> ScanDocumentUseCase:
    """Factory: build the use case with concrete parsers."""
    global _use_case
    if _use_case is None:
        settings = get_settings()
        observer = LoggingExtractionObserver()
        _use_case = ScanDocumentUseCase(
            front_extractor=FrontSideParser(
                observer=observer,
                birth_year_min=settings.birth_year_min,
                birth_year_max=settings.birth_year_max,
                date_guard_before=settings.date_guard_before,
                date_guard_after=settings.date_guard_after,
                max_name_words=settings.max_name_words,
            ),
            back_extractor=BackSideParser(observer=observer),
            observer=observer,
            parallel=settings.parallel_sides,
        )
    return _use_case


@router.post(
    "/scan",
    response_model=RecordResponse,
    response_model_exclude_none=True,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
def scan_document(req: ScanRequest):
    """
    Extract DNI fields from OCR text.

    - front_text (required): givenName, surname, idNumber, birthDate
    - back_text (optional): address, birthplace, taxId

    Fields that could not be extracted are omitted.
    """
    record = _get_use_case().process(req.front_text, req.back_text)
    return RecordResponse.from_record(record)


@router.post(
    "/scan/detailed",
    response_model=ScanDetailResponse,
    response_model_exclude_none=True,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
def scan_document_detailed(req: ScanRequest):
    """Same as /scan, plus stage latencies and the back-side outcome."""
    result = _get_use_case().execute(req.front_text, req.back_text)
    return ScanDetailResponse(
        scan_id=result.scan_id,
        record=RecordResponse.from_record(result.record),
        back_side_processed=result.back_side_processed,
        back_side_error=result.back_side_error,
        engine_version=result.engine_version,
        total_latency_ms=result.total_latency_ms,
        stage_latencies=result.stage_latencies,
    )


@router.post("/debug/normalize", response_model=NormalizeResponse)
def debug_normalize(req: NormalizeRequest):
    """Show the normalized lines the parsers will see (no extraction)."""
    normalize = normalize_front if req.side == "front" else normalize_back
    normalized = normalize(req.text)
    return NormalizeResponse(
        side=req.side,
        line_count=len(normalized),
        text_length=len(normalized.text),
        lines=list(normalized.lines),
        text=normalized.text,
    )
