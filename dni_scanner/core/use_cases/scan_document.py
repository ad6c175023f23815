"""
Use Case: Scan Document

Orchestrates: Front parser → (Back parser) → Structured record
Back-side problems never discard the front-side result.
"""

import logging
import time
import uuid
from concurrent.futures import ThreadPoolExecutor

from dni_scanner.core.entities.scan_result import ScanResult
from dni_scanner.core.entities.structured_record import StructuredRecord
from dni_scanner.core.interfaces.extraction_observer import IExtractionObserver, NullExtractionObserver
from dni_scanner.core.interfaces.side_extractor import IBackExtractor, IFrontExtractor

logger = logging.getLogger(__name__)


class ScanDocumentUseCase:
    """
    Use Case: front text (+ back text) → StructuredRecord.

    Dependency Injection: extractors and observer come through the
    constructor. With parallel=True both sides run on a thread pool
    and are merged once both are done.
    """

    ENGINE_VERSION = "1.0.0"

    def __init__(
        self,
        front_extractor: IFrontExtractor,
        back_extractor: IBackExtractor,
        observer: IExtractionObserver | None = None,
        parallel: bool = False,
    ):
        self._front = front_extractor
        self._back = back_extractor
        self._observer = observer or NullExtractionObserver()
        self._parallel = parallel

    def process(self, front_text: str | None, back_text: str | None = None) -> StructuredRecord:
        """Return the merged record. Raises ParsingError if the front is unusable."""
        return self.execute(front_text, back_text).record

    def execute(
        self,
        front_text: str | None,
        back_text: str | None = None,
        scan_id: str | None = None,
    ) -> ScanResult:
        """
        Run the full scan and time each stage.

        1. Front parser (mandatory, errors propagate)
        2. Back parser (optional, errors are isolated)
        """
        sid = scan_id or str(uuid.uuid4())
        t_start = time.perf_counter()
        result = ScanResult(scan_id=sid, engine_version=self.ENGINE_VERSION)

        has_back = back_text is not None and bool(back_text.strip())

        if self._parallel and has_back:
            self._run_parallel(result, front_text, back_text)
        else:
            self._run_sequential(result, front_text, back_text if has_back else None)

        result.total_latency_ms = round((time.perf_counter() - t_start) * 1000, 2)
        return result

    # ── Sequential: back parser augments the front record in place ──
    def _run_sequential(self, result: ScanResult, front_text: str | None, back_text: str | None) -> None:
        t0 = time.perf_counter()
        result.record = self._front.extract(front_text)
        result.stage_latencies["front_ms"] = round((time.perf_counter() - t0) * 1000, 2)

        if back_text is None:
            return

        t0 = time.perf_counter()
        try:
            self._back.extract_into(back_text, result.record)
            result.back_side_processed = True
        except Exception as e:
            result.back_side_error = str(e)
            logger.error(f"[{result.scan_id}] Back side failed, keeping front data: {e}", exc_info=e)
            self._observer.back_side_failed(e)
        result.stage_latencies["back_ms"] = round((time.perf_counter() - t0) * 1000, 2)

    # ── Parallel: back parser fills a scratch record, merged afterwards ──
    def _run_parallel(self, result: ScanResult, front_text: str | None, back_text: str) -> None:
        scratch = StructuredRecord()

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dni-scan") as pool:
            front_future = pool.submit(self._timed, self._front.extract, front_text)
            back_future = pool.submit(self._timed, self._back.extract_into, back_text, scratch)

            try:
                _, back_ms = back_future.result()
                result.back_side_processed = True
                result.stage_latencies["back_ms"] = back_ms
            except Exception as e:
                result.back_side_error = str(e)
                logger.error(f"[{result.scan_id}] Back side failed, keeping front data: {e}", exc_info=e)
                self._observer.back_side_failed(e)

            # ParsingError from the front side propagates from here
            record, front_ms = front_future.result()

        result.stage_latencies["front_ms"] = front_ms
        if result.back_side_processed:
            record.merge_from(scratch)
        result.record = record

    @staticmethod
    def _timed(fn, *args):
        t0 = time.perf_counter()
        value = fn(*args)
        return value, round((time.perf_counter() - t0) * 1000, 2)
