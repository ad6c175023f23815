"""
Batch OCR Text Parser: DNI text files → JSON records

Runs the extraction engine on OCR text already saved to disk:
  front.txt (+ back.txt) → Front parser → Back parser → JSON

Usage:
    python -m scripts.parse_ocr_text front.txt [--back back.txt] [--detailed] [--parallel]
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dni_scanner.config.settings import get_settings
from dni_scanner.core.exceptions import ParsingError
from dni_scanner.core.use_cases.scan_document import ScanDocumentUseCase
from dni_scanner.infrastructure.observers.logging_observer import LoggingExtractionObserver
from dni_scanner.infrastructure.parsers import BackSideParser, FrontSideParser


def build_use_case(parallel: bool = False) -> ScanDocumentUseCase:
    settings = get_settings()
    observer = LoggingExtractionObserver()
    return ScanDocumentUseCase(
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
        parallel=parallel or settings.parallel_sides,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse DNI OCR text files")
    parser.add_argument("front", help="Text file with the OCR output of the DNI front")
    parser.add_argument("--back", default=None, help="Text file with the OCR output of the DNI back")
    parser.add_argument("--detailed", action="store_true", help="Print latencies and back-side status too")
    parser.add_argument("--parallel", action="store_true", help="Parse front and back concurrently")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_settings().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    front_text = Path(args.front).read_text(encoding="utf-8")
    back_text = Path(args.back).read_text(encoding="utf-8") if args.back else None

    use_case = build_use_case(parallel=args.parallel)
    try:
        result = use_case.execute(front_text, back_text)
    except ParsingError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    output = result.to_dict() if args.detailed else result.record.to_dict()
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
