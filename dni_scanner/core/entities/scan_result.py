"""
Entity: Scan Result

Envelope around the structured record of one scan, with the
timing of each stage and the outcome of the back side.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from dni_scanner.core.entities.structured_record import StructuredRecord


@dataclass
class ScanResult:
    """Consolidated result of one scan (front + back)."""
    scan_id: str
    record: StructuredRecord = field(default_factory=StructuredRecord)

    # Back side outcome
    back_side_processed: bool = False
    back_side_error: str | None = None

    # Meta
    engine_version: str = ""
    total_latency_ms: float = 0.0
    stage_latencies: dict = field(default_factory=dict)  # {"front_ms": 0.4, "back_ms": 0.2}
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "scan_id": self.scan_id,
            "record": self.record.to_dict(),
            "back_side_processed": self.back_side_processed,
            "back_side_error": self.back_side_error,
            "engine_version": self.engine_version,
            "total_latency_ms": self.total_latency_ms,
            "stage_latencies": dict(self.stage_latencies),
            "created_at": self.created_at.isoformat(),
        }
