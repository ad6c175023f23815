"""
Pydantic schemas: response models for the API.

Absent record fields are omitted from the JSON, never sent as null.
"""

from pydantic import BaseModel, ConfigDict, Field

from dni_scanner.core.entities.structured_record import StructuredRecord


class RecordResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    given_name: str | None = Field(None, alias="givenName")
    surname: str | None = None
    id_number: str | None = Field(None, alias="idNumber")
    birth_date: str | None = Field(None, alias="birthDate")
    address: str | None = None
    birthplace: str | None = None
    tax_id: str | None = Field(None, alias="taxId")

    @classmethod
    def from_record(cls, record: StructuredRecord) -> "RecordResponse":
        return cls.model_validate(record.to_dict())


class ScanDetailResponse(BaseModel):
    scan_id: str
    record: RecordResponse
    back_side_processed: bool
    back_side_error: str | None = None
    engine_version: str = ""
    total_latency_ms: float = 0.0
    stage_latencies: dict = {}


class NormalizeResponse(BaseModel):
    side: str
    line_count: int
    text_length: int
    lines: list[str]
    text: str


class ErrorResponse(BaseModel):
    detail: str
