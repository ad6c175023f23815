"""
Pydantic schemas: request bodies for the API.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ScanRequest(BaseModel):
    front_text: str = Field(..., description="OCR text of the DNI front")
    back_text: str | None = Field(None, description="OCR text of the DNI back (optional)")


class NormalizeRequest(BaseModel):
    text: str = ""
    side: Literal["front", "back"] = "front"
