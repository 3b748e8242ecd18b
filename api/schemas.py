"""
Pydantic schemas for the config comparator API.
"""
from typing import Optional, Any
from pydantic import BaseModel, Field

from core import ComparisonResult


# ============================================================
# REQUEST SCHEMAS
# ============================================================

class ComparisonRequest(BaseModel):
    """Request to compare two configuration documents."""
    source_content: str
    source_filename: str = Field(..., min_length=1)
    target_content: str
    target_filename: str = Field(..., min_length=1)
    separator: str = Field(".", min_length=1)


class DocumentRequest(BaseModel):
    """A single configuration document."""
    content: str
    filename: str = Field(..., min_length=1)
    separator: str = Field(".", min_length=1)


class InlineDiffRequest(BaseModel):
    old_value: Any = None
    new_value: Any = None


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class ValueDifferenceSchema(BaseModel):
    key: str
    source_value: Optional[Any] = None
    target_value: Optional[Any] = None


class ComparisonResponse(BaseModel):
    source_file: Optional[str] = None
    target_file: Optional[str] = None
    source_format: Optional[str] = None
    target_format: Optional[str] = None
    is_identical: bool
    only_in_source: list[str]
    only_in_target: list[str]
    common: list[str]
    value_differences: list[ValueDifferenceSchema]
    matching_count: int
    summary: str
    report: Optional[str] = None

    @classmethod
    def from_result(
        cls,
        result: ComparisonResult,
        summary: str,
        report: Optional[str] = None
    ) -> "ComparisonResponse":
        return cls(**result.to_dict(), summary=summary, report=report)


class DetectResponse(BaseModel):
    format: str
    format_source: str


class FlattenResponse(BaseModel):
    format: str
    flat: dict[str, Any]


class InlineDiffResponse(BaseModel):
    prefix: str
    suffix: str
    old_changed: str
    new_changed: str
    old_html: str
    new_html: str
