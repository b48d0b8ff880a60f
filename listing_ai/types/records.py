"""
Type definitions for persisted analysis results.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .compliance import ComplianceResult
from .seo import SeoResult

AnalysisResult = Union[ComplianceResult, SeoResult]


class AnalysisKind(str, Enum):
    """Which analyzer produced a result."""

    COMPLIANCE = "compliance"
    SEO = "seo"

    @classmethod
    def of(cls, result: AnalysisResult) -> "AnalysisKind":
        """Get the kind for a result instance."""
        if isinstance(result, ComplianceResult):
            return cls.COMPLIANCE
        if isinstance(result, SeoResult):
            return cls.SEO
        raise TypeError(f"Unsupported result type: {type(result).__name__}")


class StoredResult(BaseModel):
    """An analysis result saved by the result store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Record identifier assigned by the store")
    listing_id: str = Field(
        ...,
        alias="listingId",
        description="Listing the analysis belongs to",
    )
    kind: AnalysisKind = Field(..., description="Analyzer that produced the result")
    created_at: str = Field(
        ...,
        alias="createdAt",
        description="ISO-8601 creation timestamp",
    )
    result: AnalysisResult = Field(..., description="The stored result")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AnalysisOutcome(BaseModel):
    """
    Result of an analyze-then-persist call.

    The computed result is always present. The record is set when
    persistence succeeded; storage_error is set when it failed.
    """

    model_config = ConfigDict(frozen=True)

    result: AnalysisResult = Field(..., description="Computed analysis result")
    record: Optional[StoredResult] = Field(
        default=None,
        description="Persisted record, if the result was saved",
    )
    storage_error: Optional[str] = Field(
        default=None,
        description="Storage failure message, if the save failed",
    )

    @property
    def persisted(self) -> bool:
        """Check if the result was saved."""
        return self.record is not None
