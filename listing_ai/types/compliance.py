"""
Type definitions for fair-housing compliance analysis.

This module defines the risk categories, severities, and result models
produced by the compliance analyzer.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RiskCategory(str, Enum):
    """Protected-class categories used to group risk terms."""

    FAMILY_STATUS = "familyStatus"
    RACE = "race"
    RELIGION = "religion"
    GENDER = "gender"
    DISABILITY = "disability"
    NATIONALITY = "nationality"


class Severity(str, Enum):
    """Severity of a compliance issue."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ComplianceIssue(BaseModel):
    """A single risk term detected in listing text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: RiskCategory = Field(
        ...,
        alias="type",
        description="Protected-class category of the matched term",
    )
    severity: Severity = Field(..., description="Issue severity")
    matched_text: str = Field(
        ...,
        alias="text",
        description="Dictionary term that matched",
    )
    suggestion: str = Field(..., description="How to fix the issue")


class ComplianceResult(BaseModel):
    """Fair-housing compliance analysis results."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(..., ge=0, le=100, description="Compliance score (0-100)")
    is_compliant: bool = Field(
        ...,
        alias="isCompliant",
        description="Whether the score meets the compliance threshold",
    )
    issues: Tuple[ComplianceIssue, ...] = Field(
        default_factory=tuple,
        description="Issues in dictionary matching order",
    )
    improved_text: Optional[str] = Field(
        default=None,
        alias="improvedText",
        description="Remediated text, present only when issues were found",
    )

    @model_validator(mode="after")
    def _check_improved_text(self) -> "ComplianceResult":
        if (self.improved_text is not None) != bool(self.issues):
            raise ValueError("improved_text must be set if and only if issues exist")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
