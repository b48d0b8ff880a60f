"""
Type definitions for listing SEO analysis.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SeoSuggestion(BaseModel):
    """A single SEO improvement suggestion."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Area the suggestion applies to")
    issue: str = Field(..., description="Problem detected")
    suggestion: str = Field(..., description="Recommended fix")


class SeoResult(BaseModel):
    """SEO analysis results for a listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(..., ge=0, le=100, description="SEO score (0-100)")
    keywords: Tuple[str, ...] = Field(
        default_factory=tuple,
        max_length=10,
        description="Most frequent keywords, highest frequency first",
    )
    suggestions: Tuple[SeoSuggestion, ...] = Field(
        default_factory=tuple,
        description="Improvement suggestions in check order",
    )
    improved_text: Optional[str] = Field(
        default=None,
        alias="improvedText",
        description="Remediated text, present whenever suggestions exist",
    )

    @model_validator(mode="after")
    def _check_improved_text(self) -> "SeoResult":
        if (self.improved_text is not None) != bool(self.suggestions):
            raise ValueError("improved_text must be set if and only if suggestions exist")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
