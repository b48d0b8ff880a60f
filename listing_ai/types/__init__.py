"""
Type definitions for the listing-ai project.
"""

from .compliance import (
    ComplianceIssue,
    ComplianceResult,
    RiskCategory,
    Severity,
)
from .records import (
    AnalysisKind,
    AnalysisOutcome,
    AnalysisResult,
    StoredResult,
)
from .seo import SeoResult, SeoSuggestion

__all__ = [
    # Compliance types
    "ComplianceIssue",
    "ComplianceResult",
    "RiskCategory",
    "Severity",
    # SEO types
    "SeoResult",
    "SeoSuggestion",
    # Record types
    "AnalysisKind",
    "AnalysisOutcome",
    "AnalysisResult",
    "StoredResult",
]
