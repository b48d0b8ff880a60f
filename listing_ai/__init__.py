"""
listing-ai: fair-housing compliance and SEO scoring for real-estate listings.

The analyzers are pure functions of their input; persisting results is a
separate step handled by ListingAnalysisService and the result store.
"""

__version__ = "1.0.0"

from .compliance import ComplianceAnalyzer, analyze_compliance
from .errors import InvalidInputError, ListingAnalysisError, ResultStorageError
from .seo import SeoAnalyzer, analyze_seo
from .service import ListingAnalysisService
from .types import (
    AnalysisKind,
    AnalysisOutcome,
    ComplianceIssue,
    ComplianceResult,
    RiskCategory,
    SeoResult,
    SeoSuggestion,
    Severity,
    StoredResult,
)

__all__ = [
    "__version__",
    "ComplianceAnalyzer",
    "analyze_compliance",
    "SeoAnalyzer",
    "analyze_seo",
    "ListingAnalysisService",
    "InvalidInputError",
    "ListingAnalysisError",
    "ResultStorageError",
    "AnalysisKind",
    "AnalysisOutcome",
    "ComplianceIssue",
    "ComplianceResult",
    "RiskCategory",
    "SeoResult",
    "SeoSuggestion",
    "Severity",
    "StoredResult",
]
