"""
Fair-housing compliance module.

This module provides the risk-term dictionary and the analyzer that
scores listing text against it.
"""

from .analyzer import (
    COMPLIANCE_THRESHOLD,
    SEVERITY_DEDUCTIONS,
    ComplianceAnalyzer,
    analyze_compliance,
    find_issues,
    is_compliant_score,
    remediate,
    severity_for,
)
from .terms import (
    PROHIBITED_TERMS,
    RISK_TERMS,
    TERM_REPLACEMENTS,
    RiskTerm,
    replacement_for,
)

__all__ = [
    "COMPLIANCE_THRESHOLD",
    "SEVERITY_DEDUCTIONS",
    "ComplianceAnalyzer",
    "analyze_compliance",
    "find_issues",
    "is_compliant_score",
    "remediate",
    "severity_for",
    "PROHIBITED_TERMS",
    "RISK_TERMS",
    "TERM_REPLACEMENTS",
    "RiskTerm",
    "replacement_for",
]
