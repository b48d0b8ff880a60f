"""
Fair-housing compliance analysis for listing text.

This module scores listing copy by matching it against the risk-term
dictionary and produces a remediated version of the text:
- Whole-word, case-insensitive matching per unique dictionary term
- Severity-based deductions from a starting score of 100
- Single forward-pass remediation over the detected issues
"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..errors import InvalidInputError
from ..scoring.utils import MAX_SCORE, clamp_score, contains_word, replace_first_word
from ..types.compliance import ComplianceIssue, ComplianceResult, RiskCategory, Severity
from .terms import RISK_TERMS, generic_suggestion, replacement_for

logger = logging.getLogger(__name__)

COMPLIANCE_THRESHOLD = 70

HIGH_SEVERITY_CATEGORIES = frozenset({RiskCategory.FAMILY_STATUS, RiskCategory.RACE})

# LOW is not produced by any category today
SEVERITY_DEDUCTIONS: Mapping[Severity, int] = MappingProxyType({
    Severity.HIGH: 20,
    Severity.MEDIUM: 10,
    Severity.LOW: 5,
})


def severity_for(category: RiskCategory) -> Severity:
    """Derive issue severity from a risk category."""
    if category in HIGH_SEVERITY_CATEGORIES:
        return Severity.HIGH
    return Severity.MEDIUM


def is_compliant_score(score: int) -> bool:
    """Check if a score meets the compliance threshold."""
    return score >= COMPLIANCE_THRESHOLD


def find_issues(text: str) -> List[ComplianceIssue]:
    """
    Find every dictionary term present in text.

    Args:
        text: Listing text to scan.

    Returns:
        One issue per matched term, in dictionary order.
    """
    issues = []
    for risk_term in RISK_TERMS:
        if not contains_word(text, risk_term.term):
            continue

        issues.append(
            ComplianceIssue(
                category=risk_term.category,
                severity=severity_for(risk_term.category),
                matched_text=risk_term.term,
                suggestion=replacement_for(risk_term.term)
                or generic_suggestion(risk_term.category),
            )
        )
    return issues


def remediate(text: str, issues: List[ComplianceIssue]) -> str:
    """
    Rewrite text by substituting each detected term once.

    Terms with a replacement phrase are swapped for it; other terms are
    removed. This is a single pass and the output is not re-checked, so
    it may still contain risk terms.
    """
    improved = text
    for issue in issues:
        replacement = replacement_for(issue.matched_text) or ""
        improved = replace_first_word(improved, issue.matched_text, replacement)
    return improved


def analyze_compliance(text: Optional[str]) -> ComplianceResult:
    """
    Score listing text for fair-housing compliance.

    Args:
        text: Listing text. None is treated as empty text.

    Returns:
        ComplianceResult with score, issues, and remediated text.

    Raises:
        InvalidInputError: If text is not a string.
    """
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise InvalidInputError(
            f"Listing text must be a string, got {type(text).__name__}"
        )

    issues = find_issues(text)
    deductions = sum(SEVERITY_DEDUCTIONS[issue.severity] for issue in issues)
    score = clamp_score(MAX_SCORE - deductions)

    logger.debug(
        f"Compliance analysis found {len(issues)} issues",
        extra={"score": score, "issue_count": len(issues)},
    )

    return ComplianceResult(
        score=score,
        is_compliant=is_compliant_score(score),
        issues=issues,
        improved_text=remediate(text, issues) if issues else None,
    )


class ComplianceAnalyzer:
    """
    Compliance analyzer for listing text.

    Stateless wrapper around analyze_compliance; instances are safe to
    share across threads.
    """

    def analyze(self, text: Optional[str]) -> ComplianceResult:
        """Analyze listing text. See analyze_compliance."""
        return analyze_compliance(text)
