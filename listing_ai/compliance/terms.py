"""
Fair-housing term dictionary.

Static tables of risk terms grouped by protected-class category, and the
replacement phrases suggested for specific terms. The tables are built once
at import and exposed read-only.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from ..types.compliance import RiskCategory


class RiskTerm(NamedTuple):
    """A dictionary term and the category it belongs to."""

    term: str
    category: RiskCategory


# Category term sets are disjoint: "bachelor" is a familial-status term only
PROHIBITED_TERMS: Mapping[RiskCategory, Tuple[str, ...]] = MappingProxyType({
    RiskCategory.FAMILY_STATUS: (
        "bachelor", "mature couple", "no children", "adults only",
        "perfect for young professionals", "ideal for singles",
        "not suitable for children", "adult living", "couples only",
        "empty nesters", "mature person", "mature individual",
    ),
    RiskCategory.RACE: (
        "white neighborhood", "asian", "black", "hispanic", "integrated",
        "traditional neighborhood", "ethnic", "exclusive neighborhood",
        "private community", "culturally homogeneous",
    ),
    RiskCategory.RELIGION: (
        "christian", "jewish", "catholic", "muslim", "church",
        "near synagogue", "temple", "preferred religion", "religious community",
        "god-fearing",
    ),
    RiskCategory.GENDER: (
        "male only", "female preferred", "gentlemen", "bachelorette",
        "male roommate wanted", "female tenant", "perfect for businessmen",
    ),
    RiskCategory.DISABILITY: (
        "no wheelchairs", "able-bodied", "walking distance", "not for handicapped",
        "not ADA accessible", "must be able to climb stairs", "no mental illness",
        "no service animals",
    ),
    RiskCategory.NATIONALITY: (
        "american only", "foreigners", "immigrants", "english speaking only",
        "native", "no foreigners", "citizens only", "green card", "non-citizens",
    ),
})

# Suggested neutral phrasing for specific terms
TERM_REPLACEMENTS: Mapping[str, str] = MappingProxyType({
    "bachelor": "studio apartment",
    "mature couple": "residents",
    "no children": "property amenities include...",
    "adults only": "property features include...",
    "white neighborhood": "neighborhood",
    "integrated": "diverse area",
    "christian community": "community",
    "near church": "near places of worship",
    "walking distance": "short distance",
    "no wheelchairs": "property features include...",
    "male only": "roommate",
})

RISK_TERMS: Tuple[RiskTerm, ...] = tuple(
    RiskTerm(term, category)
    for category, terms in PROHIBITED_TERMS.items()
    for term in terms
)


def replacement_for(term: str) -> Optional[str]:
    """Get the replacement phrase for an exact dictionary term, if any."""
    return TERM_REPLACEMENTS.get(term)


def generic_suggestion(category: RiskCategory) -> str:
    """Suggestion used when a term has no specific replacement."""
    return f"Remove or replace terms related to {category.value}"
