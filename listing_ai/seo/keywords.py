"""
Keyword tables for listing SEO analysis.
"""

from typing import FrozenSet, Tuple

# Property-related keywords to look for
PROPERTY_KEYWORDS: Tuple[str, ...] = (
    "property", "home", "house", "real estate", "apartment", "condo", "townhouse",
    "bedroom", "bathroom", "kitchen", "living room", "garage", "backyard", "patio",
    "hardwood floors", "stainless steel", "granite countertops", "updated", "renovated",
    "spacious", "cozy", "modern", "open concept", "view", "walkable", "commute",
)

# Location-related keywords to look for
LOCATION_KEYWORDS: Tuple[str, ...] = (
    "neighborhood", "community", "school district", "shopping", "restaurant",
    "park", "transit", "highway", "downtown", "suburb", "urban", "rural",
)

# Common words excluded from keyword extraction
STOP_WORDS: FrozenSet[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "is", "are", "was", "were", "be", "been",
    "being", "in", "on", "at", "to", "for", "with", "by", "about", "like", "through",
    "over", "before", "after", "between", "under", "above", "these", "those", "this",
    "that", "of", "from", "as", "into", "during", "including", "until", "against",
    "among", "throughout", "despite", "towards", "upon", "concerning",
})

# Punctuation stripped before tokenizing
PUNCTUATION_PATTERN = r"[.,/#!$%^&*;:{}=\-_`~()]"
