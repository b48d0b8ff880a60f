"""
SEO analysis for listing copy.

This module scores a listing's title and description with fixed heuristics:
- Title and description length
- Property and location keyword coverage
- Mention of the listing's specific location
- Image alt text (not inspectable here, so always flagged)
"""

import logging
import re
from typing import Iterable, List, Optional

from ..errors import InvalidInputError
from ..scoring.utils import MAX_SCORE, clamp_score, contains_phrase, top_by_frequency
from ..types.seo import SeoResult, SeoSuggestion
from .keywords import LOCATION_KEYWORDS, PROPERTY_KEYWORDS, PUNCTUATION_PATTERN, STOP_WORDS

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 10
MIN_KEYWORD_LENGTH = 4

MIN_TITLE_LENGTH = 30
MAX_TITLE_LENGTH = 70
MIN_DESCRIPTION_LENGTH = 250
MIN_PROPERTY_KEYWORDS = 5
MIN_LOCATION_KEYWORDS = 3

SHORT_TITLE_PENALTY = 10
LONG_TITLE_PENALTY = 5
SHORT_DESCRIPTION_PENALTY = 15
PROPERTY_KEYWORDS_PENALTY = 10
LOCATION_KEYWORDS_PENALTY = 10
MISSING_LOCATION_PENALTY = 15
# Listings are analyzed without their images, so this always applies
IMAGE_ALT_TEXT_PENALTY = 10

_PUNCTUATION_RE = re.compile(PUNCTUATION_PATTERN)


def build_corpus(text: str, title: str) -> str:
    """Combine title and text into the lowercase analysis corpus."""
    return f"{title} {text}".lower()


def extract_keywords(corpus: str, limit: int = MAX_KEYWORDS) -> List[str]:
    """
    Extract the most frequent meaningful words from the corpus.

    Args:
        corpus: Lowercase text to analyze.
        limit: Maximum number of keywords to return.

    Returns:
        Keywords by descending frequency, ties in first-seen order.
    """
    words = [
        word
        for word in _PUNCTUATION_RE.sub("", corpus).split()
        if word not in STOP_WORDS and len(word) >= MIN_KEYWORD_LENGTH
    ]
    return top_by_frequency(words, limit)


def find_keywords(corpus: str, candidates: Iterable[str]) -> List[str]:
    """Get the candidate keywords that appear in the corpus, in table order."""
    return [keyword for keyword in candidates if contains_phrase(corpus, keyword)]


def improve_text(
    text: str,
    location: str,
    property_keywords_found: List[str],
    location_mentioned: bool,
) -> str:
    """
    Build a remediated description.

    Short descriptions get a sentence about the property and its location
    appended; a missing location is prepended as an opening clause.
    """
    improved = text

    if len(text) < MIN_DESCRIPTION_LENGTH:
        subject = property_keywords_found[0] if property_keywords_found else "property"
        improved += (
            f" This {subject} is located in {location} "
            "and offers convenient access to local amenities."
        )

    if not location_mentioned:
        improved = f"Located in {location}, this property features {improved}"

    return improved


def _validate(text: Optional[str], title: Optional[str], location: Optional[str]) -> str:
    if text is None:
        text = ""
    for name, value in (("text", text), ("title", title), ("location", location)):
        if value is None:
            raise InvalidInputError(f"SEO analysis requires a {name}")
        if not isinstance(value, str):
            raise InvalidInputError(
                f"SEO {name} must be a string, got {type(value).__name__}"
            )
    if not location.strip():
        raise InvalidInputError("SEO analysis requires a non-empty location")
    return text


def analyze_seo(
    text: Optional[str],
    title: Optional[str],
    location: Optional[str],
) -> SeoResult:
    """
    Score listing copy for SEO.

    Args:
        text: Listing description. None is treated as empty text.
        title: Listing title.
        location: Specific location the listing should mention.

    Returns:
        SeoResult with score, keywords, suggestions, and remediated text.

    Raises:
        InvalidInputError: If title or location is missing or not a string,
            or location is blank.
    """
    text = _validate(text, title, location)

    corpus = build_corpus(text, title)
    keywords = extract_keywords(corpus)

    suggestions: List[SeoSuggestion] = []
    score = MAX_SCORE

    # Title length (50-60 characters is the target range)
    if len(title) < MIN_TITLE_LENGTH:
        suggestions.append(SeoSuggestion(
            category="title",
            issue="Title is too short",
            suggestion="Increase title length to 50-60 characters with descriptive keywords about the property",
        ))
        score -= SHORT_TITLE_PENALTY
    elif len(title) > MAX_TITLE_LENGTH:
        suggestions.append(SeoSuggestion(
            category="title",
            issue="Title is too long",
            suggestion="Reduce title length to 50-60 characters while keeping key property information",
        ))
        score -= LONG_TITLE_PENALTY

    if len(text) < MIN_DESCRIPTION_LENGTH:
        suggestions.append(SeoSuggestion(
            category="description",
            issue="Description is too short",
            suggestion=(
                f"Expand your description to at least {MIN_DESCRIPTION_LENGTH} "
                "characters with detailed property information"
            ),
        ))
        score -= SHORT_DESCRIPTION_PENALTY

    property_keywords_found = find_keywords(corpus, PROPERTY_KEYWORDS)
    if len(property_keywords_found) < MIN_PROPERTY_KEYWORDS:
        suggestions.append(SeoSuggestion(
            category="keywords",
            issue="Not enough property-specific keywords",
            suggestion=(
                "Include more property-specific keywords such as: "
                f"{', '.join(PROPERTY_KEYWORDS[:8])}"
            ),
        ))
        score -= PROPERTY_KEYWORDS_PENALTY

    location_keywords_found = find_keywords(corpus, LOCATION_KEYWORDS)
    if len(location_keywords_found) < MIN_LOCATION_KEYWORDS:
        suggestions.append(SeoSuggestion(
            category="location",
            issue="Not enough location-specific information",
            suggestion=(
                "Include more location details such as: "
                f"{', '.join(LOCATION_KEYWORDS[:5])}"
            ),
        ))
        score -= LOCATION_KEYWORDS_PENALTY

    location_mentioned = contains_phrase(corpus, location)
    if not location_mentioned:
        suggestions.append(SeoSuggestion(
            category="location",
            issue="Specific location not mentioned",
            suggestion=f'Include the specific location "{location}" in your description',
        ))
        score -= MISSING_LOCATION_PENALTY

    suggestions.append(SeoSuggestion(
        category="images",
        issue="Missing image descriptions",
        suggestion="Add descriptive alt text to all property images to improve SEO",
    ))
    score -= IMAGE_ALT_TEXT_PENALTY

    score = clamp_score(score)

    improved_text = None
    if suggestions:
        improved_text = improve_text(
            text, location, property_keywords_found, location_mentioned
        )

    logger.debug(
        f"SEO analysis produced {len(suggestions)} suggestions",
        extra={"score": score, "keyword_count": len(keywords)},
    )

    return SeoResult(
        score=score,
        keywords=keywords,
        suggestions=suggestions,
        improved_text=improved_text,
    )


class SeoAnalyzer:
    """
    SEO analyzer for listing copy.

    Stateless wrapper around analyze_seo; instances are safe to share
    across threads.
    """

    def analyze(
        self,
        text: Optional[str],
        title: Optional[str],
        location: Optional[str],
    ) -> SeoResult:
        """Analyze listing copy. See analyze_seo."""
        return analyze_seo(text, title, location)
