"""
Listing SEO module.

This module provides the keyword tables and the analyzer that scores
listing titles and descriptions for search visibility.
"""

from .analyzer import (
    IMAGE_ALT_TEXT_PENALTY,
    MAX_KEYWORDS,
    SeoAnalyzer,
    analyze_seo,
    build_corpus,
    extract_keywords,
    improve_text,
)
from .keywords import LOCATION_KEYWORDS, PROPERTY_KEYWORDS, STOP_WORDS

__all__ = [
    "IMAGE_ALT_TEXT_PENALTY",
    "MAX_KEYWORDS",
    "SeoAnalyzer",
    "analyze_seo",
    "build_corpus",
    "extract_keywords",
    "improve_text",
    "LOCATION_KEYWORDS",
    "PROPERTY_KEYWORDS",
    "STOP_WORDS",
]
