"""
Scoring utilities module.

Helpers shared by the compliance and SEO analyzers for score clamping,
whole-word term matching, and keyword frequency ranking.
"""

from .utils import (
    MAX_SCORE,
    MIN_SCORE,
    clamp_score,
    contains_phrase,
    contains_word,
    replace_first_word,
    top_by_frequency,
    whole_word_pattern,
)

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "clamp_score",
    "contains_phrase",
    "contains_word",
    "replace_first_word",
    "top_by_frequency",
    "whole_word_pattern",
]
