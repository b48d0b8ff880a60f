"""
Shared scoring helpers used by the compliance and SEO analyzers.
"""

import re
from collections import Counter
from functools import lru_cache
from typing import Iterable, List, Pattern

MIN_SCORE = 0
MAX_SCORE = 100


def clamp_score(score: int, lower: int = MIN_SCORE, upper: int = MAX_SCORE) -> int:
    """Clamp a score into the [lower, upper] range."""
    return max(lower, min(upper, score))


@lru_cache(maxsize=512)
def whole_word_pattern(term: str) -> Pattern[str]:
    """
    Build a case-insensitive whole-word pattern for a dictionary term.

    A trailing plural "s" or "es" is treated as the same word, so
    "bachelor" also matches "Bachelors" but not "bachelorette".

    Args:
        term: Dictionary term (may contain spaces or hyphens).

    Returns:
        Compiled pattern, cached per term.
    """
    return re.compile(rf"\b{re.escape(term)}(?:e?s)?\b", re.IGNORECASE)


def contains_word(text: str, term: str) -> bool:
    """Check for a case-insensitive whole-word occurrence of term."""
    return whole_word_pattern(term).search(text) is not None


def replace_first_word(text: str, term: str, replacement: str) -> str:
    """
    Replace the first whole-word occurrence of term.

    The replacement is inserted literally (no backreference expansion).
    """
    return whole_word_pattern(term).sub(lambda _match: replacement, text, count=1)


def contains_phrase(haystack: str, needle: str) -> bool:
    """Case-insensitive substring check."""
    return needle.lower() in haystack.lower()


def top_by_frequency(tokens: Iterable[str], limit: int) -> List[str]:
    """
    Rank tokens by descending frequency.

    Ties keep the order in which tokens were first seen.
    """
    counts = Counter(tokens)
    # Counter preserves first-seen order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _ in ranked[:limit]]
