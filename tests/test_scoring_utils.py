"""
Tests for shared scoring helpers.
"""

import pytest

from listing_ai.scoring import (
    clamp_score,
    contains_phrase,
    contains_word,
    replace_first_word,
    top_by_frequency,
)


@pytest.mark.parametrize(
    "score,expected",
    [(-40, 0), (0, 0), (55, 55), (100, 100), (130, 100)],
)
def test_clamp_score(score, expected):
    assert clamp_score(score) == expected


class TestWholeWordMatching:
    """Tests for dictionary term matching."""

    def test_matches_case_insensitively(self):
        assert contains_word("Close To Church", "close to church")

    def test_requires_word_boundaries(self):
        assert not contains_word("bachelorette", "bachelor")
        assert not contains_word("Caucasian", "asian")

    def test_allows_plural_suffix(self):
        assert contains_word("two bachelors", "bachelor")
        assert contains_word("many churches", "church")

    def test_hyphenated_terms(self):
        assert contains_word("No able-bodied requirement", "able-bodied")

    def test_replace_first_only(self):
        assert replace_first_word("Black cat, black dog", "black", "") == " cat, black dog"

    def test_replacement_is_literal(self):
        assert replace_first_word("male only", "male only", r"\1 roommate") == r"\1 roommate"


def test_contains_phrase_ignores_case():
    assert contains_phrase("downtown portland", "Portland")
    assert not contains_phrase("downtown", "Portland")


def test_top_by_frequency_is_stable():
    tokens = ["b", "a", "c", "a", "b", "d"]

    assert top_by_frequency(tokens, 3) == ["b", "a", "c"]
