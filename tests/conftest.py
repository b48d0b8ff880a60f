"""
Pytest configuration and shared fixtures for listing-ai tests.

This module provides common fixtures used across all test files:
- Environment isolation for settings and storage singletons
- Sample listing copy
"""

import os
import sys

import pytest

# Environment setup before any imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"

# Ensure project root is in path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from listing_ai.config import get_settings
from listing_ai.storage.result_storage import InMemoryResultStorage, ResultStorage


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Run each test without Supabase configured and with fresh singletons."""
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "SUPABASE_SERVICE_KEY", "MAX_TEXT_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    ResultStorage.reset()
    yield
    get_settings.cache_clear()
    ResultStorage.reset()


@pytest.fixture
def memory_storage():
    """Fresh in-memory result storage."""
    return InMemoryResultStorage()


@pytest.fixture
def scenario_listing():
    """Listing copy that trips several compliance and SEO checks."""
    return {
        "text": "Perfect for bachelors, walking distance to church, no children allowed.",
        "title": "Nice Home",
        "location": "Austin",
    }


@pytest.fixture
def optimized_listing():
    """Listing copy that passes every avoidable SEO check."""
    return {
        "text": (
            "This spacious house offers an open concept kitchen, hardwood floors, "
            "granite countertops and a renovated bathroom. The neighborhood is close "
            "to shopping, a great restaurant row, a public park and fast transit "
            "lines, making the daily commute to downtown Portland easy for everyone. "
            "Updated windows and a quiet patio complete this cozy property."
        ),
        "title": "Spacious Modern Home in Portland Near Downtown Parks",
        "location": "Portland",
    }
