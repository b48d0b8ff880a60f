"""
Tests for the analysis result storage layer.

Tests cover:
- In-memory save, lookup by ID, and latest-by-listing reads
- Supabase row mapping with a mocked client
- Storage factory selection
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from listing_ai.compliance import analyze_compliance
from listing_ai.config import reload_settings
from listing_ai.errors import ResultStorageError
from listing_ai.seo import analyze_seo
from listing_ai.storage import (
    InMemoryResultStorage,
    ResultStorage,
    SupabaseResultStorage,
    get_result_storage,
)
from listing_ai.types import AnalysisKind, ComplianceResult, SeoResult


# =============================================================================
# In-memory storage
# =============================================================================


class TestInMemoryResultStorage:
    """Tests for InMemoryResultStorage."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_timestamp(self, memory_storage):
        result = analyze_compliance("Cozy bachelor pad.")

        record = await memory_storage.save("42", result)

        assert record.id
        assert record.created_at
        assert record.listing_id == "42"
        assert record.kind == AnalysisKind.COMPLIANCE
        assert record.result == result

    @pytest.mark.asyncio
    async def test_get_by_id(self, memory_storage):
        record = await memory_storage.save("42", analyze_compliance("Sunny condo."))

        assert await memory_storage.get(record.id, AnalysisKind.COMPLIANCE) == record
        assert await memory_storage.get(record.id, AnalysisKind.SEO) is None
        assert await memory_storage.get("missing", AnalysisKind.COMPLIANCE) is None

    @pytest.mark.asyncio
    async def test_latest_by_listing_returns_most_recent(self, memory_storage):
        await memory_storage.save("42", analyze_compliance("Cozy bachelor pad."))
        latest = await memory_storage.save("42", analyze_compliance("Cozy studio."))
        await memory_storage.save("7", analyze_compliance("Adults only."))

        found = await memory_storage.get_latest_by_listing("42", AnalysisKind.COMPLIANCE)

        assert found == latest
        assert found.result.score == 100

    @pytest.mark.asyncio
    async def test_latest_by_listing_filters_kind(self, memory_storage):
        await memory_storage.save("42", analyze_compliance("Sunny condo."))
        seo_record = await memory_storage.save(
            "42", analyze_seo("Sunny condo.", "Condo", "Austin")
        )

        assert await memory_storage.get_latest_by_listing("42", AnalysisKind.SEO) == seo_record
        assert await memory_storage.get_latest_by_listing("99", AnalysisKind.SEO) is None

    @pytest.mark.asyncio
    async def test_record_ids_are_unique(self, memory_storage):
        first = await memory_storage.save("1", analyze_compliance("a"))
        second = await memory_storage.save("1", analyze_compliance("b"))

        assert first.id != second.id


# =============================================================================
# Supabase storage
# =============================================================================


@pytest.fixture
def supabase_client():
    """Mocked Supabase client with a chainable query builder."""
    client = MagicMock()
    query = MagicMock()
    client.table.return_value = query
    for method in ("insert", "select", "eq", "order", "limit"):
        getattr(query, method).return_value = query
    return client


@pytest.fixture
def supabase_storage(supabase_client):
    storage = SupabaseResultStorage("https://example.supabase.co", "test-key")
    with patch.object(storage, "_get_client", return_value=supabase_client):
        yield storage


class TestSupabaseResultStorage:
    """Tests for SupabaseResultStorage with a mocked client."""

    @pytest.mark.asyncio
    async def test_save_compliance_row(self, supabase_storage, supabase_client):
        result = analyze_compliance("Cozy bachelor pad.")
        query = supabase_client.table.return_value
        query.execute.return_value.data = [{
            "id": 7,
            "listing_id": "42",
            "score": 80,
            "is_compliant": True,
            "issues": result.to_dict()["issues"],
            "improved_text": result.improved_text,
            "created_at": "2024-01-15T10:30:00+00:00",
        }]

        record = await supabase_storage.save("42", result)

        supabase_client.table.assert_called_with("compliance_checks")
        row = query.insert.call_args[0][0]
        assert row["listing_id"] == "42"
        assert row["score"] == 80
        assert row["is_compliant"] is True
        assert row["issues"][0]["type"] == "familyStatus"
        assert record.id == "7"
        assert record.created_at == "2024-01-15T10:30:00+00:00"
        assert record.result == result

    @pytest.mark.asyncio
    async def test_save_seo_row(self, supabase_storage, supabase_client):
        result = analyze_seo("Cozy condo.", "Condo", "Austin")
        query = supabase_client.table.return_value
        query.execute.return_value.data = [{
            "id": 3,
            "listing_id": "42",
            "score": result.score,
            "keywords": list(result.keywords),
            "suggestions": result.to_dict()["suggestions"],
            "improved_text": result.improved_text,
            "created_at": "2024-01-15T10:30:00+00:00",
        }]

        record = await supabase_storage.save("42", result)

        supabase_client.table.assert_called_with("seo_analyses")
        row = query.insert.call_args[0][0]
        assert row["keywords"] == list(result.keywords)
        assert "is_compliant" not in row
        assert record.kind == AnalysisKind.SEO
        assert record.result == result

    @pytest.mark.asyncio
    async def test_latest_decodes_json_string_columns(self, supabase_storage, supabase_client):
        query = supabase_client.table.return_value
        query.execute.return_value.data = [{
            "id": 11,
            "listing_id": 42,
            "score": 90,
            "is_compliant": True,
            "issues": json.dumps([{
                "type": "religion",
                "severity": "medium",
                "text": "temple",
                "suggestion": "Remove or replace terms related to religion",
            }]),
            "improved_text": "Beautiful  views",
            "created_at": "2024-01-15T10:30:00+00:00",
        }]

        record = await supabase_storage.get_latest_by_listing("42", AnalysisKind.COMPLIANCE)

        query.order.assert_called_with("created_at", desc=True)
        assert isinstance(record.result, ComplianceResult)
        assert record.listing_id == "42"
        assert record.result.issues[0].matched_text == "temple"

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, supabase_storage, supabase_client):
        supabase_client.table.return_value.execute.return_value.data = []

        assert await supabase_storage.get("404", AnalysisKind.SEO) is None

    @pytest.mark.asyncio
    async def test_backend_error_raises_storage_error(self, supabase_storage, supabase_client):
        supabase_client.table.return_value.execute.side_effect = Exception("connection reset")

        with pytest.raises(ResultStorageError):
            await supabase_storage.save("42", analyze_compliance("Sunny condo."))

    @pytest.mark.asyncio
    async def test_empty_insert_response_raises(self, supabase_storage, supabase_client):
        supabase_client.table.return_value.execute.return_value.data = []

        with pytest.raises(ResultStorageError):
            await supabase_storage.save("42", analyze_seo("x", "y", "Austin"))


# =============================================================================
# Factory
# =============================================================================


class TestResultStorageFactory:
    """Tests for storage selection."""

    def test_defaults_to_in_memory(self):
        storage = get_result_storage()

        assert isinstance(storage, InMemoryResultStorage)
        assert get_result_storage() is storage

    def test_uses_supabase_when_configured(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")
        reload_settings()
        ResultStorage.reset()

        storage = get_result_storage()

        assert isinstance(storage, SupabaseResultStorage)


@pytest.mark.asyncio
async def test_seo_result_kept_as_seo_result(memory_storage):
    """Stored SEO results come back as SeoResult instances."""
    result = analyze_seo("Cozy condo.", "Condo", "Austin")
    record = await memory_storage.save("1", result)

    assert isinstance(record.result, SeoResult)
