"""
Analysis Result Storage Layer.

Persists compliance and SEO results keyed by listing, using Supabase with an
in-memory fallback for local development when Supabase is not configured.
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..config import get_settings
from ..errors import ResultStorageError
from ..types.compliance import ComplianceIssue, ComplianceResult
from ..types.records import AnalysisKind, AnalysisResult, StoredResult
from ..types.seo import SeoResult, SeoSuggestion

logger = logging.getLogger(__name__)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class BaseResultStorage(ABC):
    """Abstract base class for analysis result storage implementations."""

    @abstractmethod
    async def save(self, listing_id: str, result: AnalysisResult) -> StoredResult:
        """Save a result for a listing. Returns the stored record."""
        pass

    @abstractmethod
    async def get(self, record_id: str, kind: AnalysisKind) -> Optional[StoredResult]:
        """Get a stored result by record ID."""
        pass

    @abstractmethod
    async def get_latest_by_listing(
        self, listing_id: str, kind: AnalysisKind
    ) -> Optional[StoredResult]:
        """Get the most recent result of a kind for a listing."""
        pass


class InMemoryResultStorage(BaseResultStorage):
    """In-memory storage for local development and testing."""

    def __init__(self) -> None:
        self._records: List[StoredResult] = []
        self._id_counter = 0
        self._lock = threading.Lock()
        logger.info("Initialized in-memory result storage")

    async def save(self, listing_id: str, result: AnalysisResult) -> StoredResult:
        """Save a result for a listing. Returns the stored record."""
        kind = AnalysisKind.of(result)
        with self._lock:
            self._id_counter += 1
            record = StoredResult(
                id=f"{kind.value}-{self._id_counter}",
                listing_id=listing_id,
                kind=kind,
                created_at=_utcnow(),
                result=result,
            )
            self._records.append(record)

        logger.debug(f"Saved {kind.value} result {record.id} for listing {listing_id}")
        return record

    async def get(self, record_id: str, kind: AnalysisKind) -> Optional[StoredResult]:
        """Get a stored result by record ID."""
        with self._lock:
            for record in self._records:
                if record.id == record_id and record.kind == kind:
                    return record
        return None

    async def get_latest_by_listing(
        self, listing_id: str, kind: AnalysisKind
    ) -> Optional[StoredResult]:
        """Get the most recent result of a kind for a listing."""
        with self._lock:
            for record in reversed(self._records):
                if record.listing_id == listing_id and record.kind == kind:
                    return record
        return None


class SupabaseResultStorage(BaseResultStorage):
    """Supabase-backed storage for production use."""

    def __init__(
        self,
        supabase_url: str,
        supabase_key: str,
        compliance_table: str = "compliance_checks",
        seo_table: str = "seo_analyses",
    ) -> None:
        self._supabase_url = supabase_url
        self._supabase_key = supabase_key
        self._tables = {
            AnalysisKind.COMPLIANCE: compliance_table,
            AnalysisKind.SEO: seo_table,
        }
        self._client = None
        logger.info("Initialized Supabase result storage")

    def _get_client(self):
        """Get or create Supabase client (lazy initialization)."""
        if self._client is not None:
            return self._client

        from supabase import create_client

        try:
            self._client = create_client(self._supabase_url, self._supabase_key)
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}")
            raise ResultStorageError(f"Supabase client unavailable: {e}") from e
        return self._client

    @staticmethod
    def _json_field(value: Any) -> Any:
        """Decode a JSON column that may have been stored as a string."""
        if isinstance(value, str):
            return json.loads(value)
        return value or []

    def _row_from_result(self, listing_id: str, result: AnalysisResult) -> Dict[str, Any]:
        """Convert a result to a table row."""
        data = result.to_dict()
        row: Dict[str, Any] = {
            "listing_id": listing_id,
            "score": result.score,
            "improved_text": result.improved_text,
        }
        if isinstance(result, ComplianceResult):
            row["is_compliant"] = result.is_compliant
            row["issues"] = data["issues"]
        else:
            row["keywords"] = data["keywords"]
            row["suggestions"] = data["suggestions"]
        return row

    def _record_from_row(self, row: dict, kind: AnalysisKind) -> StoredResult:
        """Convert a database row to a StoredResult."""
        if kind == AnalysisKind.COMPLIANCE:
            result: AnalysisResult = ComplianceResult(
                score=row["score"],
                is_compliant=row["is_compliant"],
                issues=[
                    ComplianceIssue.model_validate(issue)
                    for issue in self._json_field(row.get("issues"))
                ],
                improved_text=row.get("improved_text"),
            )
        else:
            result = SeoResult(
                score=row["score"],
                keywords=self._json_field(row.get("keywords")),
                suggestions=[
                    SeoSuggestion.model_validate(suggestion)
                    for suggestion in self._json_field(row.get("suggestions"))
                ],
                improved_text=row.get("improved_text"),
            )

        return StoredResult(
            id=str(row["id"]),
            listing_id=str(row["listing_id"]),
            kind=kind,
            created_at=str(row.get("created_at") or _utcnow()),
            result=result,
        )

    async def save(self, listing_id: str, result: AnalysisResult) -> StoredResult:
        """Save a result for a listing. Returns the stored record."""
        kind = AnalysisKind.of(result)
        try:
            client = self._get_client()
            response = (
                client.table(self._tables[kind])
                .insert(self._row_from_result(listing_id, result))
                .execute()
            )
        except ResultStorageError:
            raise
        except Exception as e:
            logger.error(f"Error saving {kind.value} result for listing {listing_id}: {e}")
            raise ResultStorageError(f"Failed to save {kind.value} result: {e}") from e

        if not response.data:
            raise ResultStorageError(f"Failed to insert {kind.value} result")

        record = self._record_from_row(response.data[0], kind)
        logger.info(f"Saved {kind.value} result {record.id} for listing {listing_id}")
        return record

    async def get(self, record_id: str, kind: AnalysisKind) -> Optional[StoredResult]:
        """Get a stored result by record ID."""
        try:
            client = self._get_client()
            response = (
                client.table(self._tables[kind])
                .select("*")
                .eq("id", record_id)
                .limit(1)
                .execute()
            )
        except ResultStorageError:
            raise
        except Exception as e:
            logger.error(f"Error fetching {kind.value} result {record_id}: {e}")
            raise ResultStorageError(f"Failed to fetch {kind.value} result: {e}") from e

        if not response.data:
            return None
        return self._record_from_row(response.data[0], kind)

    async def get_latest_by_listing(
        self, listing_id: str, kind: AnalysisKind
    ) -> Optional[StoredResult]:
        """Get the most recent result of a kind for a listing."""
        try:
            client = self._get_client()
            response = (
                client.table(self._tables[kind])
                .select("*")
                .eq("listing_id", listing_id)
                .order("created_at", desc=True)
                .limit(1)
                .execute()
            )
        except ResultStorageError:
            raise
        except Exception as e:
            logger.error(f"Error fetching latest {kind.value} result for listing {listing_id}: {e}")
            raise ResultStorageError(f"Failed to fetch {kind.value} result: {e}") from e

        if not response.data:
            return None
        return self._record_from_row(response.data[0], kind)


class ResultStorage:
    """
    Factory class for result storage.

    Provides a singleton storage instance based on configuration.
    """

    _instance: Optional[BaseResultStorage] = None

    @classmethod
    def get_storage(cls) -> BaseResultStorage:
        """
        Get or create the storage instance.

        Uses Supabase if SUPABASE_URL and SUPABASE_KEY (or SUPABASE_SERVICE_KEY)
        are configured, otherwise falls back to in-memory storage.
        """
        if cls._instance is not None:
            return cls._instance

        database = get_settings().database
        if database.is_configured:
            cls._instance = SupabaseResultStorage(
                database.supabase_url,
                database.supabase_key.get_secret_value(),
                compliance_table=database.compliance_table,
                seo_table=database.seo_table,
            )
            logger.info("Using Supabase storage for analysis results")
        else:
            logger.info(
                "Supabase not configured (SUPABASE_URL and SUPABASE_KEY not set). "
                "Using in-memory storage for analysis results."
            )
            cls._instance = InMemoryResultStorage()

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the storage instance. Useful for testing."""
        cls._instance = None


def get_result_storage() -> BaseResultStorage:
    """Get the result storage instance."""
    return ResultStorage.get_storage()
