"""
Listing analysis service.

Runs the pure analyzers and then persists their results as a separate step.
A storage failure never discards a computed result: it is logged and
reported on the returned AnalysisOutcome instead.
"""

import logging
from typing import Optional

from .compliance.analyzer import analyze_compliance
from .config import get_settings
from .errors import InvalidInputError
from .seo.analyzer import analyze_seo
from .storage.result_storage import BaseResultStorage, get_result_storage
from .types.records import AnalysisKind, AnalysisOutcome, AnalysisResult, StoredResult
from .utils.logging import Timer, clear_request_context, set_request_context

logger = logging.getLogger(__name__)


class ListingAnalysisService:
    """
    Analyze listing text and persist the results.

    Storage is resolved lazily from configuration unless one is passed in.
    """

    def __init__(
        self,
        storage: Optional[BaseResultStorage] = None,
        max_text_length: Optional[int] = None,
    ) -> None:
        self._storage = storage
        self.max_text_length = (
            max_text_length
            if max_text_length is not None
            else get_settings().analysis.max_text_length
        )

    @property
    def storage(self) -> BaseResultStorage:
        """The result store used by this service."""
        if self._storage is None:
            self._storage = get_result_storage()
        return self._storage

    def _check_length(self, text: Optional[str]) -> None:
        if isinstance(text, str) and len(text) > self.max_text_length:
            raise InvalidInputError(
                f"Listing text is {len(text)} characters; "
                f"the maximum is {self.max_text_length}"
            )

    async def _persist(self, listing_id: str, result: AnalysisResult) -> AnalysisOutcome:
        kind = AnalysisKind.of(result)
        try:
            record = await self.storage.save(listing_id, result)
        except Exception as e:
            logger.error(
                f"Failed to save {kind.value} result for listing {listing_id}: {e}",
                extra={"score": result.score},
            )
            return AnalysisOutcome(result=result, storage_error=str(e))

        logger.info(
            f"Saved {kind.value} result for listing {listing_id}",
            extra={"record_id": record.id, "score": result.score},
        )
        return AnalysisOutcome(result=result, record=record)

    async def check_compliance(self, listing_id: str, text: Optional[str]) -> AnalysisOutcome:
        """
        Check listing text for fair-housing compliance and save the result.

        Args:
            listing_id: Listing the text belongs to.
            text: Listing text.

        Returns:
            AnalysisOutcome carrying the ComplianceResult.

        Raises:
            InvalidInputError: If the text is invalid or too long.
        """
        set_request_context(listing_id=listing_id)
        try:
            self._check_length(text)

            with Timer("compliance_analysis", logger):
                result = analyze_compliance(text)

            return await self._persist(listing_id, result)
        finally:
            # Clear request context
            clear_request_context()

    async def analyze_seo(
        self,
        listing_id: str,
        text: Optional[str],
        title: Optional[str],
        location: Optional[str],
    ) -> AnalysisOutcome:
        """
        Analyze listing copy for SEO and save the result.

        Args:
            listing_id: Listing the copy belongs to.
            text: Listing description.
            title: Listing title.
            location: Specific location the listing should mention.

        Returns:
            AnalysisOutcome carrying the SeoResult.

        Raises:
            InvalidInputError: If any input is invalid or the text is too long.
        """
        set_request_context(listing_id=listing_id)
        try:
            self._check_length(text)

            with Timer("seo_analysis", logger):
                result = analyze_seo(text, title, location)

            return await self._persist(listing_id, result)
        finally:
            # Clear request context
            clear_request_context()

    async def latest_compliance(self, listing_id: str) -> Optional[StoredResult]:
        """Get the most recent compliance result for a listing."""
        return await self.storage.get_latest_by_listing(listing_id, AnalysisKind.COMPLIANCE)

    async def latest_seo(self, listing_id: str) -> Optional[StoredResult]:
        """Get the most recent SEO result for a listing."""
        return await self.storage.get_latest_by_listing(listing_id, AnalysisKind.SEO)
