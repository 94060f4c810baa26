"""
Property repository for listing creation and filtered search.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from lightbnb.config import settings
from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.property_search import (
    PropertySearchQueryBuilder,
    SearchOptions,
    SearchResult,
)
from lightbnb.models.property import Property
from lightbnb.schemas.property import PropertyListing
from lightbnb.utils.exceptions import InvalidSearchFilterError, StoreUnavailableError
from typing import Optional, Dict, Any
import asyncio
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings and the filtered property search.
    """

    def __init__(self, db: AsyncSession, query_timeout: Optional[float] = None):
        super().__init__(Property, db)
        self.query_timeout = query_timeout or settings.query_timeout_seconds

    async def add_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Create a new property.

        Args:
            property_data: Dictionary containing property columns

        Returns:
            Created property instance
        """
        try:
            created_property = await self.create(property_data)
            logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
            return created_property
        except Exception as e:
            logger.error(f"Failed to create property: {e}")
            raise

    async def search_properties(
        self,
        filters: SearchOptions = None,
        limit: Optional[int] = None
    ) -> SearchResult:
        """
        Search properties that have at least one review.

        Failures never propagate: malformed filters and store errors are
        logged and returned on the result with ``ok`` set to False.

        A timeout cancels the statement mid-flight and leaves the session
        in an undefined state; discard the session after a failed search
        instead of reusing it.

        Args:
            filters: PropertySearchFilters or a mapping of raw options
            limit: Maximum number of properties to return; None uses the
                configured default

        Returns:
            SearchResult of PropertyListing rows ordered by cost per night
        """
        try:
            query = PropertySearchQueryBuilder(filters, limit).build()
        except InvalidSearchFilterError as e:
            logger.warning(f"Rejected property search filters: {e.detail} {e.field_errors}")
            return SearchResult.failure(e)

        try:
            result = await asyncio.wait_for(self.db.execute(query), timeout=self.query_timeout)
            rows = result.all()
        except asyncio.TimeoutError:
            logger.error(f"Property search timed out after {self.query_timeout}s")
            return SearchResult.failure(
                StoreUnavailableError(f"Property search timed out after {self.query_timeout}s")
            )
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Failed to search properties: {e}")
            return SearchResult.failure(StoreUnavailableError(f"Property search failed: {e}"))

        listings = [
            PropertyListing(**property_obj.to_dict(), average_rating=float(average_rating))
            for property_obj, average_rating in rows
        ]

        logger.debug(f"Property search returned {len(listings)} results")
        return SearchResult.success(listings)
