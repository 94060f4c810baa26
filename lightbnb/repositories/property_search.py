"""
Property search query construction.

Turns an optional set of search filters into a single aggregate query over
properties joined to their reviews. Only properties with at least one review
can match, because the average rating is undefined without one.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Float, Numeric, Select, func, literal, select

from lightbnb.config import settings
from lightbnb.models.property import Property, PropertyReview
from lightbnb.schemas.property import PropertyListing, PropertySearchFilters
from lightbnb.utils.currency import price_bounds
from lightbnb.utils.exceptions import InvalidSearchFilterError, PropertySearchError

SearchOptions = Union[PropertySearchFilters, Mapping[str, Any], None]


@dataclass(frozen=True)
class NormalizedSearch:
    """Search parameters after defaulting and unit conversion."""

    city: Optional[str]
    owner_id: Optional[int]
    min_cost: Decimal
    max_cost: Decimal
    minimum_rating: float
    limit: int


class PropertySearchQueryBuilder:
    """
    Builds the filtered property search query.

    The builder is pure: it validates and normalizes its inputs on
    construction and produces a SQLAlchemy ``Select`` without touching
    the database.
    """

    def __init__(self, filters: SearchOptions = None, limit: Optional[int] = None):
        """
        Args:
            filters: PropertySearchFilters instance, or a mapping of raw
                request options to validate
            limit: Maximum number of rows to return; None uses the
                configured default_search_limit

        Raises:
            InvalidSearchFilterError: If any filter or the limit is malformed
        """
        self.filters = self._coerce_filters(filters)
        self.limit = self._validate_limit(limit)
        self.normalized = self.normalize()

    @staticmethod
    def _coerce_filters(filters: SearchOptions) -> PropertySearchFilters:
        if filters is None:
            return PropertySearchFilters()
        if isinstance(filters, PropertySearchFilters):
            return filters
        try:
            return PropertySearchFilters.model_validate(dict(filters))
        except PydanticValidationError as e:
            raise InvalidSearchFilterError.from_pydantic(e, "Invalid property search filters")
        except (TypeError, ValueError):
            raise InvalidSearchFilterError(f"Search options must be a mapping, got {type(filters).__name__}")

    @staticmethod
    def _validate_limit(limit: Any) -> int:
        if limit is None:
            return settings.default_search_limit
        # bool is an int subclass but never a meaningful page size
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise InvalidSearchFilterError(
                "Limit must be an integer",
                field_errors=[{"field": "limit", "message": "must be an integer", "type": "int_type"}]
            )
        if limit < 1 or limit > settings.max_search_limit:
            raise InvalidSearchFilterError(
                f"Limit must be between 1 and {settings.max_search_limit}",
                field_errors=[{"field": "limit", "message": "out of range", "type": "limit_range"}]
            )
        return limit

    def normalize(self) -> NormalizedSearch:
        """Apply defaults and convert prices to storage units."""
        min_cost, max_cost = price_bounds(
            self.filters.minimum_price_per_night,
            self.filters.maximum_price_per_night
        )
        return NormalizedSearch(
            city=self.filters.city,
            owner_id=self.filters.owner_id,
            min_cost=min_cost,
            max_cost=max_cost,
            minimum_rating=self.filters.minimum_rating or 0.0,
            limit=self.limit,
        )

    def build(self) -> Select:
        """
        Build the search query.

        Returns:
            Select yielding (Property, average_rating) rows ordered by cost
        """
        params = self.normalized
        average_rating = func.avg(PropertyReview.rating)

        query = (
            select(Property, average_rating.label("average_rating"))
            .join(PropertyReview, PropertyReview.property_id == Property.id)
        )

        # Row-level predicates, only for filters that were given
        if params.city is not None:
            query = query.where(Property.city == params.city)
        if params.owner_id is not None:
            query = query.where(Property.owner_id == params.owner_id)

        query = query.where(
            Property.cost_per_night.between(
                literal(params.min_cost, Numeric()),
                literal(params.max_cost, Numeric())
            )
        )

        # Rating is only known after aggregation
        query = (
            query.group_by(Property.id)
            .having(average_rating >= literal(params.minimum_rating, Float()))
            .order_by(Property.cost_per_night.asc(), Property.id.asc())
            .limit(params.limit)
        )

        return query


@dataclass
class SearchResult:
    """
    Outcome of a property search.

    A failed search has ``ok`` False and carries the error; a search that
    simply matched nothing has ``ok`` True and no rows.
    """

    rows: List[PropertyListing] = field(default_factory=list)
    error: Optional[PropertySearchError] = None

    @classmethod
    def success(cls, rows: List[PropertyListing]) -> "SearchResult":
        return cls(rows=list(rows))

    @classmethod
    def failure(cls, error: PropertySearchError) -> "SearchResult":
        return cls(rows=[], error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "SearchResult":
        """Raise the carried error, if any; otherwise return self."""
        if self.error is not None:
            raise self.error
        return self

    def __iter__(self) -> Iterator[PropertyListing]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)
