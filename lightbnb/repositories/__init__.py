"""
Repository layer for data access operations.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.property_search import (
    NormalizedSearch,
    PropertySearchQueryBuilder,
    SearchResult,
)
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "PropertySearchQueryBuilder",
    "NormalizedSearch",
    "SearchResult",
    "ReservationRepository",
    "UserRepository"
]
