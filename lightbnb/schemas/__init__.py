"""
Pydantic schemas for validating operation inputs and shaping returned records.
"""

from lightbnb.schemas.user import UserCreate, UserResponse
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyResponse,
    PropertyListing,
    PropertySearchFilters,
)
from lightbnb.schemas.reservation import ReservationSummary

__all__ = [
    "UserCreate",
    "UserResponse",
    "PropertyCreate",
    "PropertyResponse",
    "PropertyListing",
    "PropertySearchFilters",
    "ReservationSummary",
]
