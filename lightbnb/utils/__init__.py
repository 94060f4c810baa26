"""
Utility modules for the LightBnB data access layer.
"""

from lightbnb.utils.currency import (
    MINOR_UNITS_PER_MAJOR_UNIT,
    UNBOUNDED_PRICE,
    minor_to_storage_units,
    price_bounds,
)
from lightbnb.utils.exceptions import (
    DataAccessError,
    ValidationError,
    DuplicateResourceError,
    PropertySearchError,
    InvalidSearchFilterError,
    StoreUnavailableError,
)

__all__ = [
    "MINOR_UNITS_PER_MAJOR_UNIT",
    "UNBOUNDED_PRICE",
    "minor_to_storage_units",
    "price_bounds",
    "DataAccessError",
    "ValidationError",
    "DuplicateResourceError",
    "PropertySearchError",
    "InvalidSearchFilterError",
    "StoreUnavailableError",
]
