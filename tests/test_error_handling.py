"""
Tests for custom exceptions and currency conversion helpers.
"""

import pytest
from decimal import Decimal
from pydantic import BaseModel, ValidationError as PydanticValidationError

from lightbnb.utils.currency import (
    MINOR_UNITS_PER_MAJOR_UNIT,
    UNBOUNDED_PRICE,
    minor_to_storage_units,
    price_bounds,
)
from lightbnb.utils.exceptions import (
    DataAccessError,
    DuplicateResourceError,
    InvalidSearchFilterError,
    PropertySearchError,
    StoreUnavailableError,
    ValidationError,
)


class TestExceptions:
    """Test custom exception classes."""

    def test_error_codes(self):
        assert DataAccessError("x").error_code == "DATA_ACCESS_ERROR"
        assert ValidationError("x").error_code == "VALIDATION_ERROR"
        assert DuplicateResourceError("User", "a@example.com").error_code == "DUPLICATE_RESOURCE"
        assert InvalidSearchFilterError().error_code == "INVALID_SEARCH_FILTER"
        assert StoreUnavailableError().error_code == "STORE_UNAVAILABLE"

    def test_custom_error_code(self):
        error = DataAccessError("Something broke", error_code="CUSTOM")
        assert error.to_dict() == {"code": "CUSTOM", "message": "Something broke"}

    def test_duplicate_resource_message(self):
        error = DuplicateResourceError("User", "a@example.com")
        assert str(error) == "User with identifier 'a@example.com' already exists"

    def test_search_errors_share_base(self):
        assert issubclass(InvalidSearchFilterError, PropertySearchError)
        assert issubclass(StoreUnavailableError, PropertySearchError)
        assert issubclass(PropertySearchError, DataAccessError)

    def test_validation_error_from_pydantic(self):
        class Sample(BaseModel):
            count: int

        with pytest.raises(PydanticValidationError) as exc_info:
            Sample(count="many")

        error = InvalidSearchFilterError.from_pydantic(exc_info.value, "Bad filters")

        assert isinstance(error, InvalidSearchFilterError)
        assert error.detail == "Bad filters"
        assert error.field_errors[0]["field"] == "count"
        assert error.to_dict()["details"] == error.field_errors


class TestCurrency:
    """Test minor to storage unit conversion."""

    def test_minor_units_per_major_unit(self):
        assert MINOR_UNITS_PER_MAJOR_UNIT == 100

    @pytest.mark.parametrize("minor, expected", [
        (5000, Decimal("50")),
        (1999, Decimal("19.99")),
        (1, Decimal("0.01")),
        (0, Decimal("0")),
    ])
    def test_minor_to_storage_units(self, minor, expected):
        assert minor_to_storage_units(minor) == expected

    def test_price_bounds_defaults(self):
        assert price_bounds() == (Decimal(0), UNBOUNDED_PRICE)

    def test_price_bounds_partial(self):
        assert price_bounds(minimum=2500) == (Decimal("25"), UNBOUNDED_PRICE)
        assert price_bounds(maximum=2500) == (Decimal(0), Decimal("25"))

    def test_zero_maximum_is_a_real_bound(self):
        assert price_bounds(maximum=0) == (Decimal(0), Decimal(0))
