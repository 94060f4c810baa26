"""
Custom exception classes for the LightBnB data access layer.
Every error carries a message and a stable error code for callers to branch on.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError


class DataAccessError(Exception):
    """Base data access exception class."""

    error_code = "DATA_ACCESS_ERROR"

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        if error_code:
            self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form of the error for logs and callers."""
        return {"code": self.error_code, "message": self.detail}


class ValidationError(DataAccessError):
    """Input validation error exception."""

    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, Any]]] = None
    ):
        super().__init__(detail)
        self.field_errors = field_errors or []

    @classmethod
    def from_pydantic(cls, exception: PydanticValidationError, detail: str = "Validation failed"):
        """
        Build from a pydantic validation error, keeping per-field details.

        Args:
            exception: Pydantic validation error
            detail: Summary message

        Returns:
            Exception instance with field_errors populated
        """
        field_errors = []
        for error in exception.errors():
            field_errors.append({
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            })
        return cls(detail, field_errors=field_errors)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["details"] = self.field_errors
        return data


class DuplicateResourceError(DataAccessError):
    """Duplicate resource exception."""

    error_code = "DUPLICATE_RESOURCE"

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")


# Property search failures
class PropertySearchError(DataAccessError):
    """Base class for failures reported by a property search."""

    error_code = "PROPERTY_SEARCH_ERROR"


class InvalidSearchFilterError(PropertySearchError, ValidationError):
    """Search filters of the wrong shape or range; never sent to the store."""

    error_code = "INVALID_SEARCH_FILTER"

    def __init__(
        self,
        detail: str = "Invalid property search filters",
        field_errors: Optional[List[Dict[str, Any]]] = None
    ):
        ValidationError.__init__(self, detail, field_errors=field_errors)


class StoreUnavailableError(PropertySearchError):
    """Store unreachable, timed out or rejected the query."""

    error_code = "STORE_UNAVAILABLE"

    def __init__(self, detail: str = "Data store unavailable"):
        super().__init__(detail)
