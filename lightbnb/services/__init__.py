"""
Service layer exposing the data access operations.
"""

from lightbnb.services.data_access import DataAccessService

__all__ = ["DataAccessService"]
