"""
Data access service for users, property listings and reservations.
Each operation borrows one session from the pool for a single round trip and
returns it on completion or failure; callers never hold a connection across calls.
"""

from sqlalchemy.ext.asyncio import async_sessionmaker
from pydantic import ValidationError as PydanticValidationError
from lightbnb.database import AsyncSessionLocal
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.property_search import SearchOptions, SearchResult
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.property import PropertyCreate, PropertyResponse
from lightbnb.schemas.reservation import ReservationSummary
from lightbnb.schemas.user import UserCreate, UserResponse
from lightbnb.utils.exceptions import ValidationError
from typing import Any, Dict, List, Optional, Union
import logging

logger = logging.getLogger(__name__)


class DataAccessService:
    """
    Public entry point of the data access layer.
    Validates inputs with pydantic schemas and returns plain pydantic records
    rather than ORM instances bound to a session.
    """

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self.session_factory = session_factory or AsyncSessionLocal

    # Users

    async def get_user_with_email(self, email: str) -> Optional[UserResponse]:
        """
        Get a single user given their email.

        Args:
            email: The email of the user

        Returns:
            The user, or None if no account uses this email
        """
        async with self.session_factory() as session:
            user = await UserRepository(session).get_by_email(email)
            return UserResponse.model_validate(user) if user else None

    async def get_user_with_id(self, user_id: int) -> Optional[UserResponse]:
        """Get a single user given their id."""
        async with self.session_factory() as session:
            user = await UserRepository(session).get_by_id(user_id)
            return UserResponse.model_validate(user) if user else None

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> UserResponse:
        """
        Add a new user.

        Args:
            user: UserCreate or a mapping with name, email and password

        Returns:
            The created user

        Raises:
            ValidationError: If the user data is invalid
            DuplicateResourceError: If the email is already registered
        """
        user_in = self._validate(UserCreate, user, "Invalid user data")
        async with self.session_factory() as session:
            created = await UserRepository(session).add_user(user_in.model_dump())
            return UserResponse.model_validate(created)

    # Reservations

    async def get_all_reservations(self, guest_id: int, limit: int = 10) -> List[ReservationSummary]:
        """
        Get all reservations for a single guest.

        Args:
            guest_id: The id of the guest
            limit: Maximum number of reservations to return

        Returns:
            Reservations ordered by start date
        """
        async with self.session_factory() as session:
            return await ReservationRepository(session).get_all_reservations(guest_id, limit)

    # Properties

    async def get_all_properties(
        self,
        options: SearchOptions = None,
        limit: Optional[int] = None
    ) -> SearchResult:
        """
        Search properties.

        Args:
            options: Search filters (city, owner_id, minimum/maximum price per
                night in minor units, minimum_rating)
            limit: The number of results to return; None uses the configured default

        Returns:
            SearchResult; check ``ok`` to tell a failed search from an empty one
        """
        async with self.session_factory() as session:
            return await PropertyRepository(session).search_properties(options, limit)

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> PropertyResponse:
        """
        Add a property.

        Args:
            property_data: PropertyCreate or a mapping of all property details

        Returns:
            The created property

        Raises:
            ValidationError: If the property data is invalid
        """
        property_in = self._validate(PropertyCreate, property_data, "Invalid property data")
        async with self.session_factory() as session:
            created = await PropertyRepository(session).add_property(property_in.model_dump())
            return PropertyResponse.model_validate(created)

    @staticmethod
    def _validate(schema, data, detail: str):
        if isinstance(data, schema):
            return data
        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            error = ValidationError.from_pydantic(e, detail)
            logger.warning(f"{detail}: {len(error.field_errors)} field errors")
            raise error
