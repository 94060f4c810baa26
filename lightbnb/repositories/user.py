"""
User repository for account lookup and registration.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.utils.exceptions import DuplicateResourceError
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts.
    """

    unique_field = "email"

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address to search for; matched case-insensitively

        Returns:
            User instance if found, None otherwise
        """
        return await self.first(select(User).where(User.email == User.normalize_email(email)))

    async def add_user(self, user_data: Dict[str, Any]) -> User:
        """
        Create a new user.

        The lookup rejects the common case early; a concurrent registration
        of the same email is caught by the unique index on insert.

        Args:
            user_data: Dictionary with name, email and password

        Returns:
            Created user instance

        Raises:
            DuplicateResourceError: If the email is already registered
            Exception: If database operation fails
        """
        try:
            email = User.normalize_email(user_data["email"])

            existing_user = await self.get_by_email(email)
            if existing_user:
                raise DuplicateResourceError("User", email)

            created_user = await self.create({**user_data, "email": email})
            logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
            return created_user
        except DuplicateResourceError as e:
            logger.warning(f"User registration rejected: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to create user: {e}")
            raise
