"""
Base repository for LightBnB tables.

Every LightBnB table has an integer ``id`` primary key, and inserts are
single rows committed immediately, so the shared behaviour is a committed
insert and single-row lookups.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import Select, select
from lightbnb.database import Base
from lightbnb.utils.exceptions import DuplicateResourceError
from typing import TypeVar, Generic, Optional, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell a unique constraint violation apart from other integrity errors."""
    # asyncpg raises UniqueViolationError (SQLSTATE 23505), sqlite reports "UNIQUE constraint failed"
    sqlstate = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == "23505"
    return "unique" in str(error.orig).lower()


class BaseRepository(Generic[ModelType]):
    """
    Shared insert and lookup for one LightBnB table.
    Bound to a single async session for the lifetime of one operation.
    """

    # Column whose unique index identifies a duplicate insert, if any
    unique_field: Optional[str] = None

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    async def create(self, values: Dict[str, Any]) -> ModelType:
        """
        Insert one row and commit it.

        Args:
            values: Column values for the new row

        Returns:
            Inserted model instance with its generated id

        Raises:
            DuplicateResourceError: If the row violates the table's unique index
            IntegrityError: On any other constraint violation
        """
        db_obj = self.model(**values)
        self.db.add(db_obj)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if self.unique_field is not None and is_unique_violation(e):
                identifier = values.get(self.unique_field)
                logger.warning(f"Duplicate {self.model.__tablename__} row for {self.unique_field}={identifier}")
                raise DuplicateResourceError(self.model.__name__, identifier) from e
            logger.error(f"Failed to insert into {self.model.__tablename__}: {e}")
            raise
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(db_obj)
        logger.debug(f"Inserted {self.model.__tablename__} row {db_obj.id}")
        return db_obj

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """Get a row by its integer primary key, or None."""
        return await self.first(select(self.model).where(self.model.id == id))

    async def first(self, query: Select) -> Optional[ModelType]:
        """
        Run a query expected to match at most one row.

        Args:
            query: Select over this repository's model

        Returns:
            Model instance if found, None otherwise
        """
        try:
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Lookup on {self.model.__tablename__} failed: {e}")
            raise
