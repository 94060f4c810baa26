"""
Database connection and session management.
Handles async database operations with SQLAlchemy and connection pooling.
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import text, Integer
from lightbnb.config import settings
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """Build engine keyword arguments for the configured backend."""
    if settings.is_sqlite:
        # SQLite pools do not accept sizing arguments
        return {}

    return {
        "pool_size": settings.pool_size,
        "max_overflow": settings.max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": settings.pool_recycle,
        "pool_timeout": settings.pool_timeout,
        "connect_args": {
            "timeout": settings.query_timeout_seconds,
            "command_timeout": settings.query_timeout_seconds,
            "server_settings": {
                "application_name": "lightbnb_data_access",
            },
        },
    }


# Shared engine; every operation borrows a pooled connection for one round trip
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options()
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every table uses a serial integer primary key.
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


async def check_database_connection(
    session_factory: Optional[async_sessionmaker] = None
) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    factory = session_factory or AsyncSessionLocal
    try:
        async with factory() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def close_db_connection():
    """
    Close database connection.
    This should be called during application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")
