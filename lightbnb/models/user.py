"""
User model for guests and property owners.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property
    from lightbnb.models.reservation import Reservation


class User(Base):
    """
    User account. The same record acts as owner for listed properties
    and as guest for reservations and reviews.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address, stored lower-cased"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password hash supplied by the caller"
    )

    # Relationships
    properties: Mapped[List["Property"]] = relationship(
        "Property",
        back_populates="owner",
        cascade="all, delete-orphan"
    )

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="guest",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, email={self.email})>"

    @staticmethod
    def normalize_email(email: str) -> str:
        """Normalize an email address for storage and lookup."""
        return email.strip().lower()

    def to_dict(self) -> dict:
        """
        Convert user to dictionary (excluding the password hash).

        Returns:
            Dictionary representation of user
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }
