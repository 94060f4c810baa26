"""
Property and review models.
Handles listing data, nightly cost and the review ratings used for search aggregation.
"""

from sqlalchemy import String, Text, Integer, SmallInteger, Index, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.reservation import Reservation


class Property(Base):
    """
    Property listing offered by an owner.
    """

    __tablename__ = "properties"

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    # Descriptive fields
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Property listing title"
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Detailed property description"
    )

    thumbnail_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    cover_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    # Nightly cost in storage units
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly cost in storage units"
    )

    # Property specifications
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="properties"
    )

    reviews: Mapped[List["PropertyReview"]] = relationship(
        "PropertyReview",
        back_populates="property_rel",
        cascade="all, delete-orphan"
    )

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="property_rel",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"

    def to_dict(self) -> dict:
        """
        Convert property to dictionary.

        Returns:
            Dictionary representation of property columns
        """
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "title": self.title,
            "description": self.description,
            "thumbnail_photo_url": self.thumbnail_photo_url,
            "cover_photo_url": self.cover_photo_url,
            "cost_per_night": self.cost_per_night,
            "parking_spaces": self.parking_spaces,
            "number_of_bathrooms": self.number_of_bathrooms,
            "number_of_bedrooms": self.number_of_bedrooms,
            "country": self.country,
            "street": self.street,
            "city": self.city,
            "province": self.province,
            "post_code": self.post_code,
        }


class PropertyReview(Base):
    """
    Guest review of a property. A property may have any number of reviews.
    """

    __tablename__ = "property_reviews"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_property_reviews_rating_range"),
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    reservation_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=True
    )

    rating: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=0,
        comment="Rating on a 0-5 scale"
    )

    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    property_rel: Mapped["Property"] = relationship(
        "Property",
        back_populates="reviews"
    )

    def __repr__(self) -> str:
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"


# Search filters on city then orders by cost
city_cost_index = Index(
    'idx_properties_city_cost',
    Property.city,
    Property.cost_per_night
)

owner_cost_index = Index(
    'idx_properties_owner_cost',
    Property.owner_id,
    Property.cost_per_night
)
