"""
Reservation model linking a guest to a property for a date range.
"""

from sqlalchemy import Date, Integer, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.property import Property


class Reservation(Base):
    """Reservation of a property by a guest."""

    __tablename__ = "reservations"

    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_rel: Mapped["Property"] = relationship(
        "Property",
        back_populates="reservations"
    )

    guest: Mapped["User"] = relationship(
        "User",
        back_populates="reservations"
    )

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id}, property_id={self.property_id}, start_date={self.start_date})>"


guest_start_index = Index(
    'idx_reservations_guest_start',
    Reservation.guest_id,
    Reservation.start_date
)
