"""
Reservation repository for listing a guest's reservations.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from lightbnb.models.property import Property, PropertyReview
from lightbnb.schemas.reservation import ReservationSummary
from typing import List
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """
    Repository for reservations.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def get_all_reservations(self, guest_id: int, limit: int = 10) -> List[ReservationSummary]:
        """
        Get a guest's reservations with the reserved property's average rating.

        Reservations of properties that have no reviews are not returned.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return

        Returns:
            Reservations ordered by start date
        """
        try:
            query = (
                select(Reservation, Property, func.avg(PropertyReview.rating).label("average_rating"))
                .join(Property, Reservation.property_id == Property.id)
                .join(PropertyReview, PropertyReview.property_id == Reservation.property_id)
                .where(Reservation.guest_id == guest_id)
                .group_by(Property.id, Reservation.id)
                .order_by(Reservation.start_date, Reservation.id)
                .limit(limit)
            )

            result = await self.db.execute(query)
            reservations = [
                ReservationSummary(
                    id=reservation.id,
                    property_id=property_obj.id,
                    start_date=reservation.start_date,
                    end_date=reservation.end_date,
                    title=property_obj.title,
                    thumbnail_photo_url=property_obj.thumbnail_photo_url,
                    number_of_bedrooms=property_obj.number_of_bedrooms,
                    number_of_bathrooms=property_obj.number_of_bathrooms,
                    parking_spaces=property_obj.parking_spaces,
                    cost_per_night=property_obj.cost_per_night,
                    average_rating=float(average_rating),
                )
                for reservation, property_obj, average_rating in result.all()
            ]

            logger.debug(f"Retrieved {len(reservations)} reservations for guest {guest_id}")
            return reservations
        except Exception as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise
