"""
Pydantic schemas for reservation listings.
"""

from pydantic import BaseModel, Field
from datetime import date


class ReservationSummary(BaseModel):
    """A guest's reservation with the reserved property's headline details."""

    id: int = Field(..., description="Reservation identifier")
    property_id: int
    start_date: date
    end_date: date

    title: str
    thumbnail_photo_url: str
    number_of_bedrooms: int
    number_of_bathrooms: int
    parking_spaces: int
    cost_per_night: int

    average_rating: float = Field(
        ...,
        description="Unrounded average of the property's review ratings"
    )
