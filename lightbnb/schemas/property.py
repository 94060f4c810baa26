"""
Pydantic schemas for property requests and responses.
Handles property creation, search filters and aggregated search results.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional


class PropertyBase(BaseModel):
    """Base property schema with common fields."""

    owner_id: int = Field(..., gt=0, description="ID of the owning user")

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Property listing title"
    )

    description: Optional[str] = Field(
        None,
        max_length=5000,
        description="Detailed property description"
    )

    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)

    cost_per_night: int = Field(
        ...,
        ge=0,
        description="Nightly cost in storage units"
    )

    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    country: str = Field(..., min_length=1, max_length=255)
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    province: str = Field(..., min_length=1, max_length=255)
    post_code: str = Field(..., min_length=1, max_length=255)


class PropertyCreate(PropertyBase):
    """Schema for creating a new property."""

    @field_validator('title', 'city')
    @classmethod
    def validate_not_blank(cls, v):
        """Validate and clean required text."""
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()


class PropertyResponse(BaseModel):
    """
    Stored property record.

    Mirrors the ``properties`` columns without the input limits of
    PropertyBase, so any row the table accepts can be returned.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str


class PropertyListing(PropertyResponse):
    """Property returned by a search, with the mean of its review ratings."""

    average_rating: float = Field(
        ...,
        description="Unrounded average of the property's review ratings"
    )


class PropertySearchFilters(BaseModel):
    """
    Optional property search filters.

    Absent fields place no constraint on the search. Prices are given in
    minor currency units. Blank strings, as submitted by an empty form
    field, count as absent.
    """

    city: Optional[str] = Field(
        None,
        max_length=255,
        description="Exact city to match"
    )

    owner_id: Optional[int] = Field(
        None,
        gt=0,
        description="Only properties owned by this user"
    )

    minimum_price_per_night: Optional[int] = Field(
        None,
        ge=0,
        description="Lowest nightly cost, in minor units"
    )

    maximum_price_per_night: Optional[int] = Field(
        None,
        ge=0,
        description="Highest nightly cost, in minor units"
    )

    minimum_rating: Optional[float] = Field(
        None,
        ge=0,
        le=5,
        description="Lowest acceptable average rating"
    )

    @field_validator(
        'city',
        'owner_id',
        'minimum_price_per_night',
        'maximum_price_per_night',
        'minimum_rating',
        mode='before'
    )
    @classmethod
    def blank_as_absent(cls, v):
        """Treat blank strings as an absent filter."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('city')
    @classmethod
    def strip_city(cls, v):
        return v.strip() if v is not None else v

    @model_validator(mode='after')
    def validate_price_range(self):
        """Validate that the price range is not inverted."""
        if self.minimum_price_per_night is not None and self.maximum_price_per_night is not None:
            if self.minimum_price_per_night > self.maximum_price_per_night:
                raise ValueError("Minimum price cannot be greater than maximum price")
        return self
