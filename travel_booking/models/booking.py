"""Booking models as stored in the ``bookings`` table."""

from datetime import date as DateType, datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from .common import parse_date, parse_datetime


MAX_TRAVELERS = 20  # UI limit only


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"


class BookingDestination(BaseModel):
    """Destination columns joined onto a booking row."""

    name: str
    image_url: str | None = None


class Booking(BaseModel):
    id: str | None = None
    destination_id: str
    user_id: str
    start_date: DateType
    end_date: DateType
    travelers: int = Field(default=1, ge=1)
    total_price: float = Field(default=0.0, ge=0)
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime | None = None
    destinations: BookingDestination | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date_fields(cls, v):
        """Parse date strings to date objects."""
        return parse_date(v)

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v):
        return parse_datetime(v)

    @property
    def destination_name(self) -> str:
        return self.destinations.name if self.destinations else "Destination"

    def to_insert_payload(self) -> dict:
        """Columns sent on insert; server-generated and joined fields are left out."""
        return self.model_dump(
            mode="json",
            exclude={"id", "created_at", "destinations"},
        )
