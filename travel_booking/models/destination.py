"""Destination models as stored in the ``destinations`` table."""

from pydantic import BaseModel, Field


# Option lists offered by the destination filters
COUNTRIES = ["France", "Japan", "Greece", "Peru"]
DESTINATION_TYPES = ["City", "Beach", "Cultural", "Adventure"]


class Destination(BaseModel):
    """A bookable destination. Read-only from the app's perspective."""

    id: str
    name: str
    country: str
    description: str | None = None
    image_url: str | None = None
    price: float = Field(ge=0)  # per person per day
    type: str
    rating: float = 0.0
    review_count: int = 0
    trending: bool = False

    def display_label(self) -> str:
        """Return a human-readable label for selection widgets."""
        return f"{self.name}, {self.country}"
