"""Review models as returned from the ``reviews`` table with its joins."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .common import parse_datetime


class ReviewAuthor(BaseModel):
    """Profile columns joined onto a review row."""

    display_name: str | None = None


class ReviewDestination(BaseModel):
    """Destination columns joined onto a review row."""

    name: str
    type: str


class Review(BaseModel):
    id: str
    user_id: str
    destination_id: str
    rating: int = Field(ge=1, le=5)
    content: str
    likes: int = 0
    created_at: datetime
    profiles: ReviewAuthor | None = None
    destinations: ReviewDestination | None = None

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v):
        return parse_datetime(v)

    @property
    def author_name(self) -> str:
        if self.profiles and self.profiles.display_name:
            return self.profiles.display_name
        return "Anonymous"


class ReviewDraft(BaseModel):
    """A review as inserted by the app; likes and timestamps are server-side."""

    user_id: str
    destination_id: str
    rating: int = Field(ge=1, le=5)
    content: str
