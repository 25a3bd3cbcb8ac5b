"""Trip plan models as stored in the ``trip_plans`` table."""

import time
from datetime import date as DateType
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .common import parse_date


class TripType(str, Enum):
    BEACH = "beach"
    CITY = "city"
    CULTURAL = "cultural"
    ADVENTURE = "adventure"
    RELAXATION = "relaxation"


class BudgetBucket(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    LUXURY = "luxury"


# Per-person budget labels shown in the planner
BUDGET_LABELS = {
    BudgetBucket.LOW: "Under $1,000",
    BudgetBucket.MEDIUM: "$1,000 - $3,000",
    BudgetBucket.HIGH: "$3,000 - $5,000",
    BudgetBucket.LUXURY: "Above $5,000",
}

DEFAULT_TRAVELERS = "2"


class PlannedActivity(BaseModel):
    id: int
    name: str = ""
    time: str = ""  # "HH:MM" as entered

    def is_blank(self) -> bool:
        return not self.name and not self.time


class ActivityList(BaseModel):
    """Ordered, editable list of planned activities for one planner session.

    Ids are local to the session: the first entry is 1 and later entries
    use the current timestamp in milliseconds.
    """

    items: list[PlannedActivity] = Field(
        default_factory=lambda: [PlannedActivity(id=1)]
    )

    def _next_id(self) -> int:
        new_id = int(time.time() * 1000)
        existing = {a.id for a in self.items}
        while new_id in existing:
            new_id += 1
        return new_id

    def add(self) -> PlannedActivity:
        activity = PlannedActivity(id=self._next_id())
        self.items.append(activity)
        return activity

    def remove(self, activity_id: int) -> None:
        self.items = [a for a in self.items if a.id != activity_id]

    def update(self, activity_id: int, field: Literal["name", "time"], value: str) -> None:
        if field not in ("name", "time"):
            raise ValueError(f"Unknown activity field: {field}")
        for activity in self.items:
            if activity.id == activity_id:
                setattr(activity, field, value)

    def get(self, activity_id: int) -> Optional[PlannedActivity]:
        for activity in self.items:
            if activity.id == activity_id:
                return activity
        return None

    def filled(self) -> list[PlannedActivity]:
        """Return entries with at least one field set, in order."""
        return [a for a in self.items if not a.is_blank()]

    def reset(self) -> None:
        self.items = [PlannedActivity(id=1)]

    def __len__(self) -> int:
        return len(self.items)


class TripPlanForm(BaseModel):
    """Raw planner form state. Every field may still be empty."""

    destination: str = ""
    trip_type: str = ""
    start_date: DateType | None = None
    end_date: DateType | None = None
    travelers: str = DEFAULT_TRAVELERS
    budget: str = ""
    notes: str = ""

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date_fields(cls, v):
        """Parse date strings to date objects."""
        return parse_date(v)

    def missing_fields(self) -> list[str]:
        required = {
            "destination": self.destination.strip(),
            "trip_type": self.trip_type,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "budget": self.budget,
        }
        return [name for name, value in required.items() if not value]


class TripPlan(BaseModel):
    id: str | None = None
    user_id: str
    destination: str
    trip_type: TripType
    start_date: DateType
    end_date: DateType
    travelers: int = Field(default=2, ge=1)
    budget: BudgetBucket
    notes: str | None = None
    activities: list[PlannedActivity] = Field(default_factory=list)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date_fields(cls, v):
        """Parse date strings to date objects."""
        return parse_date(v)

    @property
    def budget_label(self) -> str:
        return BUDGET_LABELS[self.budget]

    def to_insert_payload(self) -> dict:
        return self.model_dump(mode="json", exclude={"id"})
