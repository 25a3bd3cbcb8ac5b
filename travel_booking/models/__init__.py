from .destination import Destination, COUNTRIES, DESTINATION_TYPES
from .booking import Booking, BookingDestination, BookingStatus, MAX_TRAVELERS
from .review import Review, ReviewAuthor, ReviewDestination, ReviewDraft
from .trip_plan import (
    ActivityList,
    BudgetBucket,
    BUDGET_LABELS,
    PlannedActivity,
    TripPlan,
    TripPlanForm,
    TripType,
)
from .user import UserIdentity

__all__ = [
    "Destination",
    "COUNTRIES",
    "DESTINATION_TYPES",
    "Booking",
    "BookingDestination",
    "BookingStatus",
    "MAX_TRAVELERS",
    "Review",
    "ReviewAuthor",
    "ReviewDestination",
    "ReviewDraft",
    "ActivityList",
    "BudgetBucket",
    "BUDGET_LABELS",
    "PlannedActivity",
    "TripPlan",
    "TripPlanForm",
    "TripType",
    "UserIdentity",
]
