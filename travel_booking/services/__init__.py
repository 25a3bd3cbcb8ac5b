from .auth import AuthSession
from .bookings import BookingService
from .catalog import load_destinations, load_featured_destinations
from .reviews import ReviewService
from .trip_planner import TripPlanService

__all__ = [
    "AuthSession",
    "BookingService",
    "load_destinations",
    "load_featured_destinations",
    "ReviewService",
    "TripPlanService",
]
