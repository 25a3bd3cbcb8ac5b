"""Trip plan submission."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pydantic

from travel_booking.errors import AuthenticationRequired, ValidationError
from travel_booking.models import ActivityList, TripPlan, TripPlanForm, UserIdentity
from travel_booking.models.common import parse_rows
from travel_booking.services.pricing import clamp_travelers

if TYPE_CHECKING:
    from travel_booking.storage import SupabaseStore


logger = logging.getLogger(__name__)


class TripPlanService:
    """Saves planner submissions as trip plans."""

    def __init__(self, store: SupabaseStore):
        self.store = store

    def build_plan(
        self, user: UserIdentity, form: TripPlanForm, activities: ActivityList
    ) -> TripPlan:
        """Build the row to insert. Blank activities are dropped."""
        try:
            return TripPlan(
                user_id=user.id,
                destination=form.destination.strip(),
                trip_type=form.trip_type,
                start_date=form.start_date,
                end_date=form.end_date,
                travelers=clamp_travelers(form.travelers),
                budget=form.budget,
                notes=form.notes or None,
                activities=[a.model_copy() for a in activities.filled()],
            )
        except pydantic.ValidationError as e:
            logger.info("Rejected trip plan form: %s", e)
            raise ValidationError("Please fill in all required fields") from e

    def create_plan(
        self, user: UserIdentity | None, form: TripPlanForm, activities: ActivityList
    ) -> TripPlan:
        """
        Validate the planner form and insert one trip plan.

        Raises:
            AuthenticationRequired: If nobody is signed in
            ValidationError: If a required field is empty
            DataStoreError: If the insert fails
        """
        if user is None:
            raise AuthenticationRequired("Please login to create a trip plan")

        if form.missing_fields():
            raise ValidationError("Please fill in all required fields")

        plan = self.build_plan(user, form, activities)
        row = self.store.insert_trip_plan(plan.to_insert_payload())
        logger.info("Saved trip plan to %s with %d activities", plan.destination, len(plan.activities))
        return TripPlan.model_validate(row)

    def list_plans(self, user: UserIdentity) -> list[TripPlan]:
        """Return the user's saved trip plans, earliest first."""
        return parse_rows(TripPlan, self.store.list_trip_plans(user.id), "Failed to load trip plans")
