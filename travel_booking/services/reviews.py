"""Loading and posting reviews."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from travel_booking.errors import AuthenticationRequired, ValidationError
from travel_booking.models import Review, ReviewDraft, UserIdentity
from travel_booking.models.common import parse_rows

if TYPE_CHECKING:
    from travel_booking.storage import SupabaseStore


logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, store: SupabaseStore):
        self.store = store

    def list_reviews(self) -> list[Review]:
        """Return all reviews, newest first."""
        return parse_rows(Review, self.store.list_reviews(), "Failed to load reviews")

    def submit_review(
        self,
        user: UserIdentity | None,
        content: str,
        rating: int,
        destination_id: str | None,
    ) -> ReviewDraft:
        """
        Validate and persist a review for one destination.

        Args:
            user: Signed-in user, or None
            content: Review text
            rating: Star rating from 1 to 5
            destination_id: Destination the review is about

        Returns:
            The review as inserted

        Raises:
            AuthenticationRequired: If nobody is signed in
            ValidationError: If the text is blank, the rating is out of range
                or no destination was chosen
            DataStoreError: If the insert fails
        """
        if user is None:
            raise AuthenticationRequired("Please login to submit a review")
        if not content.strip():
            raise ValidationError("Please write a review")
        if not 1 <= rating <= 5:
            raise ValidationError("Rating must be between 1 and 5")
        if not destination_id:
            raise ValidationError("Choose a destination to review")

        draft = ReviewDraft(
            user_id=user.id,
            destination_id=destination_id,
            rating=rating,
            content=content.strip(),
        )
        self.store.insert_review(draft.model_dump(mode="json"))
        logger.info("Posted review for destination %s", destination_id)
        return draft
