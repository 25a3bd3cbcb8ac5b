"""Session context for the signed-in user.

An AuthSession is created once per browser session, restored from the
backend at app start, refreshed on sign-in and torn down on sign-out. Views
receive it as an argument instead of reading global state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from supabase import AuthError

from travel_booking.errors import TravelBookingError, ValidationError
from travel_booking.models import UserIdentity

if TYPE_CHECKING:
    from supabase import Client


logger = logging.getLogger(__name__)


def identity_from_user(user) -> UserIdentity | None:
    """Convert a backend auth user object into a UserIdentity."""
    if user is None:
        return None
    metadata = getattr(user, "user_metadata", None) or {}
    return UserIdentity(
        id=str(user.id),
        email=getattr(user, "email", None),
        display_name=metadata.get("display_name"),
    )


class AuthSession:
    """The current identity, or none, for one browser session."""

    def __init__(self, client: Client):
        self.client = client
        self.user: UserIdentity | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def restore(self) -> UserIdentity | None:
        """Pick up an existing backend session, if any."""
        try:
            session = self.client.auth.get_session()
        except (AuthError, httpx.HTTPError) as e:
            logger.warning("Could not restore session: %s", e)
            session = None
        self.user = identity_from_user(session.user) if session else None
        return self.user

    def sign_in(self, email: str, password: str) -> UserIdentity:
        if not email or not password:
            raise ValidationError("Please enter your email and password")
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except (AuthError, httpx.HTTPError) as e:
            logger.error("Sign in failed: %s", e)
            raise TravelBookingError("Sign in failed. Check your email and password.") from e

        self.user = identity_from_user(response.user)
        if self.user is None:
            raise TravelBookingError("Sign in failed. Check your email and password.")
        logger.info("User %s signed in", self.user.id)
        return self.user

    def sign_up(self, email: str, password: str, display_name: str = "") -> UserIdentity | None:
        """
        Register a new account.

        Returns:
            The new identity, or None when the backend requires email
            confirmation before a session is issued
        """
        if not email or not password:
            raise ValidationError("Please enter your email and password")
        credentials = {"email": email, "password": password}
        if display_name:
            credentials["options"] = {"data": {"display_name": display_name}}
        try:
            response = self.client.auth.sign_up(credentials)
        except (AuthError, httpx.HTTPError) as e:
            logger.error("Sign up failed: %s", e)
            raise TravelBookingError("Sign up failed") from e

        self.user = identity_from_user(response.user) if response.session else None
        return self.user

    def sign_out(self) -> None:
        try:
            self.client.auth.sign_out()
        except (AuthError, httpx.HTTPError) as e:
            # The local identity is cleared either way
            logger.warning("Sign out request failed: %s", e)
        self.user = None
