"""Exceptions raised by services and the data store.

Every error carries a ``user_message`` that the views show as-is.
"""


class TravelBookingError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(self, user_message: str):
        super().__init__(user_message)
        self.user_message = user_message


class ValidationError(TravelBookingError):
    """Form input was rejected before any request was made."""


class AuthenticationRequired(ValidationError):
    """The action needs a signed-in user."""


class DataStoreError(TravelBookingError):
    """A request to the hosted data store failed."""

    def __init__(self, user_message: str, operation: str = ""):
        super().__init__(user_message)
        self.operation = operation


class ConfigurationError(TravelBookingError):
    """Backend credentials are missing or unusable."""
