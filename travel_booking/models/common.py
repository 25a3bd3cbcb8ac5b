import logging
from datetime import date as DateType, datetime
from typing import Iterable, TypeVar

import pydantic

from travel_booking.errors import DataStoreError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def parse_date(v) -> DateType | None:
    """Parse various date formats to date object."""
    if v is None or v == "null" or v == "":
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, DateType):
        return v
    if isinstance(v, str):
        try:
            return datetime.strptime(v, "%Y-%m-%d").date()
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(v).date()
        except ValueError:
            pass
    return None


def parse_datetime(v) -> datetime | None:
    """Parse timestamps returned by the backend (ISO 8601, optional trailing Z)."""
    if v is None or v == "null" or v == "":
        return None
    if isinstance(v, datetime):
        return v
    if isinstance(v, DateType):
        return datetime(v.year, v.month, v.day)
    if isinstance(v, str):
        try:
            return datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            pass
    return None


def parse_rows(model: type[ModelT], rows: Iterable[dict], user_message: str) -> list[ModelT]:
    """Validate backend rows into models.

    Raises:
        DataStoreError: If any row does not fit the model
    """
    try:
        return [model.model_validate(row) for row in rows]
    except pydantic.ValidationError as e:
        logger.error("Rejected %s row from backend: %s", model.__name__, e)
        raise DataStoreError(user_message, operation=f"parse_{model.__name__}") from e
