"""Shared fixtures: in-memory stand-ins for the hosted store and auth API."""

from datetime import date
from types import SimpleNamespace

import pytest

from travel_booking.errors import DataStoreError
from travel_booking.models import Destination, UserIdentity


DESTINATION_ROWS = [
    {"id": "d1", "name": "Paris", "country": "France", "price": 899.0, "type": "City",
     "rating": 4.8, "review_count": 120, "trending": True},
    {"id": "d2", "name": "Nice", "country": "France", "price": 1299.0, "type": "Beach",
     "rating": 4.5, "review_count": 40, "trending": False},
    {"id": "d3", "name": "Kyoto", "country": "Japan", "price": 1499.0, "type": "Cultural",
     "rating": 4.9, "review_count": 210, "trending": True},
    {"id": "d4", "name": "Santorini", "country": "Greece", "price": 1800.0, "type": "Beach",
     "rating": 4.7, "review_count": 95, "trending": False},
    {"id": "d5", "name": "Machu Picchu", "country": "Peru", "price": 999.99, "type": "Adventure",
     "rating": 4.9, "review_count": 80, "trending": False},
    {"id": "d6", "name": "Lyon", "country": "France", "price": 1000.0, "type": "City",
     "rating": 4.2, "review_count": 15, "trending": False},
]


class FakeStore:
    """Records inserts and serves canned rows with the SupabaseStore interface."""

    def __init__(self, destinations=None, bookings=None, reviews=None, trip_plans=None):
        self.destinations = list(destinations if destinations is not None else DESTINATION_ROWS)
        self.bookings = list(bookings or [])
        self.reviews = list(reviews or [])
        self.trip_plans = list(trip_plans or [])
        self.inserted: dict[str, list[dict]] = {"bookings": [], "trip_plans": [], "reviews": []}
        self.fail_with: str | None = None

    def _check(self, operation: str):
        if self.fail_with:
            raise DataStoreError(self.fail_with, operation=operation)

    def list_destinations(self, limit=None):
        self._check("list_destinations")
        rows = sorted(self.destinations, key=lambda r: not r.get("trending", False))
        return rows[:limit] if limit is not None else rows

    def list_bookings(self, user_id=None):
        self._check("list_bookings")
        rows = [b for b in self.bookings if user_id is None or b["user_id"] == user_id]
        return sorted(rows, key=lambda r: r["start_date"])

    def list_reviews(self):
        self._check("list_reviews")
        return sorted(self.reviews, key=lambda r: r["created_at"], reverse=True)

    def list_trip_plans(self, user_id):
        self._check("list_trip_plans")
        return [p for p in self.trip_plans if p["user_id"] == user_id]

    def _insert(self, table, payload):
        self._check(f"insert_{table}")
        row = {"id": f"{table}-{len(self.inserted[table]) + 1}", **payload}
        self.inserted[table].append(payload)
        return row

    def insert_booking(self, payload):
        return self._insert("bookings", payload)

    def insert_trip_plan(self, payload):
        return self._insert("trip_plans", payload)

    def insert_review(self, payload):
        return self._insert("reviews", payload)

    @property
    def insert_count(self) -> int:
        return sum(len(rows) for rows in self.inserted.values())


class FakeQuery:
    """Chainable query builder that records the calls made on it."""

    def __init__(self, table, data=None, error=None):
        self.table = table
        self.data = data
        self.error = error
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._record("order", *args, **kwargs)

    def limit(self, *args, **kwargs):
        return self._record("limit", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    def insert(self, *args, **kwargs):
        return self._record("insert", *args, **kwargs)

    def execute(self):
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=self.data)


class FakeClient:
    """Minimal backend client exposing ``table()`` and ``auth``."""

    def __init__(self, data=None, error=None, auth=None):
        self.data = data
        self.error = error
        self.queries: list[FakeQuery] = []
        self.auth = auth

    def table(self, name):
        query = FakeQuery(name, data=self.data, error=self.error)
        self.queries.append(query)
        return query


def make_auth_user(user_id="user-1", email="ana@example.com", display_name=None):
    metadata = {"display_name": display_name} if display_name else {}
    return SimpleNamespace(id=user_id, email=email, user_metadata=metadata)


class FakeAuthApi:
    def __init__(self, session_user=None, error=None, confirm_email=False):
        self.session_user = session_user
        self.error = error
        self.confirm_email = confirm_email
        self.signed_out = False
        self.last_credentials = None

    def _maybe_fail(self):
        if self.error is not None:
            raise self.error

    def get_session(self):
        self._maybe_fail()
        if self.session_user is None:
            return None
        return SimpleNamespace(user=self.session_user)

    def sign_in_with_password(self, credentials):
        self._maybe_fail()
        self.last_credentials = credentials
        self.session_user = make_auth_user(email=credentials["email"])
        return SimpleNamespace(user=self.session_user, session=SimpleNamespace())

    def sign_up(self, credentials):
        self._maybe_fail()
        self.last_credentials = credentials
        display_name = credentials.get("options", {}).get("data", {}).get("display_name")
        user = make_auth_user(user_id="user-new", email=credentials["email"], display_name=display_name)
        session = None if self.confirm_email else SimpleNamespace()
        return SimpleNamespace(user=user, session=session)

    def sign_out(self):
        self._maybe_fail()
        self.signed_out = True
        self.session_user = None


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def user():
    return UserIdentity(id="user-1", email="ana@example.com", display_name="Ana")


@pytest.fixture
def destinations():
    return [Destination.model_validate(row) for row in DESTINATION_ROWS]


@pytest.fixture
def paris(destinations):
    return destinations[0]


@pytest.fixture
def today():
    return date(2025, 6, 15)


@pytest.fixture
def make_store():
    return FakeStore


@pytest.fixture
def make_client():
    return FakeClient


@pytest.fixture
def make_auth_api():
    return FakeAuthApi


@pytest.fixture
def auth_user():
    return make_auth_user
