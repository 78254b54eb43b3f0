"""Pytest configuration and fixtures"""
import hashlib
import hmac
import json
import os
import time
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest
from supabase import AuthError

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")

from storefront.services.database import Database  # noqa: E402
from storefront.services.models import CheckoutSession  # noqa: E402
from storefront.services.payments import StripeGateway  # noqa: E402

WEBHOOK_SECRET = "whsec_test_secret"


class _Result:
    def __init__(self, data):
        self.data = data


class _FakeQuery:
    """Chainable stand-in for a PostgREST query; ``execute`` is awaited."""

    def __init__(self, store: "FakeSupabase", name: str):
        self.store = store
        self.name = name
        self._mode = "select"
        self._payload: Optional[Dict[str, Any]] = None
        self._filters: List = []
        self._order: Optional[tuple] = None

    def select(self, *_args, **_kwargs):
        self._mode = "select"
        return self

    def insert(self, data: Dict[str, Any]):
        self._mode = "insert"
        self._payload = data
        return self

    def update(self, data: Dict[str, Any]):
        self._mode = "update"
        self._payload = data
        return self

    def eq(self, field: str, value):
        self._filters.append(lambda row: row.get(field) == value)
        return self

    def in_(self, field: str, values):
        allowed = set(values)
        self._filters.append(lambda row: row.get(field) in allowed)
        return self

    def order(self, field: str, desc: bool = False):
        self._order = (field, desc)
        return self

    def _matches(self, row) -> bool:
        return all(f(row) for f in self._filters)

    async def execute(self):
        self.store.calls.append((self.name, self._mode))
        if self.store.fail_on.get((self.name, self._mode)):
            raise self.store.fail_on[(self.name, self._mode)]

        rows = self.store.tables.setdefault(self.name, [])
        if self._mode == "insert":
            row = self.store.new_row(self.name, self._payload)
            rows.append(row)
            return _Result([dict(row)])
        if self._mode == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(self._payload)
                    updated.append(dict(row))
            return _Result(updated)

        found = [dict(r) for r in rows if self._matches(r)]
        if self._order:
            field, desc = self._order
            found.sort(key=lambda r: r.get(field) or "", reverse=desc)
        return _Result(found)


class _RejectedToken(AuthError):
    def __init__(self, message: str):
        Exception.__init__(self, message)


class FakeAuth:
    """Supabase Auth stand-in: access tokens map to users, anything else is rejected."""

    def __init__(self):
        self.users: Dict[str, SimpleNamespace] = {}

    def issue(self, user_id: str, role: Optional[str] = None) -> str:
        token = f"jwt-{user_id}-{len(self.users) + 1}"
        app_metadata = {"provider": "email"}
        if role:
            app_metadata["role"] = role
        self.users[token] = SimpleNamespace(id=user_id, app_metadata=app_metadata)
        return token

    async def get_user(self, jwt: Optional[str] = None):
        user = self.users.get(jwt)
        if user is None:
            raise _RejectedToken("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=user)

    async def sign_out(self):
        return None


class FakeSupabase:
    """In-memory tables behind the subset of the Supabase API the repositories use."""

    def __init__(self):
        self.auth = FakeAuth()
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.fail_on: Dict[tuple, Exception] = {}
        self._counter = 0
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def table(self, name: str):
        return _FakeQuery(self, name)

    def new_row(self, name: str, data: Dict[str, Any]) -> Dict[str, Any]:
        self._counter += 1
        self._clock += timedelta(minutes=1)
        row = {"id": f"{name[:-1]}-{self._counter}", "created_at": self._clock.isoformat()}
        row.update(data)
        return row

    def rows(self, name: str) -> List[Dict[str, Any]]:
        return self.tables.setdefault(name, [])


@pytest.fixture
def supabase():
    """Fake Supabase seeded with two products, one user with a cart and one address"""
    client = FakeSupabase()
    client.tables["products"] = [
        {"id": "prod-1", "name": "Organic Apples", "price": 120, "offer_price": 100, "category": "Fruits"},
        {"id": "prod-2", "name": "Brown Bread", "price": 60, "offer_price": 45.5, "category": "Bakery"},
    ]
    client.tables["users"] = [
        {"id": "user-1", "name": "Test", "email": "test@example.com", "cart_items": {"prod-1": 2}},
    ]
    client.tables["addresses"] = [
        {"id": "addr-1", "user_id": "user-1", "first_name": "Test", "city": "Pune", "country": "IN"},
    ]
    return client


@pytest.fixture
def issue_token(supabase):
    """Issue an access token the fake Supabase Auth accepts"""
    return supabase.auth.issue


@pytest.fixture
def db(supabase):
    """Real Database facade over the fake client"""
    return Database(supabase)


class FakeGateway:
    """Checkout gateway double recording session requests"""

    currency = "usd"

    def __init__(self, fail: Optional[Exception] = None):
        self.sessions: List[Dict[str, Any]] = []
        self.fail = fail
        self.verifies_webhooks = False

    async def create_checkout_session(self, line_items, success_url, cancel_url, metadata):
        if self.fail:
            raise self.fail
        self.sessions.append(
            {
                "line_items": line_items,
                "success_url": success_url,
                "cancel_url": cancel_url,
                "metadata": metadata,
            }
        )
        session_id = f"cs_test_{len(self.sessions)}"
        return CheckoutSession(id=session_id, url=f"https://checkout.stripe.test/{session_id}")


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def stripe_gateway():
    """Real StripeGateway with a mocked API client and a known webhook secret"""
    return StripeGateway(secret_key="sk_test_123", webhook_secret=WEBHOOK_SECRET, client=Mock())


def sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp: Optional[int] = None) -> str:
    """Build a Stripe-Signature header for ``payload``."""
    timestamp = int(time.time()) if timestamp is None else timestamp
    signed = f"{timestamp}.{payload}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def make_event(event_type: str, metadata: Optional[Dict[str, Any]] = None) -> str:
    """Serialized Stripe event with the given metadata on its object."""
    return json.dumps(
        {
            "id": "evt_test_1",
            "object": "event",
            "type": event_type,
            "data": {"object": {"id": "obj_test_1", "metadata": metadata or {}}},
        }
    )


@pytest.fixture
def sign():
    return sign_payload


@pytest.fixture
def event_body():
    return make_event
