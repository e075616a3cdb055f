from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.redis import ViewCache
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.main import create_app
from app.models.user import User
from app.services import halls as hall_service

class RecordingCache(ViewCache):
    """ViewCache without redis that remembers every invalidated path."""

    def __init__(self):
        super().__init__(client=None)
        self.revalidated = []

    def revalidate_path(self, path: str):
        self.revalidated.append(path)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory) -> Session:
    """
    A fresh session per test against an in-memory database.
    """
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def client(session_factory, cache):
    app = create_app(settings=Settings(), session_factory=session_factory, cache=cache)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def customer(db: Session) -> User:
    user = User(name="Asha Rao", email="asha.rao@gmail.com", phone="9876543210")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_headers():
    return {"X-User-Id": "900", "X-User-Role": "admin"}


@pytest.fixture
def customer_headers(customer):
    return {"X-User-Id": str(customer.id), "X-User-Role": "user"}


@pytest.fixture
def event_date() -> date:
    return date.today() + timedelta(days=30)


@pytest.fixture
def hall_payload():
    return {
        "name": "Grand Ballroom",
        "description": "Spacious hall for 500+ guests",
        "capacity": 500,
        "base_price": 50000,
        "images": [
            "https://example.com/image1.jpg",
            "https://example.com/image2.jpg",
        ],
        "amenities": ["AC", "Parking", "Stage", "Sound System"],
    }


@pytest.fixture
def hall(db, cache, hall_payload) -> dict:
    result = hall_service.create_hall(db, cache, hall_payload)
    assert result.success, result.error
    return result.data


@pytest.fixture
def make_booking_payload():
    def _make(hall_id, event_date, time_slot="Morning", foods=None, theme=None, **extra):
        payload = {
            "hall_id": hall_id,
            "event_date": event_date.isoformat(),
            "time_slot": time_slot,
            "guest_count": 150,
            "event_type": "Wedding",
            "selected_foods": foods
            if foods is not None
            else [{"id": 1, "name": "Paneer Tikka", "quantity": 2, "price": 200}],
            "customer_details": {
                "name": "Asha Rao",
                "email": "asha.rao@gmail.com",
                "phone": "9876543210",
                "address": "12 MG Road, Bengaluru",
            },
        }
        if theme is not None:
            payload["selected_theme"] = theme
        payload.update(extra)
        return payload

    return _make
