import re
from datetime import date, timedelta

import pytest

from app.core.results import ErrorKind
from app.models.user import User
from app.services import bookings as booking_service
from app.services import halls as hall_service


@pytest.fixture
def book(db, cache, customer, hall, event_date, make_booking_payload):
    def _book(time_slot="Morning", on=None, user_id=None, **kwargs):
        payload = make_booking_payload(hall["id"], on or event_date, time_slot, **kwargs)
        return booking_service.create_booking(db, cache, user_id or customer.id, payload)

    return _book


# ---------------------------------------------------------------------
# CREATE
# ---------------------------------------------------------------------
def test_total_amount_includes_hall_food_and_theme(book):
    """
    Hall 50000 + 2 x Paneer 200 + theme 3000.
    """
    result = book(theme={"id": 1, "name": "Floral Elegance", "price": 3000})

    assert result.success, result.error
    assert result.data["total_amount"] == 53400


def test_total_amount_without_theme(book):
    result = book(
        foods=[
            {"id": 1, "name": "Paneer Tikka", "quantity": 3, "price": 200},
            {"id": 2, "name": "Gulab Jamun", "quantity": 150, "price": 40},
        ]
    )

    assert result.data["total_amount"] == 50000 + 600 + 6000
    assert result.data["selected_theme"] is None


def test_new_booking_is_pending_with_projections(book, customer, hall):
    result = book()
    data = result.data

    assert data["status"] == "PENDING"
    assert data["payment_status"] == "PENDING"
    assert re.fullmatch(r"BK\d{8}\d{4}", data["booking_number"])
    assert data["booking_number"].startswith(f"BK{date.today():%Y%m%d}")
    assert data["hall"]["id"] == hall["id"]
    assert data["user"] == {"id": customer.id, "name": "Asha Rao", "email": "asha.rao@gmail.com"}


def test_create_booking_invalidates_booking_views(book, cache):
    cache.revalidated.clear()

    book()

    assert cache.revalidated == ["/my-bookings", "/admin/bookings"]


def test_full_day_blocks_morning_on_same_date(book):
    assert book("Full Day").success

    second = book("Morning")

    assert second.success is False
    assert second.kind == ErrorKind.CONFLICT
    assert second.error == "Hall is not available for selected date and time"


@pytest.mark.parametrize(
    "first, second, allowed",
    [
        ("Morning", "Evening", True),
        ("Evening", "Morning", True),
        ("Morning", "Morning", False),
        ("Evening", "Full Day", False),
        ("Full Day", "Evening", False),
        ("Full Day", "Full Day", False),
    ],
)
def test_slot_overlap_rule(book, first, second, allowed):
    assert book(first).success

    assert book(second).success is allowed


def test_other_dates_and_halls_are_independent(db, cache, book, hall_payload, event_date, customer, make_booking_payload):
    assert book("Full Day").success
    assert book("Full Day", on=event_date + timedelta(days=1)).success

    other_hall = hall_service.create_hall(db, cache, {**hall_payload, "name": "Garden Lawn"}).data
    other = booking_service.create_booking(
        db, cache, customer.id, make_booking_payload(other_hall["id"], event_date, "Full Day")
    )
    assert other.success


def test_cancelled_booking_frees_the_slot(db, cache, book):
    first = book("Full Day").data
    booking_service.cancel_booking(db, cache, first["id"])

    assert book("Morning").success


def test_completed_booking_frees_the_slot(db, cache, book):
    first = book("Evening").data
    booking_service.update_booking_status(db, cache, first["id"], "COMPLETED")

    assert book("Evening").success


def test_booking_unknown_hall(db, cache, customer, event_date, make_booking_payload):
    result = booking_service.create_booking(
        db, cache, customer.id, make_booking_payload(999, event_date)
    )

    assert result.kind == ErrorKind.NOT_FOUND
    assert result.error == "Hall not found"


def test_booking_inactive_hall(db, cache, hall, book):
    hall_service.toggle_hall_status(db, cache, hall["id"])

    result = book()

    assert result.kind == ErrorKind.CONFLICT


def test_booking_unknown_user(book):
    result = book(user_id=12345)

    assert result.kind == ErrorKind.NOT_FOUND
    assert result.error == "User not found"


def test_booking_in_the_past_rejected(book):
    result = book(on=date.today())

    assert result.success is False
    assert result.error == "Event date must be in future"


def test_booking_requires_food_and_guests(book):
    result = book(foods=[], guest_count=5)

    assert result.kind == ErrorKind.VALIDATION
    assert "Select at least one food item" in result.error
    assert "Minimum 10 guests" in result.error


def test_booking_number_collision_is_retried(book, monkeypatch):
    numbers = iter([1234, 1234, 5678])
    monkeypatch.setattr(booking_service.random, "randint", lambda a, b: next(numbers))

    first = book("Morning").data
    second = book("Evening").data

    assert first["booking_number"].endswith("1234")
    assert second["booking_number"].endswith("5678")


def test_booking_number_exhaustion(book, monkeypatch):
    monkeypatch.setattr(booking_service.random, "randint", lambda a, b: 42)

    assert book("Morning").success
    result = book("Evening")

    assert result.kind == ErrorKind.CONFLICT


# ---------------------------------------------------------------------
# READS
# ---------------------------------------------------------------------
def test_my_bookings_newest_first_and_scoped_to_user(db, cache, book, customer, event_date):
    other = User(name="Ravi Kumar", email="ravi.kumar@gmail.com")
    db.add(other)
    db.commit()

    first = book("Morning").data
    second = book("Evening").data
    book("Full Day", on=event_date + timedelta(days=3), user_id=other.id)

    result = booking_service.get_my_bookings(db, customer.id)

    assert [b["id"] for b in result.data] == [second["id"], first["id"]]
    assert set(result.data[0]["hall"]) == {"name", "images"}


def test_get_booking_by_id(db, book):
    created = book().data

    result = booking_service.get_booking_by_id(db, created["id"])

    assert result.data["booking_number"] == created["booking_number"]
    assert result.data["user"] == {"name": "Asha Rao", "email": "asha.rao@gmail.com", "phone": "9876543210"}
    assert result.data["hall"]["base_price"] == 50000

    assert booking_service.get_booking_by_id(db, 999).error == "Booking not found"


def test_get_all_bookings(db, book):
    book("Morning")
    book("Evening")

    result = booking_service.get_all_bookings(db)

    assert len(result.data) == 2
    assert result.data[0]["hall"] == {"name": "Grand Ballroom"}
    assert result.data[0]["user"] == {"name": "Asha Rao", "email": "asha.rao@gmail.com"}


# ---------------------------------------------------------------------
# STATUS / PAYMENT / CANCEL
# ---------------------------------------------------------------------
def test_update_booking_status(db, cache, book):
    booking = book().data

    result = booking_service.update_booking_status(db, cache, booking["id"], "CONFIRMED")

    assert result.data["status"] == "CONFIRMED"


def test_update_booking_status_rejects_unknown_value(db, cache, book):
    booking = book().data

    result = booking_service.update_booking_status(db, cache, booking["id"], "ARCHIVED")

    assert result.kind == ErrorKind.VALIDATION


@pytest.mark.parametrize("prior", ["PENDING", "COMPLETED", "CANCELLED"])
def test_paid_always_confirms(db, cache, book, prior):
    booking = book().data
    booking_service.update_booking_status(db, cache, booking["id"], prior)

    result = booking_service.update_payment_status(
        db, cache, booking["id"], "PAID", payment_id="pay_123"
    )

    assert result.data["payment_status"] == "PAID"
    assert result.data["status"] == "CONFIRMED"
    assert result.data["payment_id"] == "pay_123"


def test_partial_payment_keeps_status(db, cache, book):
    booking = book().data

    result = booking_service.update_payment_status(db, cache, booking["id"], "PARTIAL")

    assert result.data["status"] == "PENDING"
    assert result.data["payment_id"] is None


def test_payment_update_for_missing_booking(db, cache):
    result = booking_service.update_payment_status(db, cache, 999, "PAID")

    assert result.kind == ErrorKind.NOT_FOUND


def test_cancel_with_reason_overwrites_special_requests(db, cache, book):
    booking = book(special_requests="Extra chairs").data

    result = booking_service.cancel_booking(db, cache, booking["id"], reason="Date changed")

    assert result.data["status"] == "CANCELLED"
    assert result.data["special_requests"] == "Date changed (Cancellation reason)"


def test_cancel_without_reason(db, cache, book):
    booking = book().data

    result = booking_service.cancel_booking(db, cache, booking["id"])

    assert result.data["special_requests"] == "Cancelled by user"


def test_cancel_someone_elses_booking(db, cache, book, customer):
    booking = book().data

    result = booking_service.cancel_booking(db, cache, booking["id"], user_id=customer.id + 1)

    assert result.kind == ErrorKind.NOT_FOUND


def test_status_history_is_append_only(db, cache, book):
    booking = book().data
    booking_service.update_payment_status(db, cache, booking["id"], "PAID")
    booking_service.cancel_booking(db, cache, booking["id"], reason="Venue flooded")

    history = booking_service.get_booking_history(db, booking["id"]).data

    assert [(e["from_status"], e["to_status"]) for e in history] == [
        (None, "PENDING"),
        ("PENDING", "CONFIRMED"),
        ("CONFIRMED", "CANCELLED"),
    ]
    assert history[-1]["note"] == "Venue flooded"


# ---------------------------------------------------------------------
# STATISTICS
# ---------------------------------------------------------------------
def test_booking_stats(db, cache, book, event_date):
    paid = book("Morning").data
    book("Evening")
    cancelled = book("Full Day", on=event_date + timedelta(days=1)).data

    booking_service.update_payment_status(db, cache, paid["id"], "PAID")
    booking_service.cancel_booking(db, cache, cancelled["id"])

    stats = booking_service.get_booking_stats(db).data

    assert stats == {
        "total_bookings": 3,
        "pending_bookings": 1,
        "confirmed_bookings": 1,
        "completed_bookings": 0,
        "cancelled_bookings": 1,
        "total_revenue": paid["total_amount"],
    }


def test_booking_stats_empty(db):
    stats = booking_service.get_booking_stats(db).data

    assert stats["total_bookings"] == 0
    assert stats["total_revenue"] == 0


def test_nan_food_price_is_a_validation_error(db, book):
    result = book(foods=[{"id": 1, "name": "Paneer Tikka", "quantity": 2, "price": float("nan")}])

    assert result.kind == ErrorKind.VALIDATION
    assert result.error == "selected_foods.0.price: Input should be a finite number"
    assert booking_service.get_all_bookings(db).data == []
