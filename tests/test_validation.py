from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from app.core.results import ActionResult, ErrorKind, format_validation_error
from app.schemas.booking import BookingCreate, CustomerDetails
from app.schemas.food_item import FoodItemUpdate
from app.schemas.hall import HallCreate
from app.utils.availability import conflicting_slots
from app.models.enums import TimeSlot


def _message(schema, payload):
    with pytest.raises(ValidationError) as exc:
        schema.model_validate(payload)
    return format_validation_error(exc.value)


def test_rule_messages_are_verbatim():
    message = _message(
        HallCreate,
        {"name": "Big Hall", "capacity": 20, "base_price": 5000, "images": ["https://x.io/a.png"]},
    )
    assert message == "Capacity must be at least 50"


def test_builtin_errors_carry_field_path():
    message = _message(HallCreate, {"name": "Big Hall"})

    assert "capacity: Field required" in message
    assert "; " in message


def test_customer_details_rules():
    message = _message(
        CustomerDetails,
        {"name": "A", "email": "not-an-email", "phone": "123", "address": "short"},
    )

    assert "Customer name must be at least 2 characters" in message
    assert "Phone number must be at least 10 characters" in message
    assert "Address must be at least 10 characters" in message
    assert message.count("email:") == 1


def test_nested_food_quantity_rule():
    payload = {
        "hall_id": 1,
        "event_date": (date.today() + timedelta(days=3)).isoformat(),
        "time_slot": "Morning",
        "guest_count": 100,
        "event_type": "Birthday",
        "selected_foods": [{"id": 1, "name": "Samosa", "quantity": 0, "price": 20}],
        "customer_details": {
            "name": "Asha Rao",
            "email": "asha.rao@gmail.com",
            "phone": "9876543210",
            "address": "12 MG Road, Bengaluru",
        },
    }

    assert _message(BookingCreate, payload) == "Quantity must be at least 1"


def test_guest_count_upper_bound():
    with pytest.raises(ValidationError) as exc:
        BookingCreate.model_validate({"guest_count": 2500})
    assert "Maximum 2000 guests" in format_validation_error(exc.value)


def test_partial_update_allows_empty_payload():
    assert FoodItemUpdate.model_validate({}).model_dump(exclude_unset=True) == {}


def test_conflicting_slots():
    assert set(conflicting_slots(TimeSlot.FULL_DAY)) == set(TimeSlot)
    assert set(conflicting_slots(TimeSlot.MORNING)) == {TimeSlot.MORNING, TimeSlot.FULL_DAY}
    assert set(conflicting_slots(TimeSlot.EVENING)) == {TimeSlot.EVENING, TimeSlot.FULL_DAY}


def test_envelope_shapes():
    assert ActionResult.ok([]).envelope() == {"success": True, "data": []}
    assert ActionResult.not_found("Hall not found").envelope() == {
        "success": False,
        "error": "Hall not found",
    }
    assert ActionResult.conflict("taken").kind == ErrorKind.CONFLICT


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_prices_are_rejected(value):
    message = _message(
        HallCreate,
        {"name": "Big Hall", "capacity": 100, "base_price": value, "images": ["https://x.io/a.png"]},
    )
    assert message == "base_price: Input should be a finite number"

    message = _message(FoodItemUpdate, {"price": value})
    assert message == "price: Input should be a finite number"


def test_non_finite_snapshot_price_is_rejected():
    payload = {
        "hall_id": 1,
        "event_date": (date.today() + timedelta(days=10)).isoformat(),
        "time_slot": "Evening",
        "guest_count": 100,
        "event_type": "Birthday",
        "selected_foods": [{"id": 1, "name": "Gulab Jamun", "quantity": 3, "price": float("nan")}],
        "selected_theme": {"id": 2, "name": "Royal Blue", "price": float("inf")},
        "customer_details": {
            "name": "Ravi Kumar",
            "email": "ravi.kumar@gmail.com",
            "phone": "9123456780",
            "address": "4 Park Street, Kolkata",
        },
    }

    message = _message(BookingCreate, payload)

    assert "selected_foods.0.price: Input should be a finite number" in message
    assert "selected_theme.price: Input should be a finite number" in message
