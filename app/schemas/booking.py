from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

from app.models.enums import BookingStatus, PaymentStatus, TimeSlot
from app.schemas.validators import at_least, at_most, max_length, min_length, rule_error


class SelectedFood(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: int
    name: str
    quantity: int
    price: float

    @field_validator("quantity")
    @classmethod
    def quantity_minimum(cls, v):
        return at_least(v, 1, "Quantity must be at least 1")

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, v):
        return at_least(v, 0, "Food price cannot be negative")


class SelectedTheme(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: int
    name: str
    price: float

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, v):
        return at_least(v, 0, "Theme price cannot be negative")


class CustomerDetails(BaseModel):
    name: str
    email: EmailStr
    phone: str
    address: str

    @field_validator("name")
    @classmethod
    def name_length(cls, v):
        return min_length(v, 2, "Customer name must be at least 2 characters")

    @field_validator("phone")
    @classmethod
    def phone_length(cls, v):
        min_length(v, 10, "Phone number must be at least 10 characters")
        return max_length(v, 15, "Phone number must be at most 15 characters")

    @field_validator("address")
    @classmethod
    def address_length(cls, v):
        return min_length(v, 10, "Address must be at least 10 characters")


class BookingCreate(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    hall_id: int
    event_date: date
    time_slot: TimeSlot
    guest_count: int
    event_type: str
    selected_foods: List[SelectedFood]
    selected_theme: Optional[SelectedTheme] = None
    customer_details: CustomerDetails
    special_requests: Optional[str] = None

    @field_validator("hall_id")
    @classmethod
    def hall_selected(cls, v):
        return at_least(v, 1, "Hall selection required")

    @field_validator("event_date")
    @classmethod
    def future_date(cls, v):
        if v <= date.today():
            raise rule_error("Event date must be in future")
        return v

    @field_validator("guest_count")
    @classmethod
    def guest_range(cls, v):
        at_least(v, 10, "Minimum 10 guests")
        return at_most(v, 2000, "Maximum 2000 guests")

    @field_validator("event_type")
    @classmethod
    def event_type_present(cls, v):
        return min_length(v, 2, "Event type required")

    @field_validator("selected_foods")
    @classmethod
    def foods_present(cls, v):
        return min_length(v, 1, "Select at least one food item")


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class PaymentStatusUpdate(BaseModel):
    payment_status: PaymentStatus
    payment_id: Optional[str] = None


class CancelRequest(BaseModel):
    reason: Optional[str] = None


class BookingOut(BaseModel):
    id: int
    booking_number: str
    user_id: int
    hall_id: int
    event_date: date
    time_slot: TimeSlot
    guest_count: int
    event_type: str
    selected_foods: List[SelectedFood]
    selected_theme: Optional[SelectedTheme] = None
    total_amount: float
    customer_details: dict
    special_requests: Optional[str] = None
    status: BookingStatus
    payment_status: PaymentStatus
    payment_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BookingStatusEventOut(BaseModel):
    from_status: Optional[str] = None
    to_status: str
    note: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class BookingStats(BaseModel):
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    completed_bookings: int
    cancelled_bookings: int
    total_revenue: float
