from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from app.models.enums import TimeSlot
from app.schemas.validators import at_least, check_image_list, min_length, reject_null


class HallRules(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    @field_validator("name", check_fields=False)
    @classmethod
    def name_length(cls, v):
        return min_length(v, 3, "Name must be at least 3 characters")

    @field_validator("capacity", check_fields=False)
    @classmethod
    def capacity_minimum(cls, v):
        return at_least(v, 50, "Capacity must be at least 50")

    @field_validator("base_price", check_fields=False)
    @classmethod
    def price_minimum(cls, v):
        return at_least(v, 1000, "Price must be at least ₹1000")

    @field_validator("images", check_fields=False)
    @classmethod
    def image_urls(cls, v):
        return check_image_list(v)


class HallCreate(HallRules):
    name: str
    description: Optional[str] = None
    capacity: int
    base_price: float
    images: List[str]
    amenities: List[str] = []
    is_active: bool = True


class HallUpdate(HallRules):
    name: Optional[str] = None
    description: Optional[str] = None
    capacity: Optional[int] = None
    base_price: Optional[float] = None
    images: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def required_columns(cls, data):
        return reject_null(data, "name", "capacity", "base_price", "images", "amenities", "is_active")


class HallOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    capacity: int
    base_price: float
    images: List[str] = []
    amenities: List[str] = []
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BookedSlot(BaseModel):
    event_date: date
    time_slot: TimeSlot

    model_config = {"from_attributes": True}


class HallDetailOut(HallOut):
    bookings: List[BookedSlot] = []


class AvailabilityQuery(BaseModel):
    hall_id: int
    event_date: date
    time_slot: TimeSlot
