from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from app.schemas.validators import at_least, check_image_list, min_length, reject_null


class ThemeRules(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    @field_validator("name", check_fields=False)
    @classmethod
    def name_length(cls, v):
        return min_length(v, 3, "Name must be at least 3 characters")

    @field_validator("price", check_fields=False)
    @classmethod
    def price_minimum(cls, v):
        return at_least(v, 1000, "Price must be at least ₹1000")

    @field_validator("images", check_fields=False)
    @classmethod
    def image_urls(cls, v):
        return check_image_list(v)


class ThemeCreate(ThemeRules):
    name: str
    description: Optional[str] = None
    price: float
    images: List[str]
    is_available: bool = True


class ThemeUpdate(ThemeRules):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    images: Optional[List[str]] = None
    is_available: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def required_columns(cls, data):
        return reject_null(data, "name", "price", "images", "is_available")


class ThemeOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    images: List[str] = []
    is_available: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
