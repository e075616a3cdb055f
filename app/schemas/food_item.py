from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from app.models.enums import FoodCategory
from app.schemas.validators import at_least, check_url, min_length, reject_null


class FoodItemRules(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    @field_validator("name", check_fields=False)
    @classmethod
    def name_length(cls, v):
        return min_length(v, 2, "Name must be at least 2 characters")

    @field_validator("price", check_fields=False)
    @classmethod
    def price_positive(cls, v):
        return at_least(v, 1, "Price must be positive")

    @field_validator("image", check_fields=False)
    @classmethod
    def image_url(cls, v):
        return check_url(v)


class FoodItemCreate(FoodItemRules):
    name: str
    category: FoodCategory
    price: float
    is_veg: bool = True
    description: Optional[str] = None
    image: Optional[str] = None
    is_available: bool = True


class FoodItemUpdate(FoodItemRules):
    name: Optional[str] = None
    category: Optional[FoodCategory] = None
    price: Optional[float] = None
    is_veg: Optional[bool] = None
    description: Optional[str] = None
    image: Optional[str] = None
    is_available: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def required_columns(cls, data):
        return reject_null(data, "name", "category", "price", "is_veg", "is_available")


class FoodItemOut(BaseModel):
    id: int
    name: str
    category: FoodCategory
    price: float
    is_veg: bool
    description: Optional[str] = None
    image: Optional[str] = None
    is_available: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
