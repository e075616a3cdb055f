from sqlalchemy import Column, Integer, String, Boolean, Float, Enum

from app.db.session import Base
from app.models.enums import FoodCategory
from app.models.mixins import TimestampMixin


class FoodItem(TimestampMixin, Base):
    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(
        Enum(FoodCategory, name="foodcategory", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    price = Column(Float, nullable=False)
    is_veg = Column(Boolean, nullable=False, default=True)
    description = Column(String)
    image = Column(String)
    is_available = Column(Boolean, nullable=False, default=True)
