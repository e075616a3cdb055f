from sqlalchemy import Column, Integer, String, Boolean, Float, JSON

from app.db.session import Base
from app.models.mixins import TimestampMixin


class Theme(TimestampMixin, Base):
    __tablename__ = "themes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String)
    price = Column(Float, nullable=False)
    images = Column(JSON, nullable=False, default=list)
    is_available = Column(Boolean, nullable=False, default=True)
