from sqlalchemy import Column, Integer, String, Boolean, Float, JSON
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.mixins import TimestampMixin


class Hall(TimestampMixin, Base):
    __tablename__ = "halls"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    description = Column(String)
    capacity = Column(Integer, nullable=False)
    base_price = Column(Float, nullable=False)

    images = Column(JSON, nullable=False, default=list)
    amenities = Column(JSON, nullable=False, default=list)

    is_active = Column(Boolean, nullable=False, default=True)
    # Soft delete keeps historical bookings pointing at a real row
    deleted = Column(Boolean, nullable=False, default=False)

    bookings = relationship("Booking", back_populates="hall")
