from sqlalchemy import Column, Integer, String, Date, Float, ForeignKey, Enum, JSON, DateTime, Index
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.enums import BookingStatus, PaymentStatus, TimeSlot
from app.models.mixins import TimestampMixin, utcnow


def _values(enum_cls):
    return [m.value for m in enum_cls]


class Booking(TimestampMixin, Base):
    __tablename__ = "bookings"
    __table_args__ = (Index("ix_bookings_hall_date", "hall_id", "event_date"),)

    id = Column(Integer, primary_key=True, index=True)
    booking_number = Column(String, unique=True, index=True, nullable=False)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    hall_id = Column(Integer, ForeignKey("halls.id"), nullable=False, index=True)

    event_date = Column(Date, nullable=False)
    time_slot = Column(
        Enum(TimeSlot, name="timeslot", values_callable=_values), nullable=False
    )
    guest_count = Column(Integer, nullable=False)
    event_type = Column(String, nullable=False)

    # Snapshots taken at booking time; later catalog edits do not touch them
    selected_foods = Column(JSON, nullable=False, default=list)
    selected_theme = Column(JSON, nullable=True)
    customer_details = Column(JSON, nullable=False)

    # Frozen at creation
    total_amount = Column(Float, nullable=False)

    special_requests = Column(String, nullable=True)

    status = Column(
        Enum(BookingStatus, name="bookingstatus", values_callable=_values),
        nullable=False,
        default=BookingStatus.PENDING,
    )
    payment_status = Column(
        Enum(PaymentStatus, name="paymentstatus", values_callable=_values),
        nullable=False,
        default=PaymentStatus.PENDING,
    )
    payment_id = Column(String, nullable=True)

    user = relationship("User", back_populates="bookings")
    hall = relationship("Hall", back_populates="bookings")
    history = relationship(
        "BookingStatusEvent",
        back_populates="booking",
        order_by="BookingStatusEvent.id",
    )


class BookingStatusEvent(Base):
    """Append-only record of every status change on a booking."""

    __tablename__ = "booking_status_events"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    from_status = Column(String, nullable=True)
    to_status = Column(String, nullable=False)
    note = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    booking = relationship("Booking", back_populates="history")
