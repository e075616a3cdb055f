from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.enums import ACTIVE_BOOKING_STATUSES, TimeSlot


def conflicting_slots(time_slot: TimeSlot) -> list[TimeSlot]:
    """Slots that cannot share a date with ``time_slot`` on the same hall."""
    if time_slot == TimeSlot.FULL_DAY:
        return list(TimeSlot)
    return [time_slot, TimeSlot.FULL_DAY]


def has_conflict(db: Session, hall_id: int, event_date, time_slot: TimeSlot) -> bool:
    conflict = db.query(Booking.id).filter(
        Booking.hall_id == hall_id,
        Booking.event_date == event_date,
        Booking.status.in_(ACTIVE_BOOKING_STATUSES),
        Booking.time_slot.in_(conflicting_slots(time_slot)),
    ).first()

    return conflict is not None
