import random
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.core.logging_config import get_logger
from app.core.redis import ViewCache
from app.core.results import ActionResult, action
from app.models.booking import Booking, BookingStatusEvent
from app.models.enums import BookingStatus, PaymentStatus
from app.models.hall import Hall
from app.models.user import User
from app.schemas.booking import (
    BookingCreate,
    BookingOut,
    BookingStats,
    BookingStatusEventOut,
    BookingStatusUpdate,
    PaymentStatusUpdate,
)
from app.schemas.hall import HallOut
from app.utils.availability import has_conflict
from app.utils.pricing import calculate_total_amount

logger = get_logger()

BOOKING_VIEWS = ("/my-bookings", "/admin/bookings")
BOOKING_NUMBER_ATTEMPTS = 10


# ---------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------
def generate_booking_number(today: date | None = None) -> str:
    today = today or date.today()
    return f"BK{today:%Y%m%d}{random.randint(0, 9999):04d}"


def _allocate_booking_number(db: Session) -> str | None:
    # The unique index on booking_number still guards concurrent inserts
    for _ in range(BOOKING_NUMBER_ATTEMPTS):
        candidate = generate_booking_number()
        taken = db.query(Booking.id).filter(Booking.booking_number == candidate).first()
        if not taken:
            return candidate
    return None


def _record_status(db: Session, booking: Booking, from_status, to_status, note=None):
    db.add(
        BookingStatusEvent(
            booking_id=booking.id,
            from_status=from_status.value if from_status else None,
            to_status=to_status.value,
            note=note,
        )
    )


def _project(obj, *fields) -> dict | None:
    if obj is None:
        return None
    return {f: getattr(obj, f) for f in fields}


def _booking_out(booking: Booking, hall: dict | None = None, user: dict | None = None) -> dict:
    data = BookingOut.model_validate(booking).model_dump(mode="json")
    if hall is not None:
        data["hall"] = hall
    if user is not None:
        data["user"] = user
    return data


def _newest_first(query):
    return query.order_by(Booking.created_at.desc(), Booking.id.desc())


# ---------------------------------------------------------------------
# CREATE BOOKING
# ---------------------------------------------------------------------
@action("Failed to create booking")
def create_booking(db: Session, cache: ViewCache, user_id: int, payload: dict) -> ActionResult:
    data = BookingCreate.model_validate(payload)

    user = db.get(User, user_id)
    if not user:
        return ActionResult.not_found("User not found")

    # Lock the hall row so the availability check and insert share a transaction
    hall = (
        db.query(Hall)
        .filter(Hall.id == data.hall_id, Hall.deleted == False)
        .with_for_update()
        .first()
    )
    if not hall:
        db.rollback()
        return ActionResult.not_found("Hall not found")

    if not hall.is_active:
        db.rollback()
        return ActionResult.conflict("Hall is not accepting bookings")

    # ---- DOUBLE BOOKING CHECK ----
    if has_conflict(db, hall.id, data.event_date, data.time_slot):
        db.rollback()
        return ActionResult.conflict("Hall is not available for selected date and time")

    # ---- PRICE ----
    total_amount = calculate_total_amount(
        hall.base_price, data.selected_foods, data.selected_theme
    )

    booking_number = _allocate_booking_number(db)
    if not booking_number:
        db.rollback()
        return ActionResult.conflict("Could not allocate a booking number, please retry")

    booking = Booking(
        booking_number=booking_number,
        user_id=user.id,
        hall_id=hall.id,
        event_date=data.event_date,
        time_slot=data.time_slot,
        guest_count=data.guest_count,
        event_type=data.event_type,
        selected_foods=[f.model_dump() for f in data.selected_foods],
        selected_theme=data.selected_theme.model_dump() if data.selected_theme else None,
        total_amount=total_amount,
        customer_details=data.customer_details.model_dump(),
        special_requests=data.special_requests,
        status=BookingStatus.PENDING,
        payment_status=PaymentStatus.PENDING,
    )

    db.add(booking)
    db.flush()
    _record_status(db, booking, None, BookingStatus.PENDING, "Booking created")
    db.commit()
    db.refresh(booking)

    logger.bind(log_type="booking").info(
        f"Booking Created | number={booking.booking_number} | user={user.email} "
        f"| hall={hall.id} | total={total_amount}"
    )
    cache.revalidate(*BOOKING_VIEWS)

    return ActionResult.ok(
        _booking_out(
            booking,
            hall=HallOut.model_validate(hall).model_dump(mode="json"),
            user=_project(user, "id", "name", "email"),
        )
    )


# ---------------------------------------------------------------------
# READS
# ---------------------------------------------------------------------
@action("Failed to fetch bookings")
def get_my_bookings(db: Session, user_id: int) -> ActionResult:
    bookings = _newest_first(
        db.query(Booking)
        .options(joinedload(Booking.hall))
        .filter(Booking.user_id == user_id)
    ).all()

    return ActionResult.ok(
        [_booking_out(b, hall=_project(b.hall, "name", "images")) for b in bookings]
    )


@action("Failed to fetch booking")
def get_booking_by_id(db: Session, booking_id: int) -> ActionResult:
    booking = (
        db.query(Booking)
        .options(joinedload(Booking.hall), joinedload(Booking.user))
        .filter(Booking.id == booking_id)
        .first()
    )

    if not booking:
        return ActionResult.not_found("Booking not found")

    return ActionResult.ok(
        _booking_out(
            booking,
            hall=HallOut.model_validate(booking.hall).model_dump(mode="json"),
            user=_project(booking.user, "name", "email", "phone"),
        )
    )


@action("Failed to fetch bookings")
def get_all_bookings(db: Session) -> ActionResult:
    bookings = _newest_first(
        db.query(Booking).options(joinedload(Booking.hall), joinedload(Booking.user))
    ).all()

    return ActionResult.ok(
        [
            _booking_out(
                b,
                hall=_project(b.hall, "name"),
                user=_project(b.user, "name", "email"),
            )
            for b in bookings
        ]
    )


@action("Failed to fetch booking history")
def get_booking_history(db: Session, booking_id: int) -> ActionResult:
    if not db.get(Booking, booking_id):
        return ActionResult.not_found("Booking not found")

    events = (
        db.query(BookingStatusEvent)
        .filter(BookingStatusEvent.booking_id == booking_id)
        .order_by(BookingStatusEvent.id)
        .all()
    )
    return ActionResult.ok(
        [BookingStatusEventOut.model_validate(e).model_dump(mode="json") for e in events]
    )


# ---------------------------------------------------------------------
# ADMIN MUTATIONS
# ---------------------------------------------------------------------
@action("Failed to update booking status")
def update_booking_status(db: Session, cache: ViewCache, booking_id: int, status) -> ActionResult:
    data = BookingStatusUpdate.model_validate({"status": status})

    booking = db.get(Booking, booking_id)
    if not booking:
        return ActionResult.not_found("Booking not found")

    previous = booking.status
    booking.status = data.status
    if previous != data.status:
        _record_status(db, booking, previous, data.status, "Status updated by admin")

    db.commit()
    db.refresh(booking)

    logger.bind(log_type="admin").info(
        f"Booking status updated | number={booking.booking_number} | {previous.value} -> {data.status.value}"
    )
    cache.revalidate(*BOOKING_VIEWS)

    return ActionResult.ok(_booking_out(booking))


@action("Failed to update payment status")
def update_payment_status(
    db: Session, cache: ViewCache, booking_id: int, payment_status, payment_id: str | None = None
) -> ActionResult:
    data = PaymentStatusUpdate.model_validate(
        {"payment_status": payment_status, "payment_id": payment_id}
    )

    booking = db.get(Booking, booking_id)
    if not booking:
        return ActionResult.not_found("Booking not found")

    booking.payment_status = data.payment_status
    if data.payment_id is not None:
        booking.payment_id = data.payment_id

    # A paid booking is always confirmed
    if data.payment_status == PaymentStatus.PAID and booking.status != BookingStatus.CONFIRMED:
        _record_status(db, booking, booking.status, BookingStatus.CONFIRMED, "Payment received")
        booking.status = BookingStatus.CONFIRMED

    db.commit()
    db.refresh(booking)

    logger.bind(log_type="payment").info(
        f"Payment status updated | number={booking.booking_number} "
        f"| payment={data.payment_status.value} | payment_id={booking.payment_id}"
    )
    cache.revalidate(*BOOKING_VIEWS)

    return ActionResult.ok(_booking_out(booking))


@action("Failed to cancel booking")
def cancel_booking(
    db: Session,
    cache: ViewCache,
    booking_id: int,
    reason: str | None = None,
    user_id: int | None = None,
) -> ActionResult:
    query = db.query(Booking).filter(Booking.id == booking_id)
    if user_id is not None:
        query = query.filter(Booking.user_id == user_id)

    booking = query.first()
    if not booking:
        return ActionResult.not_found("Booking not found")

    previous = booking.status
    booking.status = BookingStatus.CANCELLED
    booking.special_requests = (
        f"{reason} (Cancellation reason)" if reason else "Cancelled by user"
    )
    _record_status(db, booking, previous, BookingStatus.CANCELLED, reason or "Cancelled by user")

    db.commit()
    db.refresh(booking)

    logger.bind(log_type="booking").info(
        f"Booking Cancelled | number={booking.booking_number} | reason={reason}"
    )
    cache.revalidate(*BOOKING_VIEWS)

    return ActionResult.ok(_booking_out(booking))


# ---------------------------------------------------------------------
# STATISTICS
# ---------------------------------------------------------------------
@action("Failed to fetch statistics")
def get_booking_stats(db: Session) -> ActionResult:
    counts = dict(
        db.query(Booking.status, func.count(Booking.id)).group_by(Booking.status).all()
    )

    revenue = db.query(func.sum(Booking.total_amount)).filter(
        Booking.payment_status == PaymentStatus.PAID
    ).scalar()

    stats = BookingStats(
        total_bookings=sum(counts.values()),
        pending_bookings=counts.get(BookingStatus.PENDING, 0),
        confirmed_bookings=counts.get(BookingStatus.CONFIRMED, 0),
        completed_bookings=counts.get(BookingStatus.COMPLETED, 0),
        cancelled_bookings=counts.get(BookingStatus.CANCELLED, 0),
        total_revenue=float(revenue or 0),
    )
    return ActionResult.ok(stats.model_dump())
