from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.core.redis import ViewCache
from app.core.results import ActionResult, action
from app.models.booking import Booking
from app.models.enums import ACTIVE_BOOKING_STATUSES
from app.models.hall import Hall
from app.schemas.hall import AvailabilityQuery, HallCreate, HallDetailOut, HallOut, HallUpdate
from app.utils.availability import has_conflict

logger = get_logger()

HALL_VIEWS = ("/admin/halls", "/halls")


def _hall_out(hall: Hall) -> dict:
    return HallOut.model_validate(hall).model_dump(mode="json")


def _find_hall(db: Session, hall_id: int):
    return db.query(Hall).filter(Hall.id == hall_id, Hall.deleted == False).first()


def _newest_first(query):
    return query.order_by(Hall.created_at.desc(), Hall.id.desc())


# =====================================================================
# READS
# =====================================================================
@action("Failed to fetch halls")
def list_active_halls(db: Session, cache: ViewCache) -> ActionResult:
    cached = cache.get("/halls", "active")
    if cached is not None:
        return ActionResult.ok(cached)

    generation = cache.generation("/halls")

    halls = _newest_first(
        db.query(Hall).filter(Hall.is_active == True, Hall.deleted == False)
    ).all()

    data = [_hall_out(h) for h in halls]
    cache.set("/halls", data, "active", generation=generation)
    return ActionResult.ok(data)


@action("Failed to fetch halls")
def list_all_halls(db: Session) -> ActionResult:
    halls = _newest_first(db.query(Hall).filter(Hall.deleted == False)).all()
    return ActionResult.ok([_hall_out(h) for h in halls])


@action("Failed to fetch hall details")
def get_hall_by_id(db: Session, hall_id: int) -> ActionResult:
    hall = _find_hall(db, hall_id)
    if not hall:
        return ActionResult.not_found("Hall not found")

    booked = (
        db.query(Booking.event_date, Booking.time_slot)
        .filter(
            Booking.hall_id == hall_id,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
        )
        .order_by(Booking.event_date)
        .all()
    )

    detail = HallDetailOut(
        **HallOut.model_validate(hall).model_dump(),
        bookings=[{"event_date": d, "time_slot": s} for d, s in booked],
    )
    return ActionResult.ok(detail.model_dump(mode="json"))


@action("Failed to check availability")
def check_hall_availability(db: Session, hall_id: int, event_date, time_slot) -> ActionResult:
    query = AvailabilityQuery.model_validate(
        {"hall_id": hall_id, "event_date": event_date, "time_slot": time_slot}
    )

    if not _find_hall(db, query.hall_id):
        return ActionResult.not_found("Hall not found")

    taken = has_conflict(db, query.hall_id, query.event_date, query.time_slot)

    return ActionResult.ok(
        {"is_available": not taken},
        message="Hall is already booked for this date and time" if taken else "Hall is available",
    )


# =====================================================================
# ADMIN MUTATIONS
# =====================================================================
@action("Failed to create hall")
def create_hall(db: Session, cache: ViewCache, payload: dict) -> ActionResult:
    data = HallCreate.model_validate(payload)

    hall = Hall(**data.model_dump(), deleted=False)
    db.add(hall)
    db.commit()
    db.refresh(hall)

    logger.bind(log_type="admin").info(f"Hall created | id={hall.id} | name={hall.name}")
    cache.revalidate(*HALL_VIEWS)

    return ActionResult.ok(_hall_out(hall))


@action("Failed to update hall")
def update_hall(db: Session, cache: ViewCache, hall_id: int, payload: dict) -> ActionResult:
    data = HallUpdate.model_validate(payload)

    hall = _find_hall(db, hall_id)
    if not hall:
        return ActionResult.not_found("Hall not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(hall, field, value)

    db.commit()
    db.refresh(hall)

    logger.bind(log_type="admin").info(f"Hall updated | id={hall.id}")
    cache.revalidate(*HALL_VIEWS, f"/halls/{hall_id}")

    return ActionResult.ok(_hall_out(hall))


@action("Failed to delete hall")
def delete_hall(db: Session, cache: ViewCache, hall_id: int) -> ActionResult:
    hall = _find_hall(db, hall_id)
    if not hall:
        return ActionResult.not_found("Hall not found")

    active_bookings = (
        db.query(Booking)
        .filter(
            Booking.hall_id == hall_id,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
        )
        .count()
    )

    if active_bookings > 0:
        return ActionResult.conflict(
            "Cannot delete hall with active bookings. Mark as inactive instead."
        )

    hall.deleted = True
    hall.is_active = False
    db.commit()

    logger.bind(log_type="admin").info(f"Hall deleted | id={hall_id}")
    cache.revalidate(*HALL_VIEWS, f"/halls/{hall_id}")

    return ActionResult.ok(message="Hall deleted successfully")


@action("Failed to update hall status")
def toggle_hall_status(db: Session, cache: ViewCache, hall_id: int) -> ActionResult:
    hall = _find_hall(db, hall_id)
    if not hall:
        return ActionResult.not_found("Hall not found")

    hall.is_active = not hall.is_active
    db.commit()
    db.refresh(hall)

    logger.bind(log_type="admin").info(f"Hall status toggled | id={hall_id} | active={hall.is_active}")
    cache.revalidate(*HALL_VIEWS, f"/halls/{hall_id}")

    return ActionResult.ok(_hall_out(hall))
