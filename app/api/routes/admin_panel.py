from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.api.responses import respond
from app.core.dependencies import get_cache, get_db, require_admin
from app.core.redis import ViewCache
from app.schemas.booking import CancelRequest
from app.services import bookings as booking_service
from app.services import food_items as food_service
from app.services import halls as hall_service
from app.services import themes as theme_service

router = APIRouter(
    prefix="/admin-panel",
    tags=["Admin Panel"],
    dependencies=[Depends(require_admin)],
)


# ==================================================
# INVENTORY (includes inactive / unavailable)
# ==================================================
@router.get("/halls")
def get_all_halls(db: Session = Depends(get_db)):
    return respond(hall_service.list_all_halls(db))


@router.get("/food-items")
def get_all_food_items(db: Session = Depends(get_db)):
    return respond(food_service.list_all_food_items(db))


@router.get("/themes")
def get_all_themes(db: Session = Depends(get_db)):
    return respond(theme_service.list_all_themes(db))


# ==================================================
# BOOKINGS
# ==================================================
@router.get("/bookings")
def get_all_bookings(db: Session = Depends(get_db)):
    return respond(booking_service.get_all_bookings(db))


@router.patch("/bookings/{booking_id}/status")
def update_booking_status(
    booking_id: int,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(
        booking_service.update_booking_status(db, cache, booking_id, payload.get("status"))
    )


@router.patch("/bookings/{booking_id}/payment")
def update_payment_status(
    booking_id: int,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(
        booking_service.update_payment_status(
            db,
            cache,
            booking_id,
            payload.get("payment_status"),
            payment_id=payload.get("payment_id"),
        )
    )


@router.post("/bookings/{booking_id}/cancel")
def cancel_booking(
    booking_id: int,
    payload: Optional[CancelRequest] = None,
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    reason = payload.reason if payload else None
    return respond(booking_service.cancel_booking(db, cache, booking_id, reason=reason))


@router.get("/bookings/{booking_id}/history")
def booking_history(booking_id: int, db: Session = Depends(get_db)):
    return respond(booking_service.get_booking_history(db, booking_id))
