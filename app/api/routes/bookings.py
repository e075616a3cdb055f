from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.api.responses import respond
from app.core.dependencies import Principal, get_cache, get_current_principal, get_db
from app.core.redis import ViewCache
from app.core.results import ActionResult
from app.schemas.booking import CancelRequest
from app.services import bookings as booking_service

router = APIRouter(prefix="/bookings", tags=["Bookings"])


# ---------------------------------------------------------------------
# CREATE BOOKING
# ---------------------------------------------------------------------
@router.post("/")
def create_booking(
    payload: dict = Body(...),
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    result = booking_service.create_booking(db, cache, principal.user_id, payload)
    return respond(result, status.HTTP_201_CREATED)


# ---------------------------------------------------------------------
# USER: MY BOOKINGS
# ---------------------------------------------------------------------
@router.get("/my")
def my_bookings(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return respond(booking_service.get_my_bookings(db, principal.user_id))


# ---------------------------------------------------------------------
# BOOKING DETAILS (owner or admin)
# ---------------------------------------------------------------------
@router.get("/{booking_id}")
def get_booking(
    booking_id: int,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    result = booking_service.get_booking_by_id(db, booking_id)

    if result.success and not principal.is_admin and result.data["user_id"] != principal.user_id:
        result = ActionResult.not_found("Booking not found")

    return respond(result)


# ---------------------------------------------------------------------
# CANCEL OWN BOOKING
# ---------------------------------------------------------------------
@router.post("/{booking_id}/cancel")
def cancel_booking(
    booking_id: int,
    payload: Optional[CancelRequest] = None,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    reason = payload.reason if payload else None
    return respond(
        booking_service.cancel_booking(
            db, cache, booking_id, reason=reason, user_id=principal.user_id
        )
    )
