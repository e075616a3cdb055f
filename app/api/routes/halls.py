from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.api.responses import respond
from app.core.dependencies import get_cache, get_db, require_admin
from app.core.redis import ViewCache
from app.services import halls as hall_service

router = APIRouter(prefix="/halls", tags=["Halls"])


# =====================================================================
# LIST ACTIVE HALLS (Customer / Guest)
# =====================================================================
@router.get("/")
def list_halls(db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(hall_service.list_active_halls(db, cache))


# =====================================================================
# AVAILABILITY FOR A DATE + TIME SLOT
# =====================================================================
@router.get("/{hall_id}/availability")
def hall_availability(
    hall_id: int,
    event_date: str,
    time_slot: str,
    db: Session = Depends(get_db),
):
    return respond(hall_service.check_hall_availability(db, hall_id, event_date, time_slot))


# =====================================================================
# HALL DETAILS
# =====================================================================
@router.get("/{hall_id}")
def get_hall(hall_id: int, db: Session = Depends(get_db)):
    return respond(hall_service.get_hall_by_id(db, hall_id))


# =====================================================================
# CREATE HALL  (Admin Only)
# =====================================================================
@router.post("/", dependencies=[Depends(require_admin)])
def create_hall(
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(hall_service.create_hall(db, cache, payload), status.HTTP_201_CREATED)


# =====================================================================
# EDIT HALL  (Admin Only, partial)
# =====================================================================
@router.patch("/{hall_id}", dependencies=[Depends(require_admin)])
def edit_hall(
    hall_id: int,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(hall_service.update_hall(db, cache, hall_id, payload))


# =====================================================================
# DELETE HALL  (Admin Only, blocked by active bookings)
# =====================================================================
@router.delete("/{hall_id}", dependencies=[Depends(require_admin)])
def delete_hall(hall_id: int, db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(hall_service.delete_hall(db, cache, hall_id))


# =====================================================================
# TOGGLE ACTIVE FLAG  (Admin Only)
# =====================================================================
@router.post("/{hall_id}/toggle-status", dependencies=[Depends(require_admin)])
def toggle_hall(hall_id: int, db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(hall_service.toggle_hall_status(db, cache, hall_id))
