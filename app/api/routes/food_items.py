from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.api.responses import respond
from app.core.dependencies import get_cache, get_db, require_admin
from app.core.redis import ViewCache
from app.services import food_items as food_service

router = APIRouter(prefix="/food-items", tags=["Food Items"])


# ---------------- LIST AVAILABLE (optionally by category) ----------------
@router.get("/")
def list_food_items(
    category: Optional[str] = None,
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    if category:
        return respond(food_service.list_food_items_by_category(db, category))
    return respond(food_service.list_available_food_items(db, cache))


# ---------------- ADMIN ----------------
@router.post("/", dependencies=[Depends(require_admin)])
def create_food_item(
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(food_service.create_food_item(db, cache, payload), status.HTTP_201_CREATED)


@router.patch("/{item_id}", dependencies=[Depends(require_admin)])
def update_food_item(
    item_id: int,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(food_service.update_food_item(db, cache, item_id, payload))


@router.delete("/{item_id}", dependencies=[Depends(require_admin)])
def delete_food_item(item_id: int, db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(food_service.delete_food_item(db, cache, item_id))


@router.post("/{item_id}/toggle-availability", dependencies=[Depends(require_admin)])
def toggle_food_item(item_id: int, db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(food_service.toggle_food_item_availability(db, cache, item_id))
