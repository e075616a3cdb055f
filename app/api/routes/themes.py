from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.api.responses import respond
from app.core.dependencies import get_cache, get_db, require_admin
from app.core.redis import ViewCache
from app.services import themes as theme_service

router = APIRouter(prefix="/themes", tags=["Themes"])


@router.get("/")
def list_themes(db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(theme_service.list_available_themes(db, cache))


@router.get("/{theme_id}")
def get_theme(theme_id: int, db: Session = Depends(get_db)):
    return respond(theme_service.get_theme_by_id(db, theme_id))


@router.post("/", dependencies=[Depends(require_admin)])
def create_theme(
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(theme_service.create_theme(db, cache, payload), status.HTTP_201_CREATED)


@router.patch("/{theme_id}", dependencies=[Depends(require_admin)])
def update_theme(
    theme_id: int,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    cache: ViewCache = Depends(get_cache),
):
    return respond(theme_service.update_theme(db, cache, theme_id, payload))


@router.delete("/{theme_id}", dependencies=[Depends(require_admin)])
def delete_theme(theme_id: int, db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(theme_service.delete_theme(db, cache, theme_id))


@router.post("/{theme_id}/toggle-availability", dependencies=[Depends(require_admin)])
def toggle_theme(theme_id: int, db: Session = Depends(get_db), cache: ViewCache = Depends(get_cache)):
    return respond(theme_service.toggle_theme_availability(db, cache, theme_id))
