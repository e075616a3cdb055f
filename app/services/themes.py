from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.core.redis import ViewCache
from app.core.results import ActionResult, action
from app.models.theme import Theme
from app.schemas.theme import ThemeCreate, ThemeOut, ThemeUpdate

logger = get_logger()

THEME_VIEWS = ("/admin/themes", "/booking")


def _theme_out(theme: Theme) -> dict:
    return ThemeOut.model_validate(theme).model_dump(mode="json")


@action("Failed to fetch themes")
def list_available_themes(db: Session, cache: ViewCache) -> ActionResult:
    cached = cache.get("/booking", "themes")
    if cached is not None:
        return ActionResult.ok(cached)

    generation = cache.generation("/booking")

    themes = db.query(Theme).filter(Theme.is_available == True).order_by(Theme.name).all()

    data = [_theme_out(t) for t in themes]
    cache.set("/booking", data, "themes", generation=generation)
    return ActionResult.ok(data)


@action("Failed to fetch themes")
def list_all_themes(db: Session) -> ActionResult:
    themes = db.query(Theme).order_by(Theme.name).all()
    return ActionResult.ok([_theme_out(t) for t in themes])


@action("Failed to fetch theme")
def get_theme_by_id(db: Session, theme_id: int) -> ActionResult:
    theme = db.get(Theme, theme_id)
    if not theme:
        return ActionResult.not_found("Theme not found")
    return ActionResult.ok(_theme_out(theme))


@action("Failed to create theme")
def create_theme(db: Session, cache: ViewCache, payload: dict) -> ActionResult:
    data = ThemeCreate.model_validate(payload)

    theme = Theme(**data.model_dump())
    db.add(theme)
    db.commit()
    db.refresh(theme)

    logger.bind(log_type="admin").info(f"Theme created | id={theme.id} | name={theme.name}")
    cache.revalidate(*THEME_VIEWS)

    return ActionResult.ok(_theme_out(theme))


@action("Failed to update theme")
def update_theme(db: Session, cache: ViewCache, theme_id: int, payload: dict) -> ActionResult:
    data = ThemeUpdate.model_validate(payload)

    theme = db.get(Theme, theme_id)
    if not theme:
        return ActionResult.not_found("Theme not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(theme, field, value)

    db.commit()
    db.refresh(theme)

    logger.bind(log_type="admin").info(f"Theme updated | id={theme.id}")
    cache.revalidate(*THEME_VIEWS)
    return ActionResult.ok(_theme_out(theme))


@action("Failed to delete theme")
def delete_theme(db: Session, cache: ViewCache, theme_id: int) -> ActionResult:
    theme = db.get(Theme, theme_id)
    if not theme:
        return ActionResult.not_found("Theme not found")

    db.delete(theme)
    db.commit()

    logger.bind(log_type="admin").info(f"Theme deleted | id={theme_id}")
    cache.revalidate(*THEME_VIEWS)

    return ActionResult.ok(message="Theme deleted successfully")


@action("Failed to update availability")
def toggle_theme_availability(db: Session, cache: ViewCache, theme_id: int) -> ActionResult:
    theme = db.get(Theme, theme_id)
    if not theme:
        return ActionResult.not_found("Theme not found")

    theme.is_available = not theme.is_available
    db.commit()
    db.refresh(theme)

    logger.bind(log_type="admin").info(
        f"Theme availability changed | id={theme.id} | is_available={theme.is_available}"
    )
    cache.revalidate(*THEME_VIEWS)
    return ActionResult.ok(_theme_out(theme))
