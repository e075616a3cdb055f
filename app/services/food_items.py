from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.core.redis import ViewCache
from app.core.results import ActionResult, ErrorKind, action
from app.models.enums import FoodCategory
from app.models.food_item import FoodItem
from app.schemas.food_item import FoodItemCreate, FoodItemOut, FoodItemUpdate

logger = get_logger()

FOOD_VIEWS = ("/admin/food-items", "/booking")


def _food_out(item: FoodItem) -> dict:
    return FoodItemOut.model_validate(item).model_dump(mode="json")


def _catalog_order(query):
    return query.order_by(FoodItem.category, FoodItem.name)


@action("Failed to fetch food items")
def list_available_food_items(db: Session, cache: ViewCache) -> ActionResult:
    cached = cache.get("/booking", "food-items")
    if cached is not None:
        return ActionResult.ok(cached)

    generation = cache.generation("/booking")

    items = _catalog_order(db.query(FoodItem).filter(FoodItem.is_available == True)).all()

    data = [_food_out(i) for i in items]
    cache.set("/booking", data, "food-items", generation=generation)
    return ActionResult.ok(data)


@action("Failed to fetch food items")
def list_all_food_items(db: Session) -> ActionResult:
    items = _catalog_order(db.query(FoodItem)).all()
    return ActionResult.ok([_food_out(i) for i in items])


@action("Failed to fetch food items")
def list_food_items_by_category(db: Session, category: str) -> ActionResult:
    try:
        category = FoodCategory(category)
    except ValueError:
        allowed = ", ".join(c.value for c in FoodCategory)
        return ActionResult.fail(ErrorKind.VALIDATION, f"Category must be one of: {allowed}")

    items = (
        db.query(FoodItem)
        .filter(FoodItem.category == category, FoodItem.is_available == True)
        .order_by(FoodItem.name)
        .all()
    )
    return ActionResult.ok([_food_out(i) for i in items])


@action("Failed to create food item")
def create_food_item(db: Session, cache: ViewCache, payload: dict) -> ActionResult:
    data = FoodItemCreate.model_validate(payload)

    item = FoodItem(**data.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)

    logger.bind(log_type="admin").info(f"Food item created | id={item.id} | name={item.name}")
    cache.revalidate(*FOOD_VIEWS)

    return ActionResult.ok(_food_out(item))


@action("Failed to update food item")
def update_food_item(db: Session, cache: ViewCache, item_id: int, payload: dict) -> ActionResult:
    data = FoodItemUpdate.model_validate(payload)

    item = db.get(FoodItem, item_id)
    if not item:
        return ActionResult.not_found("Food item not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(item, field, value)

    db.commit()
    db.refresh(item)

    logger.bind(log_type="admin").info(f"Food item updated | id={item.id}")
    cache.revalidate(*FOOD_VIEWS)
    return ActionResult.ok(_food_out(item))


@action("Failed to delete food item")
def delete_food_item(db: Session, cache: ViewCache, item_id: int) -> ActionResult:
    item = db.get(FoodItem, item_id)
    if not item:
        return ActionResult.not_found("Food item not found")

    db.delete(item)
    db.commit()

    logger.bind(log_type="admin").info(f"Food item deleted | id={item_id}")
    cache.revalidate(*FOOD_VIEWS)

    return ActionResult.ok(message="Food item deleted successfully")


@action("Failed to update availability")
def toggle_food_item_availability(db: Session, cache: ViewCache, item_id: int) -> ActionResult:
    item = db.get(FoodItem, item_id)
    if not item:
        return ActionResult.not_found("Food item not found")

    item.is_available = not item.is_available
    db.commit()
    db.refresh(item)

    logger.bind(log_type="admin").info(
        f"Food item availability changed | id={item.id} | is_available={item.is_available}"
    )
    cache.revalidate(*FOOD_VIEWS)
    return ActionResult.ok(_food_out(item))
