# Import every model so Base.metadata and relationship strings resolve
from app.db.session import Base  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.hall import Hall  # noqa: F401
from app.models.food_item import FoodItem  # noqa: F401
from app.models.theme import Theme  # noqa: F401
from app.models.booking import Booking, BookingStatusEvent  # noqa: F401
