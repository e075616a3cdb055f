from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.responses import respond
from app.core.dependencies import get_db, require_admin
from app.core.logging_config import get_logger
from app.services import bookings as booking_service

router = APIRouter(
    prefix="/admin-analytics",
    tags=["Admin Analytics"],
    dependencies=[Depends(require_admin)],
)
logger = get_logger()


# =====================================================================
# BOOKING COUNTS BY STATUS + PAID REVENUE
# =====================================================================
@router.get("/bookings/stats")
def booking_stats(db: Session = Depends(get_db)):
    result = booking_service.get_booking_stats(db)

    if result.success:
        logger.bind(log_type="admin").info(
            f"Admin checked booking stats → revenue {result.data['total_revenue']}"
        )

    return respond(result)
